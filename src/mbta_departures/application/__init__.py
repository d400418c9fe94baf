"""Application layer - use cases for building the departure board."""
