"""Constants for the MBTA v3 API adapter.

API Documentation: https://api-v3.mbta.com/docs/swagger/index.html
"""

MBTA_BASE_URL = "https://api-v3.mbta.com"
ROUTES_PATH = "/routes"  # GET /routes?type=...
SCHEDULES_PATH = "/schedules"  # GET /schedules?filter[route]=...&include=...

# Related entities requested alongside schedules
SCHEDULE_INCLUDES = "route,trip,stop,prediction"

API_KEY_HEADER = "x-api-key"

# JSON:API media type used by the MBTA v3 API
DEFAULT_HEADERS = {
    "Accept": "application/vnd.api+json",
}
