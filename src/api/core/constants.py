API_VERSION_HEADER = "X-Admin-Console-Version"
REQUEST_ID_HEADER = "X-Request-ID"

# Paths the request logger skips
UNLOGGED_PATHS = {"/health", "/health/liveness"}

# Console version of the shared sidebar config, sent on sidebar reads and writes
SIDEBAR_VERSION_HEADER = "X-Sidebar-Version"
