# Environment variables
ENV_BASE_URL = "FETCHKIT_BASE_URL"
ENV_TIMEOUT_MS = "FETCHKIT_TIMEOUT_MS"
ENV_ACCESS_TOKEN = "FETCHKIT_ACCESS_TOKEN"
ENV_VERIFY_SSL = "FETCHKIT_VERIFY_SSL"

# Headers
HEADER_CONTENT_TYPE = "Content-Type"
HEADER_CONTENT_LENGTH = "Content-Length"
HEADER_AUTHORIZATION = "Authorization"

# Defaults
DEFAULT_TIMEOUT_MS = 5000
DEFAULT_CONTENT_TYPE = "application/json"

# Logging / tracing
LOGGER_NAME = "fetchkit"
SPAN_NAME = "fetchkit.request"

DOTENV_FILE = ".env"
