"""Constants shared across the EdgeGrid client."""

HTTPS_PREFIX = "https://"

# Environment variables
ENV_PREFIX = "AKAMAI"
ENV_FIELDS = ("HOST", "ACCESS_TOKEN", "CLIENT_TOKEN", "CLIENT_SECRET", "MAX_BODY")
TEST_MODE_VAR = "EDGEGRID_ENV"
TEST_MODE_VALUE = "test"

DEFAULT_SECTION = "default"
REQUIRED_FIELDS = ("client_token", "client_secret", "access_token", "host")

# Bytes of a POST body covered by the content hash
DEFAULT_MAX_BODY = 131072

# Signing
SIGNING_ALGORITHM = "EG1-HMAC-SHA256"
TIMESTAMP_FORMAT = "%Y%m%dT%H:%M:%S+0000"
HEADER_AUTHORIZATION = "Authorization"
HEADER_CONTENT_TYPE = "Content-Type"
DEFAULT_CONTENT_TYPE = "application/json"
DEFAULT_METHOD = "GET"

# Redirects
REDIRECT_STATUS_CODES: frozenset[int] = frozenset([300, 301, 302, 303, 307, 308])
DEFAULT_MAX_REDIRECTS = 10

DEFAULT_TIMEOUT = 30.0
