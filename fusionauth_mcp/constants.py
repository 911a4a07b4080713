"""
Application constants.

These values are intentionally not configurable via environment variables.
"""

# User search paging
DEFAULT_NUMBER_OF_RESULTS = 25
MIN_NUMBER_OF_RESULTS = 1
MAX_NUMBER_OF_RESULTS = 500
DEFAULT_START_ROW = 0
DEFAULT_QUERY_STRING = "*"

# User input
MIN_PASSWORD_LENGTH = 8

# Cookie FusionAuth hosted login sets with the access token
ACCESS_TOKEN_COOKIE = "app.at"

# Discovery documents
FUSIONAUTH_DOCS_URL = "https://fusionauth.io/docs"
OPENID_CONFIGURATION_PATH = "/.well-known/openid-configuration"
JWKS_PATH = "/.well-known/jwks.json"
TOKEN_ENDPOINT_PATH = "/oauth/token"
ACCESS_TOKEN_TYPE = "urn:ietf:params:oauth:token-type:access_token"
PKCE_CHALLENGE_TYPE = "urn:ietf:params:oauth:pkce:code_challenge"

# Service identity
SERVICE_NAME = "fusionauth-mcp"
SERVICE_VERSION = "0.1.0"
