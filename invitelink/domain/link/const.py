"""Invitation link constants."""

# Named URL param keys
PSK_PARAM_KEY = "k"
OWNER_ORBIT_DB_IDENTITY_PARAM_KEY = "o"
AUTH_DATA_KEY = "a"

# Keys of the nested auth data query
COMMUNITY_NAME_KEY = "c"
INVITATION_SEED_KEY = "s"

# Payload attribute the nested auth data is merged under
AUTH_DATA_OBJECT_KEY = "auth_data"

DEEP_URL_SCHEME = "quiet"
DEEP_URL_SCHEME_WITH_SEPARATOR = f"{DEEP_URL_SCHEME}://"
QUIET_JOIN_PAGE = "https://tryquiet.org/join"

MAX_NESTING_DEPTH = 4
PSK_LENGTH = 32
LIBP2P_PORT = 443
