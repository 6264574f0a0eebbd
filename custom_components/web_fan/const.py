"""Constants for the Web Fan integration."""
DOMAIN = "web_fan"

DEFAULT_NAME = "Web Fan"

# Configuration
CONF_NAME = "name"
CONF_APIROUTE = "apiroute"
CONF_POLL_INTERVAL = "pollInterval"
CONF_LISTENER = "listener"
CONF_PORT = "port"
CONF_ROTATION_SPEED = "rotationSpeed"
CONF_ROTATION_DIRECTION = "rotationDirection"
CONF_MANUFACTURER = "manufacturer"
CONF_SERIAL = "serial"
CONF_MODEL = "model"
CONF_FIRMWARE = "firmware"
CONF_USERNAME = "username"
CONF_PASSWORD = "password"
CONF_TIMEOUT = "timeout"
CONF_HTTP_METHOD = "http_method"
CONF_URL_STYLE = "url_style"

# Default settings
DEFAULT_POLL_INTERVAL = 300  # seconds
DEFAULT_PORT = 2000
DEFAULT_TIMEOUT = 3000  # milliseconds
DEFAULT_HTTP_METHOD = "GET"

URL_STYLE_QUERY = "query"
URL_STYLE_PATH = "path"
DEFAULT_URL_STYLE = URL_STYLE_QUERY

HTTP_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE", "HEAD", "OPTIONS"]

# Device API paths
PATH_STATUS = "status"
PATH_SET_STATE = "setState"
PATH_SET_ROTATION_SPEED = "setRotationSpeed"
PATH_SET_ROTATION_DIRECTION = "setRotationDirection"

# Status body keys
KEY_CURRENT_STATE = "currentState"
KEY_ROTATION_SPEED = "rotationSpeed"
KEY_ROTATION_DIRECTION = "rotationDirection"

# Webhook characteristics
CHAR_STATE = "state"
CHAR_ROTATION_SPEED = "rotationSpeed"
CHAR_ROTATION_DIRECTION = "rotationDirection"
CHARACTERISTICS = (CHAR_STATE, CHAR_ROTATION_SPEED, CHAR_ROTATION_DIRECTION)

RESPONSE_HANDLING = "Handling request"
RESPONSE_INVALID = "Invalid request"

# RotationDirection: 0 = clockwise, 1 = counter-clockwise
ROTATION_CLOCKWISE = 0
ROTATION_COUNTER_CLOCKWISE = 1
