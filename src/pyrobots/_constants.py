"""Internal constants shared across the library."""

BASE_URL = "http://localhost:4000"
ROBOTS_PATH = "/robots"
USER_AGENT = "pyrobots/1"

#: Key the service nests the freshly created record under on ``POST``.
CREATE_ENVELOPE_KEY = "newRobot"

#: Alternative identifier keys accepted on decode (MongoDB-backed services emit ``_id``).
ID_KEYS: tuple[str, ...] = ("id", "_id")
