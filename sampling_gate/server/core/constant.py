"""Server-wide constants."""

PROJECT_NAME = "Sampling Gate"
API_V1_STR = "/api/v1"
VERSION = "0.1.0"
SECRET_KEY_HEADER = "X-Secret-Key"
