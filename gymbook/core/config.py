import os

# Database configuration
DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./gymbook.db")
SQL_ECHO = os.getenv("SQL_ECHO", "false").lower() == "true"

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# Seats offered by a slot created without an explicit capacity
DEFAULT_SLOT_CAPACITY = int(os.getenv("DEFAULT_SLOT_CAPACITY", "10"))


def get_database_url():
    return DATABASE_URL


def get_log_level():
    return LOG_LEVEL


def get_default_slot_capacity():
    return DEFAULT_SLOT_CAPACITY


# HTTP server and CORS
HOST = os.getenv("HOST", "127.0.0.1")
PORT = int(os.getenv("PORT", "8000"))
CORS_ORIGINS = [
    origin.strip()
    for origin in os.getenv("CORS_ORIGINS", "http://localhost:3000").split(",")
    if origin.strip()
]


def get_cors_origins():
    return CORS_ORIGINS
