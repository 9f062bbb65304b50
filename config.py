from os import getenv
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

# Database settings
DATABASE_URL = getenv("DATABASE_URL")
if not DATABASE_URL:
    raise ValueError("DATABASE_URL not set in .env")

# Token settings
JWT_SECRET = getenv("JWT_SECRET")
if not JWT_SECRET:
    raise ValueError("JWT_SECRET not set in .env")
JWT_ALGORITHM = getenv("JWT_ALGORITHM", "HS256")
JWT_EXPIRATION_MINUTES = int(getenv("JWT_EXPIRATION_MINUTES", "60"))

# In-memory users
ADMIN_PASSWORD = getenv("ADMIN_PASSWORD", "password")
USER_PASSWORD = getenv("USER_PASSWORD", "password")

# API settings
API_PREFIX = getenv("API_PREFIX", "/api/v1")
LOGIN_PATH = "/login"
GRAPHQL_PATH = "/graphql"
DEFAULT_PAGE_SIZE = int(getenv("DEFAULT_PAGE_SIZE", "20"))
MAX_PAGE_SIZE = int(getenv("MAX_PAGE_SIZE", "100"))

# Server settings
HOST = getenv("HOST", "127.0.0.1")
PORT = int(getenv("PORT", "8000"))

# Logging
LOG_LEVEL = getenv("LOG_LEVEL", "INFO").upper()

# Error logging channel (optional)
BOT_TOKEN = getenv("BOT_TOKEN")
ERROR_CHANNEL_ID = getenv("ERROR_CHANNEL_ID")
if ERROR_CHANNEL_ID:
    ERROR_CHANNEL_ID = int(ERROR_CHANNEL_ID)
