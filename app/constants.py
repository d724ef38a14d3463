# Runtime configuration for the Recipe Instructions backend
import os
from dotenv import load_dotenv

load_dotenv()


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in ("1", "true", "yes")


DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./recipes.db")
DB_TIMEOUT_SECONDS = float(os.getenv("DB_TIMEOUT_SECONDS", "30"))
SQL_ECHO = _env_flag("SQL_ECHO", "false")

SECRET_KEY = os.getenv("SECRET_KEY", "your-secret-key")  # Set a secure key in production
ALGORITHM = os.getenv("ALGORITHM", "HS256")
ACCESS_TOKEN_EXPIRE_MINUTES = int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", "60"))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

RATE_LIMIT_ENABLED = _env_flag("RATE_LIMIT_ENABLED", "true")
RATE_LIMIT_WRITES = os.getenv("RATE_LIMIT_WRITES", "60/minute")

# Attach the driver message to 500 responses
EXPOSE_ERROR_DETAILS = _env_flag("EXPOSE_ERROR_DETAILS", "true")

def parse_origins(raw: str) -> list:
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


CORS_ORIGINS = parse_origins(os.getenv("CORS_ORIGINS", "*"))

# Response messages shared by the store and the routers
RECIPE_NOT_FOUND = "Recipe not found"
INSTRUCTION_NOT_FOUND = "Instruction not found"
NOT_RECIPE_OWNER = "Unauthorized: You do not own this recipe"
DATABASE_ERROR = "Database error"

# Largest value the integer id and step_number columns hold
MAX_DB_INTEGER = 2**31 - 1
INTERNAL_SERVER_ERROR = "Internal server error"
