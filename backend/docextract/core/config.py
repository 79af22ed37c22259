import os
from pathlib import Path
from dotenv import load_dotenv

# Load environment variables (only in development)
# In containers, environment variables are set directly
if os.getenv("ENVIRONMENT") != "production":
    load_dotenv()

# Logging configuration
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
ENABLE_FILE_LOGGING = os.getenv("ENABLE_FILE_LOGGING", "false").lower() == "true"
LOG_DIR = Path("logs")
LOG_FILE = Path(os.getenv("LOG_FILE", str(LOG_DIR / "extraction.log")))

# Optional upper bound for files handed to the extractors (0 disables the check)
MAX_FILE_SIZE_MB = int(os.getenv("MAX_FILE_SIZE_MB", "0"))
MAX_FILE_SIZE = MAX_FILE_SIZE_MB * 1024 * 1024
