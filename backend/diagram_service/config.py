import os
from dotenv import load_dotenv

# Load .env from project root
load_dotenv()

CORE_SERVICE_URL = os.getenv("CORE_SERVICE_URL", "http://localhost:8081")
CORE_SERVICE_TIMEOUT = float(os.getenv("CORE_SERVICE_TIMEOUT", "30"))

# Local JSON snapshot used instead of the core service when set
CATALOG_FILE = os.getenv("CATALOG_FILE")

CORS_ORIGINS = [
    origin.strip()
    for origin in os.getenv("CORS_ORIGINS", "http://localhost:5173").split(",")
    if origin.strip()
]

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
