import os
from pathlib import Path
from dotenv import load_dotenv

# Load environment variables from .env file
# Find .env file in project root (parent of api/, core/, etc.)
project_root = Path(__file__).parent
load_dotenv(project_root / '.env')

OPENAI_API_KEY = os.getenv("OPENAI_API_KEY")
OPENAI_MODEL = os.getenv("OPENAI_MODEL", "gpt-4o")
OPENAI_TIMEOUT = float(os.getenv("OPENAI_TIMEOUT", "30"))

# "rewrite" asks the model once to fix an explanation in the wrong language,
# "template" swaps in a local sentence without another call
LANGUAGE_GUARD = os.getenv("LANGUAGE_GUARD", "rewrite").strip().lower()
if LANGUAGE_GUARD not in ("rewrite", "template"):
    LANGUAGE_GUARD = "rewrite"

CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]

APP_VERSION = os.getenv("APP_VERSION", "1.0.0")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
