"""Application settings for the CodeAI chat backend."""
import os
from dotenv import load_dotenv

# Load environment variables from a local .env file when present
load_dotenv()

DATABASE_URL = os.environ.get("DATABASE_URL", "sqlite:///./codeai.db")
IS_SQLITE = DATABASE_URL.startswith("sqlite")

# Cloud generation backend. Absence of the key is the normal local mode.
COHERE_API_KEY = os.environ.get("COHERE_API_KEY")
COHERE_MODEL = os.environ.get("COHERE_MODEL", "command-r-plus")
COHERE_TEMPERATURE = float(os.environ.get("COHERE_TEMPERATURE", "0.7"))
COHERE_MAX_TOKENS = int(os.environ.get("COHERE_MAX_TOKENS", "4096"))

ENVIRONMENT = os.environ.get("ENVIRONMENT", "development")
FRONTEND_URL = os.environ.get("FRONTEND_URL", "http://localhost:5173")
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()

# Used by the Python client in codeai.client
API_URL = os.environ.get("CODEAI_API_URL", "http://localhost:8000")

# Request limits
MAX_TITLE_LENGTH = 200
MAX_MESSAGE_LENGTH = 32000
DEFAULT_CONVERSATION_TITLE = "New Chat"
