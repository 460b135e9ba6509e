import os
from dotenv import load_dotenv

# Resolve absolute path to the project .env
BASE_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
ENV_PATH = os.path.join(BASE_DIR, ".env")

# Load .env (absolute path ensures it works from any working directory)
load_dotenv(ENV_PATH)


class Config:
    OPENAI_MODEL = os.getenv("OPENAI_MODEL", "gpt-4o-mini")
    READER_BASE_URL = os.getenv("READER_BASE_URL", "https://r.jina.ai/")
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()


def get_openai_key():
    """Credential for the LLM service, read per request; None when unset."""
    return os.getenv("OPENAI_API_KEY")
