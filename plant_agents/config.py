import os
from dotenv import load_dotenv

load_dotenv()

OPENAI_MODEL = os.environ.get("OPENAI_MODEL", "gpt-4o-mini")

DEFAULT_PLANT_ID = "PLANT_001"
DEFAULT_LINE_ID = "LINE_A"


def get_openai_api_key() -> str:
    """
    Return the OPENAI_API_KEY from environment.

    Raises:
        RuntimeError: if the env var is missing or empty.
    """
    api_key = os.environ.get("OPENAI_API_KEY", "").strip()
    if not api_key:
        raise RuntimeError(
            "OPENAI_API_KEY is required; set it in your environment or .env file."
        )
    return api_key


def get_plant_id() -> str:
    """Plant identifier, overridable via MANUFACTURING_PLANT_ID."""
    return os.environ.get("MANUFACTURING_PLANT_ID") or DEFAULT_PLANT_ID


def get_line_id() -> str:
    """Production line identifier, overridable via PRODUCTION_LINE_ID."""
    return os.environ.get("PRODUCTION_LINE_ID") or DEFAULT_LINE_ID
