import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

from dotenv import load_dotenv

# This points to the project root (one level above the package)
BASE_DIR = Path(__file__).resolve().parent.parent

# PROJECT_ROOT for easy reference throughout the app
PROJECT_ROOT = Path(os.getenv("PROJECT_ROOT", str(BASE_DIR)))

load_dotenv(PROJECT_ROOT / ".env", override=True)

# Vimeo API defaults
DEFAULT_API_BASE_URL = "https://api.vimeo.com"
DEFAULT_API_VERSION = "3.4"

# Caller secrets and the album each one may list. Slot 0 is the primary
# secret paired with the default album; the numbered slots add more callers.
TOKEN_SLOTS = (("API_SECRET", "VIMEO_ALBUM_ID"),) + tuple(
    (f"API_SECRET_{n}", f"VIMEO_ALBUM_ID_{n}") for n in range(1, 6)
)


@dataclass(frozen=True)
class Settings:
    vimeo_token: Optional[str] = None
    user_id: Optional[str] = None
    project_id: Optional[str] = None
    token_pairs: tuple[tuple[str, Optional[str]], ...] = ()
    api_base_url: str = DEFAULT_API_BASE_URL
    api_version: str = DEFAULT_API_VERSION
    fields: Optional[str] = None
    log_level: str = "INFO"


def _clean(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    value = value.strip()
    return value or None


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """
    Reads the service configuration once.
    Pass a plain dict as `environ` to build settings without touching os.environ.
    """
    env = os.environ if environ is None else environ

    token_pairs = tuple(
        (_clean(env.get(secret_key)) or "", _clean(env.get(album_key)))
        for secret_key, album_key in TOKEN_SLOTS
    )

    return Settings(
        vimeo_token=_clean(env.get("VIMEO_TOKEN")),
        user_id=_clean(env.get("VIMEO_USER_ID")),
        project_id=_clean(env.get("VIMEO_PROJECT_ID")),
        token_pairs=token_pairs,
        api_base_url=(_clean(env.get("VIMEO_API_BASE_URL")) or DEFAULT_API_BASE_URL).rstrip("/"),
        api_version=_clean(env.get("VIMEO_API_VERSION")) or DEFAULT_API_VERSION,
        fields=_clean(env.get("VIMEO_FIELDS")),
        log_level=(_clean(env.get("LOG_LEVEL")) or "INFO").upper(),
    )
