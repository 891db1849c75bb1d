"""Environment variable loading with defaults."""

import os
from pathlib import Path

from dotenv import load_dotenv

# Load .envdefault first (base defaults), then .env (overrides)
_base_dir = Path(__file__).resolve().parent.parent
load_dotenv(_base_dir / ".envdefault")
load_dotenv(_base_dir / ".env", override=True)

# Yandex Translate
YANDEX_API_KEY: str = os.environ.get("YANDEX_API_KEY", "")
YANDEX_TRANSLATE_URL: str = os.environ.get(
    "YANDEX_TRANSLATE_URL", "https://translate.yandex.net/api/v1.5/tr.json/translate"
)
HTTP_TIMEOUT: float = float(os.environ.get("HTTP_TIMEOUT", "30.0"))

# Twilio
TWILIO_ACCOUNT_SID: str = os.environ.get("TWILIO_ACCOUNT_SID", "")
TWILIO_AUTH_TOKEN: str = os.environ.get("TWILIO_AUTH_TOKEN", "")
TWILIO_PHONE_NUMBER: str = os.environ.get("TWILIO_PHONE_NUMBER", "")

# Logging
LOG_LEVEL: str = os.environ.get("LOG_LEVEL", "INFO")
