import os
from dataclasses import dataclass
from dotenv import load_dotenv


load_dotenv()


@dataclass
class AppConfig:
    gemini_api_key: str | None = None
    gemini_model: str = "gemini-2.5-pro"
    request_timeout: float = 120.0
    log_level: str = "INFO"


def load_config() -> AppConfig:
    # A missing key is reported when the first request is made, not here.
    api_key = os.getenv("GEMINI_API_KEY") or os.getenv("API_KEY") or None
    model = os.getenv("GEMINI_MODEL", "gemini-2.5-pro")
    timeout = float(os.getenv("GEMINI_TIMEOUT", "120"))
    log_level = os.getenv("LOG_LEVEL", "INFO")
    return AppConfig(
        gemini_api_key=api_key,
        gemini_model=model,
        request_timeout=timeout,
        log_level=log_level,
    )
