import os

from .utils.env import env_int, env_list
from .utils.env_loader import ensure_loaded

ensure_loaded()

_DEFAULT_ALLOWED_ORIGINS = [
    "https://yes-tv-ab8fb.web.app",
    "https://api.blutv.online",
    "http://api.blutv.online",
]


class Settings:
    ENV: str = os.getenv("ENV", "dev")
    DEV_MODE: bool = ENV.lower() == "dev"
    APP_HOST: str = os.getenv("APP_HOST", "0.0.0.0")
    APP_PORT: int = env_int("APP_PORT", default=env_int("PORT", default=3000))
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    DATA_DIR: str = os.getenv("DATA_DIR", os.path.join(os.getcwd(), "data"))
    ALLOWED_ORIGINS: list[str] = env_list("ALLOWED_ORIGINS", default=_DEFAULT_ALLOWED_ORIGINS)
    # OTP
    OTP_TTL_SECS: int = env_int("OTP_TTL_SECS", default=300)
    OTP_SMS_PROVIDER: str = os.getenv("OTP_SMS_PROVIDER", "log")  # log|http
    OTP_SMS_SENDER_NAME: str = os.getenv("OTP_SMS_SENDER_NAME", "YES TV")
    OTP_SMS_TEMPLATE: str = os.getenv("OTP_SMS_TEMPLATE", "Your YES TV verification code is {code}")
    OTP_SMS_HTTP_URL: str = os.getenv("OTP_SMS_HTTP_URL", "")
    OTP_SMS_HTTP_AUTH_TOKEN: str = os.getenv("OTP_SMS_HTTP_AUTH_TOKEN", "")
    OTP_SMS_TIMEOUT_SECS: float = float(os.getenv("OTP_SMS_TIMEOUT_SECS", "10"))
    # Clients / playback
    CLIENT_NAME_TEMPLATE: str = os.getenv("CLIENT_NAME_TEMPLATE", "Cliente {phone}")
    PLAYBACK_LOG_MAX: int = env_int("PLAYBACK_LOG_MAX", default=200)


def check_settings(cfg: Settings) -> None:
    """Refuse configurations that are only acceptable in dev."""
    if cfg.PLAYBACK_LOG_MAX < 1:
        raise RuntimeError("PLAYBACK_LOG_MAX must be at least 1")
    if cfg.OTP_TTL_SECS < 1:
        raise RuntimeError("OTP_TTL_SECS must be at least 1")
    provider = (cfg.OTP_SMS_PROVIDER or "log").lower()
    if provider == "http" and not cfg.OTP_SMS_HTTP_URL:
        raise RuntimeError("OTP_SMS_HTTP_URL must be set when OTP_SMS_PROVIDER=http")
    if cfg.DEV_MODE:
        return
    if not cfg.ALLOWED_ORIGINS or "*" in cfg.ALLOWED_ORIGINS:
        raise RuntimeError("ALLOWED_ORIGINS must list explicit origins when ENV!=dev")
    if provider == "log":
        raise RuntimeError("OTP_SMS_PROVIDER=log is not permitted when ENV!=dev")


settings = Settings()
check_settings(settings)
