import os

import pytest

os.environ.setdefault("ENV", "dev")
os.environ.setdefault("OTP_SMS_PROVIDER", "log")

from fastapi.testclient import TestClient  # noqa: E402

from yestv.config import Settings  # noqa: E402
from yestv.main import create_app  # noqa: E402
from yestv.otp import OTPConfig, OTPStore  # noqa: E402
from yestv.sms_provider import SmsProvider  # noqa: E402
from yestv.storage import JsonStore  # noqa: E402


class FakeClock:
    def __init__(self, start: float = 1_700_000_000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class CaptureBackend:
    """Remembers every message instead of sending it."""

    def __init__(self):
        self.sent: list[tuple[str, str]] = []

    def send(self, phone: str, message: str) -> None:
        self.sent.append((phone, message))

    def last_code(self, phone: str) -> str:
        for to, message in reversed(self.sent):
            if to == phone:
                return message.rsplit(" ", 1)[-1]
        raise AssertionError(f"no code sent to {phone}")


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def cfg(tmp_path):
    s = Settings()
    s.DATA_DIR = str(tmp_path / "data")
    s.PLAYBACK_LOG_MAX = 5
    return s


@pytest.fixture
def store(cfg):
    return JsonStore(cfg.DATA_DIR)


@pytest.fixture
def sms_backend():
    return CaptureBackend()


@pytest.fixture
def client(cfg, clock, sms_backend):
    otp_store = OTPStore(OTPConfig(ttl_secs=300), clock=clock)
    sms = SmsProvider(sms_backend, "Your code is {code}")
    app = create_app(cfg, otp_store=otp_store, sms=sms)
    return TestClient(app)
