import secrets
import threading
import time
from dataclasses import dataclass
from typing import Callable, Dict, Optional


@dataclass
class OTPConfig:
    ttl_secs: int = 300


def generate_otp_code() -> str:
    return str(100000 + secrets.randbelow(900000))


@dataclass
class OTPEntry:
    code: str
    expires_at: float


class OTPStore:
    """Single-use codes keyed by phone, held in memory for the process lifetime.

    One pending code per phone. Expired entries are only dropped when someone
    tries to validate them.
    """

    def __init__(
        self,
        cfg: Optional[OTPConfig] = None,
        *,
        clock: Callable[[], float] = time.time,
        generator: Callable[[], str] = generate_otp_code,
    ):
        self.cfg = cfg or OTPConfig()
        self._clock = clock
        self._generate = generator
        self._entries: Dict[str, OTPEntry] = {}
        self._lock = threading.Lock()

    def issue(self, phone: str) -> str:
        code = self._generate()
        entry = OTPEntry(code=code, expires_at=self._clock() + self.cfg.ttl_secs)
        with self._lock:
            self._entries[phone] = entry
        return code

    def validate(self, phone: str, code: str) -> bool:
        with self._lock:
            entry = self._entries.get(phone)
            if entry is None:
                return False
            if self._clock() > entry.expires_at:
                del self._entries[phone]
                return False
            if entry.code != code:
                return False
            del self._entries[phone]
            return True

    def pending(self, phone: str) -> bool:
        with self._lock:
            return phone in self._entries

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
