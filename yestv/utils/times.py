from datetime import datetime, timezone


def utc_now_iso() -> str:
    """Current UTC time as ``2024-01-31T12:00:00.000Z``."""
    now = datetime.now(timezone.utc)
    return now.strftime("%Y-%m-%dT%H:%M:%S.") + f"{now.microsecond // 1000:03d}Z"
