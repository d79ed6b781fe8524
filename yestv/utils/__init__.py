from .env import env_int, env_list
from .ids import new_id
from .phone import mask_code, mask_phone
from .times import utc_now_iso

__all__ = [
    "env_int",
    "env_list",
    "new_id",
    "mask_code",
    "mask_phone",
    "utc_now_iso",
]
