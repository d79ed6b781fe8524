import re


def mask_phone(phone: str, visible_digits: int = 2) -> str:
    if not phone:
        return ""
    if len(phone) <= visible_digits:
        return phone
    return "*" * (len(phone) - visible_digits) + phone[-visible_digits:]


def mask_code(code: str) -> str:
    if not code:
        return ""
    digits = re.sub(r"\D", "", code)
    if len(digits) <= 2:
        return "*" * len(digits)
    return "*" * (len(digits) - 2) + digits[-2:]
