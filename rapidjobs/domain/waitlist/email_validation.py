import re
from typing import Any

# one or more non-whitespace, "@", non-whitespace, ".", non-whitespace
EMAIL_PATTERN = re.compile(r"\S+@\S+\.\S+")


def normalize(value: Any) -> str:
    # Arrays and objects are never an address
    if not value or not isinstance(value, (str, int, float)):
        return ""
    return str(value).strip()


def is_valid(email: str) -> bool:
    if not email:
        return False
    return EMAIL_PATTERN.fullmatch(email) is not None
