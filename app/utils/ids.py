import secrets
import string
import time

_BASE36 = string.digits + string.ascii_lowercase


def to_base36(number: int) -> str:
    if number == 0:
        return "0"
    digits = []
    while number:
        number, rem = divmod(number, 36)
        digits.append(_BASE36[rem])
    return "".join(reversed(digits))


def generate_id(prefix: str = "id") -> str:
    """Opaque unique id: <prefix>_<7 random chars>_<base36 ms timestamp>."""
    random_part = "".join(secrets.choice(_BASE36) for _ in range(7))
    return f"{prefix}_{random_part}_{to_base36(int(time.time() * 1000))}"
