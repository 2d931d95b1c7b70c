import secrets
import string

_ALPHABET = string.ascii_letters + string.digits


def generate_unique_id(length: int = 20) -> str:
    """Opaque id of letters and digits, e.g. generate_unique_id(8) -> "aZ3k9QpX"."""
    return "".join(secrets.choice(_ALPHABET) for _ in range(length))


def new_record_id() -> str:
    return generate_unique_id(20)


def new_issue_id() -> str:
    return generate_unique_id(8)
