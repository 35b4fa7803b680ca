import re
from typing import Optional

from ninja.errors import HttpError

ID_INVALIDO = "ID deve ser um número válido"

_ID_PATTERN = re.compile(r"\s*([0-9]+)\s*")


def parse_id(value: str) -> int:
    """
    Convert a path parameter to a positive integer id.

    Only plain ASCII digits are accepted, optionally surrounded by
    whitespace. Fractions and exponents ("1.5", "1e3"), digit separators
    ("1_000") and non-ASCII digits are rejected even though they read as
    numbers. Raises HttpError(400) for anything else.
    """
    match = _ID_PATTERN.fullmatch(str(value))
    if not match:
        raise HttpError(400, ID_INVALIDO)
    number = int(match.group(1))
    if number <= 0:
        raise HttpError(400, ID_INVALIDO)
    return number


def is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


def require_text(value: Optional[str], message: str) -> None:
    if is_blank(value):
        raise HttpError(400, message)
