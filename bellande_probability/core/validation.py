import json
from typing import Any


class BellandeError(Exception):
    """Base error for the client; carries a printable message."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class ParseError(BellandeError):
    """Caller-supplied text is not valid JSON."""


class TransportError(BellandeError):
    """The request failed on the wire or the reply body was not JSON."""


def _reject_constant(token: str):
    raise ValueError(f"{token} is not a JSON number")


def parse_json_argument(name: str, text: str) -> Any:
    try:
        return json.loads(text, parse_constant=_reject_constant)
    except (TypeError, ValueError) as e:
        raise ParseError(f"--{name.replace('_', '-')} is not valid JSON: {e}") from e
