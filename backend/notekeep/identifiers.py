"""
Notekeep Backend — Record Identifiers
=======================================

What:  Generates and parses the 24-character hexadecimal ids used for
       notes and users.
Format: 8 hex digits of the creation time (epoch seconds) followed by
        16 random hex digits, e.g. "65a4f1c2e4b0a1d2c3f40516".
"""

import re
import secrets
import time
from typing import Any

from notekeep.exceptions import MalformedIdentifierError

ID_LENGTH = 24

_ID_PATTERN = re.compile(r"[0-9a-fA-F]{24}")


def new_id() -> str:
    """Returns a fresh identifier; ids sort roughly by creation time."""
    return f"{int(time.time()) & 0xFFFFFFFF:08x}{secrets.token_hex(8)}"


def is_valid_id(value: Any) -> bool:
    return isinstance(value, str) and _ID_PATTERN.fullmatch(value) is not None


def parse_id(value: Any) -> str:
    """
    Normalizes a client-supplied id.

    Returns:
        The id in lowercase.

    Raises:
        MalformedIdentifierError: value is not a 24-character hex string
    """
    if not is_valid_id(value):
        raise MalformedIdentifierError(value)
    return value.lower()
