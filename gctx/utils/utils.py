import os
from typing import Tuple

from gctx.exceptions import InvalidProfileName

# Stands in for "the active profile" wherever a profile name is accepted
CURRENT = "."


def validate_profile_name(name: str) -> str:
    """Return name unchanged, or raise InvalidProfileName if it can't name a record file."""
    if not name or not name.strip():
        raise InvalidProfileName("profile name cannot be empty")
    separators = {"/", os.sep} | ({os.altsep} if os.altsep else set())
    if any(sep in name for sep in separators):
        raise InvalidProfileName(f'invalid profile name "{name}": must not contain a path separator')
    if name in (CURRENT, ".."):
        raise InvalidProfileName(f'invalid profile name "{name}"')
    return name


def parse_rename(token: str) -> Tuple[str, str]:
    """Split a NEW=OLD token. Returns (old, new), or raises ValueError if malformed."""
    new, sep, old = token.partition("=")
    if not sep or not new or not old:
        raise ValueError(f'expected NEW=OLD, got "{token}"')
    return old, new


def is_rename(token: str) -> bool:
    """Check whether a positional token asks for a rename"""
    return "=" in token
