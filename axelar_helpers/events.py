import re
from collections.abc import Mapping
from typing import Any

from .models import EventArg

# Keys that an integer parse accepts as a prefix are positional duplicates
_POSITIONAL_KEY_RE = re.compile(r"\s*[+-]?[0-9]")


def is_positional_key(key) -> bool:
    if isinstance(key, bool):
        return False
    if isinstance(key, int):
        return True
    return isinstance(key, str) and _POSITIONAL_KEY_RE.match(key) is not None


def _event_args(event) -> Mapping:
    if isinstance(event, Mapping):
        return event["args"]
    return event.args


def event_arg_pairs(event) -> list[EventArg]:
    return [EventArg(key, value) for key, value in _event_args(event).items() if not is_positional_key(key)]


def sanitize_event_args(event) -> dict[str, Any]:
    """
    Drops the positional entries of an event's ``args``, keeping named arguments as they are.

    >>> sanitize_event_args({"args": {0: "0xabc", "from": "0xabc"}})
    {'from': '0xabc'}
    """
    return dict(event_arg_pairs(event))
