from .eth import sign_message, to_checksum
from .file import load_json, get_example_path


__all__ = [
    "sign_message",
    "to_checksum",
    "load_json",
    "get_example_path",
]
