"""Input-layer public API for key decoding and mode handlers.

Exports are split between low-level terminal decoding (`read_key`) and the
mode handlers used by the runtime loop.
"""

from .reader import ESC_SEQUENCE_TIMEOUT_MS, read_key
from .key_registry import KeyComboBinding, KeyComboRegistry
from .keys import KeyContext, handle_command_key, handle_insert_key, handle_key, handle_normal_key

__all__ = [
    "read_key",
    "ESC_SEQUENCE_TIMEOUT_MS",
    "KeyComboBinding",
    "KeyComboRegistry",
    "KeyContext",
    "handle_key",
    "handle_normal_key",
    "handle_command_key",
    "handle_insert_key",
]
