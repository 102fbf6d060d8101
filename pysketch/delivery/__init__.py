"""
Program delivery.

Writes generated programs to disk and copies them to the clipboard.
"""

from pysketch.delivery.export import (
    DEFAULT_FILENAME,
    DeliveryError,
    copy_to_clipboard,
    program_filename,
    write_program,
)

__all__ = [
    "DEFAULT_FILENAME",
    "DeliveryError",
    "copy_to_clipboard",
    "program_filename",
    "write_program",
]
