"""Delivery of generated programs: files and the system clipboard.

These helpers sit at the I/O boundary and never influence what the
compiler produces.

* ``write_program`` stores the source atomically and raises
  ``DeliveryError`` when it cannot.
* ``copy_to_clipboard`` reports failure by returning ``False``; callers
  fall back to writing a file.
"""

from __future__ import annotations

import logging
import re
import shutil
import subprocess
import sys
from pathlib import Path

from pysketch.utils.fs import atomic_write_text

logger = logging.getLogger(__name__)

DEFAULT_FILENAME = "drawing.py"

CLIPBOARD_TIMEOUT_S = 5.0

# Tried in order; the first one found on PATH is used.
_CLIPBOARD_COMMANDS: tuple[tuple[str, ...], ...] = (
    ("pbcopy",),
    ("wl-copy",),
    ("xclip", "-selection", "clipboard"),
    ("xsel", "--clipboard", "--input"),
    ("clip",),
)


class DeliveryError(Exception):
    """Raised when a generated program cannot be written."""

    pass


def program_filename(project_name: str) -> str:
    """File name for a project's program.

    Every character outside ``[A-Za-z0-9]`` becomes ``_`` and the result
    is lowercased, e.g. ``"My Cat!"`` → ``"my_cat_.py"``.
    """
    if not project_name:
        return DEFAULT_FILENAME
    return re.sub(r"[^a-zA-Z0-9]", "_", project_name).lower() + ".py"


def write_program(
    code: str,
    path: str | Path | None = None,
    *,
    directory: str | Path | None = None,
    filename: str = DEFAULT_FILENAME,
) -> Path:
    """Write program text to disk.

    Parameters
    ----------
    code : str
        Program source.
    path : str | Path | None
        Explicit target file.  When omitted the target is
        ``directory / filename``.
    directory : str | Path | None
        Output directory, default the current working directory.
    filename : str
        File name used with *directory*, default ``drawing.py``.

    Returns
    -------
    Path
        Path of the written file.

    Raises
    ------
    DeliveryError
        If the file cannot be written.
    """
    if path is None:
        target = Path(directory or ".") / filename
    else:
        target = Path(path)

    try:
        atomic_write_text(target, code)
    except (OSError, RuntimeError) as e:
        raise DeliveryError(f"Could not write program to {target}: {e}") from e

    logger.info("Wrote %d lines to %s", code.count("\n") + 1, target)
    return target


def _find_clipboard_command() -> tuple[str, ...] | None:
    for cmd in _CLIPBOARD_COMMANDS:
        if cmd[0] == "clip" and sys.platform != "win32":
            continue
        if shutil.which(cmd[0]):
            return cmd
    return None


def copy_to_clipboard(code: str) -> bool:
    """Copy program text to the system clipboard.

    Returns
    -------
    bool
        ``True`` when the clipboard command succeeded, ``False`` when no
        clipboard command is available or it failed.
    """
    cmd = _find_clipboard_command()
    if cmd is None:
        logger.error("Failed to copy to clipboard: no clipboard command found")
        return False

    try:
        subprocess.run(
            cmd,
            input=code.encode("utf-8"),
            check=True,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.PIPE,
            timeout=CLIPBOARD_TIMEOUT_S,
        )
    except (OSError, subprocess.SubprocessError) as e:
        logger.error("Failed to copy to clipboard with %s: %s", cmd[0], e)
        return False

    logger.debug("Copied %d characters with %s", len(code), cmd[0])
    return True
