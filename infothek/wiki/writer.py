#!/usr/bin/env python3
"""
writer.py
---------
Writes generated page lines to disk.
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from pathlib import Path
from typing import Iterable, Optional, Union

# --- Local imports ---
from infothek.core.exceptions import ArgumentNullError, ExportError


def write_to_file(
    directory: Union[str, Path],
    filename: str,
    lines: Iterable[Optional[str]],
) -> Path:
    """
    Write page lines to ``directory/filename``.

    The directory is created when missing. None lines (markup a target
    does not support) are skipped; every other line ends with a newline.

    Args:
        directory: Target directory
        filename: File name including extension
        lines: Page content

    Returns:
        Path of the written file

    Raises:
        ArgumentNullError: If an argument is None or empty
        ExportError: If the file cannot be written
    """
    if directory is None or str(directory) == "":
        raise ArgumentNullError("directory")
    if not filename:
        raise ArgumentNullError("filename")
    if lines is None:
        raise ArgumentNullError("lines")

    target = Path(directory) / filename
    content = "".join(f"{line}\n" for line in lines if line is not None)
    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(content, encoding="utf-8")
    except OSError as e:
        raise ExportError(f"Failed to write {target}: {e}") from e
    return target
