"""Clipboard helpers for copying the address and private key from the terminal."""

from __future__ import annotations

import base64
import logging
import os
import sys
from typing import TextIO

import pyperclip

logger = logging.getLogger(__name__)


def copy_with_pyperclip(text: str) -> bool:
    if not text:
        return False
    try:
        pyperclip.copy(text)
    except pyperclip.PyperclipException as e:
        logger.debug("pyperclip unavailable: %s", e)
        return False
    return True


def copy_with_osc52(text: str, stream: TextIO | None = None) -> bool:
    """Ask the terminal emulator to set the clipboard via an OSC 52 sequence."""
    if not text:
        return False

    payload = base64.b64encode(text.encode("utf-8")).decode("ascii")
    sequence = f"\x1b]52;c;{payload}\x07"
    # tmux only forwards OSC sequences wrapped in DCS passthrough.
    if os.getenv("TMUX"):
        sequence = f"\x1bPtmux;\x1b{sequence}\x1b\\"

    output = stream or sys.__stdout__ or sys.stdout
    try:
        output.write(sequence)
        output.flush()
    except (OSError, ValueError) as e:
        logger.debug("OSC 52 write failed: %s", e)
        return False
    return True


def copy_text(text: str) -> str | None:
    """Copy ``text`` and return the method that worked, or ``None``."""
    if copy_with_pyperclip(text):
        return "pyperclip"
    if copy_with_osc52(text):
        return "osc52"
    return None
