"""Shared test helpers."""

import re

ANSI_PATTERN = re.compile(r"\x1b\[\d+(?:;\d+)*m")


def strip_color_codes(text: str) -> str:
    """Remove ANSI escape sequences from ``text``."""
    return ANSI_PATTERN.sub("", text)
