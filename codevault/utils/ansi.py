"""Width helpers for strings carrying ANSI colour escapes."""

import re

ANSI_CSI_PATTERN = re.compile(r"\x1b\[[0-9;]*[A-Za-z]")


def strip_ansi(text: str) -> str:
    """Remove every CSI escape sequence from ``text``."""
    return ANSI_CSI_PATTERN.sub("", text)


def visible_width(text: str) -> int:
    """Count the code points a terminal would show for ``text``."""
    return len(strip_ansi(text))


def pad_visible(text: str, width: int) -> str:
    """Right-pad ``text`` with spaces up to ``width`` visible columns."""
    return text + " " * max(0, width - visible_width(text))
