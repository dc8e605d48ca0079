"""Terminal rendering for snippets."""

from .box import MODE_FULL, MODE_SUMMARY, BoxRenderer

__all__ = ["BoxRenderer", "MODE_FULL", "MODE_SUMMARY"]
