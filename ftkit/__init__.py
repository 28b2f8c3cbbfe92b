"""Text, character, memory, list and line-reading helpers, with an XPM image reader."""

__version__ = "0.1.0"