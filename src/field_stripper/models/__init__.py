"""Data models for the Field Stripper."""

from .strip_config import StripConfig, DEFAULT_INPUT_PATH, DEFAULT_OUTPUT_PATH

__all__ = ["StripConfig", "DEFAULT_INPUT_PATH", "DEFAULT_OUTPUT_PATH"]
