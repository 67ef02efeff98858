"""Utility functions for the Field Stripper."""

from .validation import ValidationUtils

__all__ = ["ValidationUtils"]
