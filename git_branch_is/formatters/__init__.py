"""Formatting utilities for git-branch-is output."""

from .messages import (
    format_error,
    format_invalid_pattern_message,
    format_match_message,
    format_mismatch_message,
)

__all__ = [
    "format_error",
    "format_invalid_pattern_message",
    "format_match_message",
    "format_mismatch_message",
]
