"""Canonical error codes surfaced to callers and result diagnostics."""

from __future__ import annotations

from enum import Enum


class ErrorCode(str, Enum):
    UNKNOWN = "UNKNOWN"
    INVALID_CONFIG = "INVALID_CONFIG"
    INVALID_INPUT = "INVALID_INPUT"

    NO_VALID_SPLIT = "NO_VALID_SPLIT"
    UNALIGNABLE_SPAN = "UNALIGNABLE_SPAN"
