"""Outcome of waiting on a remote operation."""
from enum import Enum


class OperationStatus(str, Enum):
    """Operation wait outcomes."""

    OK = "ok"
    FAILED = "failed"
    TIMED_OUT = "timed_out"
