"""
Execution Status Enum.

Overall outcome of a build run.
"""
from enum import Enum


class ExecutionStatus(str, Enum):
    """Execution status values."""
    
    SUCCESS = "success"
    FAILED = "failed"
    RUNNING = "running"
