"""Utility functions for steptrace."""

from steptrace.utils.hashing import state_fingerprint
from steptrace.utils.logging import configure_logging, get_logger

__all__ = ["state_fingerprint", "configure_logging", "get_logger"]
