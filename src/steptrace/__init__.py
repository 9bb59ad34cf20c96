"""steptrace: time-travel navigation over recorded Minimal Machine executions."""

__version__ = "0.3.0"
