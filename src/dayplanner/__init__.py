"""Day planner - half-hour slot coverage and time statistics."""

__version__ = "0.1.0"
