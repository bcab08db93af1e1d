"""task-countdown: a live countdown list of tasks with urgency levels."""

__version__ = "0.1.0"
