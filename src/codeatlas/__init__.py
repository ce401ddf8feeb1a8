"""Static structure scanner: functions, call edges and imports per source file."""

__version__ = "0.1.0"
