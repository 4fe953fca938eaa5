"""taskboard: collaborative task tracker with real-time fan-out and notifications."""

__version__ = "1.0.0"
