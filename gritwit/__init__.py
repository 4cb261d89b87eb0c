"""Workout-of-the-day helpers: upload routes, video storage and JSON logging."""

__version__ = "0.1.0"