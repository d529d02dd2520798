"""Lightweight logging utilities for games and debugging."""

import datetime


def log_event(message):
    timestamp = datetime.datetime.now().strftime("%H:%M:%S")
    print(f"[{timestamp}] {message}")


def make_logger(enabled=True):
    """Return log_event, or a logger that drops every message."""
    if not enabled:
        return lambda message: None
    return log_event
