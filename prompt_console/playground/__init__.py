"""Playground session state for side-by-side model comparison."""

from prompt_console.playground.session import (
    Notifier,
    PlaygroundError,
    PlaygroundSession,
    log_notifier,
)

__all__ = [
    "Notifier",
    "PlaygroundError",
    "PlaygroundSession",
    "log_notifier",
]
