"""Colored transition logger: ANSI-colored console logging for content lifecycle changes.

Provides a TransitionLogger with color-coded output per lifecycle stage,
making it easy to follow what editors did to which item in the terminal.

Color scheme:
    🟢 Green:   Create / Publish
    🟡 Yellow:  Draft saved
    🔵 Blue:    Draft discarded
    🟣 Magenta: Archive
    🔴 Red:     Delete / Errors
    ⚪ Gray:    Timing / Details
"""

import logging
import time
from contextlib import contextmanager
from typing import Any


# ── ANSI Color Codes ─────────────────────────────────────────────────

class _Colors:
    """ANSI escape codes for terminal colors."""

    RESET = "\033[0m"
    BOLD = "\033[1m"
    DIM = "\033[2m"

    RED = "\033[91m"
    GREEN = "\033[92m"
    YELLOW = "\033[93m"
    BLUE = "\033[94m"
    MAGENTA = "\033[95m"
    GRAY = "\033[90m"


# ── Lifecycle Stage Definitions ──────────────────────────────────────

class TransitionStage:
    """Predefined lifecycle stages with colors and icons."""

    CREATE = ("CREATE", _Colors.GREEN, "🆕")
    DRAFT = ("DRAFT", _Colors.YELLOW, "📝")
    PUBLISH = ("PUBLISH", _Colors.GREEN, "🚀")
    DISCARD = ("DISCARD", _Colors.BLUE, "↩️")
    ARCHIVE = ("ARCHIVE", _Colors.MAGENTA, "📦")
    DELETE = ("DELETE", _Colors.RED, "🗑️")


# ── TransitionLogger ─────────────────────────────────────────────────

class TransitionLogger:
    """Color-coded logger for content lifecycle transitions.

    Usage:
        log = TransitionLogger("ContentItemService")
        with log.track(TransitionStage.PUBLISH, "projects/content_123", site="main"):
            await repository.update(item)
    """

    def __init__(self, component_name: str):
        self._logger = logging.getLogger(component_name)

    def transition(self, stage: tuple[str, str, str], target: str, **kwargs: Any) -> None:
        """Log a completed transition with its stage color."""
        label, color, icon = stage
        formatted = (
            f"{color}{_Colors.BOLD}{icon} [{label}]{_Colors.RESET} "
            f"{color}{target}{_Colors.RESET}"
        )
        formatted += self._format_details(kwargs)
        self._logger.info(formatted)

    def failure(self, stage: tuple[str, str, str], target: str, error: Exception) -> None:
        """Log a failed transition in red."""
        label, _, _ = stage
        formatted = (
            f"{_Colors.RED}{_Colors.BOLD}❌ [{label}]{_Colors.RESET} "
            f"{_Colors.RED}{target}{_Colors.RESET} "
            f"{_Colors.DIM}→ {type(error).__name__}: {error}{_Colors.RESET}"
        )
        self._logger.warning(formatted)

    @contextmanager
    def track(self, stage: tuple[str, str, str], target: str, **kwargs: Any):
        """Context manager that logs the outcome of a transition with elapsed time."""
        start = time.perf_counter()
        try:
            yield
        except Exception as e:
            self.failure(stage, target, e)
            raise
        else:
            elapsed_ms = (time.perf_counter() - start) * 1000
            self.transition(stage, target, elapsed=f"{elapsed_ms:.1f}ms", **kwargs)

    @staticmethod
    def _format_details(details: dict[str, Any]) -> str:
        if not details:
            return ""
        joined = " | ".join(f"{k}={v}" for k, v in details.items())
        return f" {_Colors.GRAY}({joined}){_Colors.RESET}"
