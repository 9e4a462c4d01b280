"""Colored upload logger: ANSI-colored console logging for attachment intake.

Color scheme:
    🟡 Yellow  Intake / validation
    🟢 Green   Blob storage
    🔵 Blue    Project update
    🟣 Magenta Progress feedback
    🔴 Red     Errors
"""

import logging
import time
from contextlib import contextmanager
from typing import Any


# ── ANSI Color Codes ─────────────────────────────────────────────────

class _Colors:
    RESET = "\033[0m"
    BOLD = "\033[1m"
    DIM = "\033[2m"

    RED = "\033[91m"
    GREEN = "\033[92m"
    YELLOW = "\033[93m"
    BLUE = "\033[94m"
    MAGENTA = "\033[95m"
    GRAY = "\033[90m"


# ── Upload Stage Definitions ─────────────────────────────────────────

class UploadStage:
    """Stages an upload batch passes through, with colors and icons."""

    INTAKE = ("INTAKE", _Colors.YELLOW, "📥")
    STORAGE = ("STORAGE", _Colors.GREEN, "💾")
    ATTACH = ("ATTACH", _Colors.BLUE, "📎")
    PROGRESS = ("PROGRESS", _Colors.MAGENTA, "⏳")


def _details(kwargs: dict[str, Any], color: str) -> str:
    if not kwargs:
        return ""
    return f" {color}({' | '.join(f'{k}={v}' for k, v in kwargs.items())}){_Colors.RESET}"


class UploadLogger:
    """Color-coded logger for upload batches.

    Usage:
        log = UploadLogger(__name__)
        with log.timed_step(UploadStage.INTAKE, "Validating 2 file(s)"):
            ...
        log.detail("planta.pdf", size=10240)
    """

    def __init__(self, component_name: str):
        self._logger = logging.getLogger(component_name)

    def step_start(self, stage: tuple[str, str, str], message: str, **kwargs: Any) -> None:
        label, color, icon = stage
        self._logger.info(
            f"{color}{_Colors.BOLD}{icon} [{label}]{_Colors.RESET} "
            f"{color}{message}{_Colors.RESET}{_details(kwargs, _Colors.GRAY)}"
        )

    def step_complete(self, stage: tuple[str, str, str], message: str, **kwargs: Any) -> None:
        label, color, icon = stage
        self._logger.info(
            f"{color}{icon} [{label}]{_Colors.RESET} "
            f"{_Colors.GREEN}✓ {message}{_Colors.RESET}{_details(kwargs, _Colors.GRAY)}"
        )

    def step_error(self, stage: tuple[str, str, str], message: str, error: Exception | None = None) -> None:
        """Rejections are expected client errors, so they log at warning level."""
        label, _, _ = stage
        formatted = (
            f"{_Colors.RED}{_Colors.BOLD}❌ [{label}]{_Colors.RESET} "
            f"{_Colors.RED}{message}{_Colors.RESET}"
        )
        if error:
            formatted += f" {_Colors.DIM}→ {type(error).__name__}: {error}{_Colors.RESET}"
        self._logger.warning(formatted)

    def detail(self, message: str, **kwargs: Any) -> None:
        self._logger.debug(
            f"   {_Colors.GRAY}├─ {message}{_Colors.RESET}{_details(kwargs, _Colors.DIM)}"
        )

    @contextmanager
    def timed_step(self, stage: tuple[str, str, str], message: str, **kwargs: Any):
        """Log start and end of a step with its elapsed time; failures are re-raised."""
        self.step_start(stage, message, **kwargs)
        start = time.perf_counter()
        try:
            yield
        except Exception as e:
            elapsed = time.perf_counter() - start
            self.step_error(stage, f"{message} failed after {elapsed:.3f}s", error=e)
            raise
        else:
            elapsed = time.perf_counter() - start
            self.step_complete(stage, f"{message} in {elapsed:.3f}s")
