r"""Utility helpers shared by the retry executors."""

from __future__ import annotations

__all__ = ["DiagnosticLogger"]

from aretry.utils.diagnostics import DiagnosticLogger
