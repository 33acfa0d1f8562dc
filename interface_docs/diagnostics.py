"""Diagnostic sinks receiving advisory messages from the pipeline stages."""

from __future__ import annotations

import logging
from typing import Callable, Iterator, List

DiagnosticSink = Callable[[str], None]


def null_sink(message: str) -> None:
    """Discard a diagnostic."""


class DiagnosticCollector:
    """Sink that records diagnostics in emission order."""

    def __init__(self) -> None:
        self.messages: List[str] = []

    def __call__(self, message: str) -> None:
        self.messages.append(message)

    def __iter__(self) -> Iterator[str]:
        return iter(self.messages)

    def __len__(self) -> int:
        return len(self.messages)


def logging_sink(logger: logging.Logger, level: int = logging.WARNING) -> DiagnosticSink:
    """Return a sink forwarding diagnostics to ``logger`` at ``level``."""

    def _emit(message: str) -> None:
        logger.log(level, message)

    return _emit


def fan_out(*sinks: DiagnosticSink) -> DiagnosticSink:
    """Return a sink that forwards each diagnostic to every sink in order."""

    def _emit(message: str) -> None:
        for sink in sinks:
            sink(message)

    return _emit


__all__ = ["DiagnosticCollector", "DiagnosticSink", "fan_out", "logging_sink", "null_sink"]
