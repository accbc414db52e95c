"""
Infrastructure adapters.

Reporters implementing ReporterInterface for terminal and in-memory output.
"""

from realtype.infrastructure.reporters import MemoryReporter, RichConsoleReporter

__all__ = [
    "MemoryReporter",
    "RichConsoleReporter",
]
