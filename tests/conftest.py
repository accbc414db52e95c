"""Shared pytest fixtures for realtype tests."""

import io

import pytest
from rich.console import Console

from realtype.application.checks import CheckRunner
from realtype.classifiers import registry
from realtype.infrastructure.reporters import MemoryReporter


@pytest.fixture(autouse=True)
def clean_type_registry():
    """Drop custom type rules registered by a test."""
    saved = list(registry._custom_rules)
    yield
    registry._custom_rules[:] = saved


@pytest.fixture
def memory_reporter() -> MemoryReporter:
    """Create an empty in-memory reporter."""
    return MemoryReporter()


@pytest.fixture
def runner(memory_reporter: MemoryReporter) -> CheckRunner:
    """Create a CheckRunner reporting into memory."""
    return CheckRunner(memory_reporter)


@pytest.fixture
def record_console() -> Console:
    """Create a plain-text console that records everything printed."""
    return Console(file=io.StringIO(), record=True, width=100, no_color=True)
