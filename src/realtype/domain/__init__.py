"""Domain layer: models, ports and exceptions with no outside dependencies."""

from realtype.domain.exceptions import ConfigurationError
from realtype.domain.interfaces import ReporterInterface
from realtype.domain.models import (
    UNDEFINED,
    Boxed,
    CheckResult,
    CheckSummary,
    TypeCount,
)

__all__ = [
    "UNDEFINED",
    "Boxed",
    "CheckResult",
    "CheckSummary",
    "ConfigurationError",
    "ReporterInterface",
    "TypeCount",
]
