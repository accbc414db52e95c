"""Configuration and value loading for the realtype command line."""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from realtype.domain.exceptions import ConfigurationError
from realtype.domain.models import UNDEFINED

UNDEFINED_LITERAL = "undefined"


@dataclass(frozen=True)
class RunConfig:
    """Options shared by every command."""

    verbose: bool = False
    log_file: str | None = None
    color: bool = True
    strict: bool = False


def parse_value(text: str) -> Any:
    """
    Parse one command-line value.

    JSON literals are decoded (``NaN`` and ``Infinity`` included),
    ``undefined`` becomes UNDEFINED and anything else stays a string.
    """
    if text == UNDEFINED_LITERAL:
        return UNDEFINED
    try:
        return json.loads(text)
    except json.JSONDecodeError:
        return text


def parse_values(texts: tuple[str, ...] | list[str]) -> list[Any]:
    """Parse every command-line value, keeping order."""
    return [parse_value(text) for text in texts]


def load_values(path: Path) -> list[Any]:
    """
    Load values from a JSON file holding a single array.

    Args:
        path: Path to the JSON file

    Returns:
        The decoded array items

    Raises:
        ConfigurationError: If the file is missing, unreadable, invalid
            or not an array
    """
    if not path.exists():
        raise ConfigurationError(f"Values file not found: {path}")

    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigurationError(
            f"Invalid JSON in {path}: {e}",
            hint="The file must contain one JSON array, e.g. [1, null, NaN]",
        ) from e
    except UnicodeDecodeError as e:
        raise ConfigurationError(
            f"Values file is not valid UTF-8: {path}: {e}",
        ) from e
    except OSError as e:
        raise ConfigurationError(f"Cannot read values file {path}: {e}") from e

    if not isinstance(data, list):
        raise ConfigurationError(
            f"Expected a JSON array in {path}, got {type(data).__name__}"
        )
    return data


def collect_values(texts: tuple[str, ...], file: str | None) -> list[Any]:
    """
    Gather values from arguments and an optional file, file items first.

    Raises:
        ConfigurationError: If no values were given or the file is invalid
    """
    values: list[Any] = []
    if file:
        values.extend(load_values(Path(file)))
    values.extend(parse_values(texts))
    if not values:
        raise ConfigurationError(
            "No values given",
            hint="Pass values as arguments or use --file with a JSON array",
        )
    return values
