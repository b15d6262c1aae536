"""
Manifest loader — parses components.toml into domain models.

This is the only place TOML is read.  It deserializes the text with
``tomllib``, validates it against the Pydantic models, and returns a
typed ``Components`` mapping.  Nothing is cached: every call parses.
"""

from __future__ import annotations

import logging
import tomllib

from pydantic import ValidationError

from fuelup_components.core import data
from fuelup_components.core.models.component import Components

logger = logging.getLogger(__name__)


class ParseError(Exception):
    """Raised when manifest text is not a valid component manifest."""


def parse(text: str) -> Components:
    """Parse manifest text into a ``Components`` mapping.

    Optional keys (``is_plugin``, ``publish``) left out of a table read
    back as ``None``.  Unknown keys are ignored.

    Args:
        text: TOML document with one ``[component.<name>]`` table per entry.

    Returns:
        Validated Components model.

    Raises:
        ParseError: On malformed TOML (duplicate keys included), a missing
            required field, or a field of the wrong type.
    """
    try:
        raw = tomllib.loads(text)
    except tomllib.TOMLDecodeError as e:
        raise ParseError(f"Invalid TOML in component manifest: {e}") from e

    try:
        components = Components.model_validate(raw)
    except ValidationError as e:
        raise ParseError(f"Invalid component manifest: {e}") from e

    logger.debug("Parsed component manifest with %d components", len(components))
    return components


def load() -> Components:
    """Parse the manifest embedded in the package.

    A ``ParseError`` here means the package was built with a broken
    ``components.toml``; callers should not try to carry on.
    """
    return parse(data.COMPONENTS_TOML)
