"""
Embedded component manifest.

``components.toml`` ships inside the package and is read into
``COMPONENTS_TOML`` once, at import.  Everything downstream parses this
constant; nothing touches the filesystem at query time.

Usage::

    from fuelup_components.core.data import COMPONENTS_TOML
"""

from __future__ import annotations

from pathlib import Path

_DATA_DIR = Path(__file__).parent

MANIFEST_FILE = "components.toml"

COMPONENTS_TOML: str = (_DATA_DIR / MANIFEST_FILE).read_text(encoding="utf-8")
