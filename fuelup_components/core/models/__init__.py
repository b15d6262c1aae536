"""
Domain models — Pydantic types for the component registry.

All models are re-exported here for convenient access:

    from fuelup_components.core.models import Component, Components, Plugin
"""

from fuelup_components.core.models.component import (
    FORC,
    FUELUP,
    Component,
    Components,
    Plugin,
)

__all__ = [
    "FORC",
    "FUELUP",
    "Component",
    "Components",
    "Plugin",
]
