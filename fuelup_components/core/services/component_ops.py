"""
Component operations — lookups and listings over the embedded manifest.

Every function loads the manifest afresh and sorts its result by
component name; the mapping itself has no meaningful order.

Usage::

    from fuelup_components.core.services import component_ops

    forc = component_ops.get_by_name("forc")
    plugins = component_ops.list_plugins()
"""

from __future__ import annotations

import logging

from fuelup_components.core.config.manifest_loader import load
from fuelup_components.core.models.component import FUELUP, Component, Plugin

logger = logging.getLogger(__name__)


class NotFoundError(LookupError):
    """Raised when a component name is not known."""

    def __init__(self, name: str):
        super().__init__(f"component with name '{name}' does not exist")
        self.name = name


# ── Lookup ───────────────────────────────────────────────────────


def get_by_name(name: str) -> Component:
    """Return the component called ``name``.

    ``fuelup`` is answered without reading the manifest at all.

    Raises:
        NotFoundError: If ``name`` is neither ``fuelup`` nor a manifest key.
        ParseError: If the embedded manifest is broken.
    """
    if name == FUELUP:
        return Component.fuelup()

    component = load().get(name)
    if component is None:
        logger.debug("Component lookup missed: %s", name)
        raise NotFoundError(name)
    return component


# ── Listings ─────────────────────────────────────────────────────


def list_excluding_plugins() -> list[Component]:
    """Main components: those with no ``is_plugin`` key at all.

    An explicit ``is_plugin = false`` is excluded too.
    """
    components = load().component.values()
    return sorted((c for c in components if c.is_main), key=lambda c: c.name)


def list_publishable() -> list[Component]:
    """Components carrying a ``publish`` key, whether true or false."""
    components = load().component.values()
    return sorted((c for c in components if c.is_publishable), key=lambda c: c.name)


def list_plugins() -> list[Plugin]:
    """Plugin views of every component with ``is_plugin = true``."""
    components = load().component.values()
    plugins = [Plugin.from_component(c) for c in components if c.is_plugin is True]
    return sorted(plugins, key=lambda p: p.name)


def list_plugin_executables() -> list[str]:
    """All plugin executables, in plugin order, duplicates kept."""
    executables: list[str] = []
    for plugin in list_plugins():
        executables.extend(plugin.executables)
    return executables


def is_name_published(name: str) -> bool:
    """Check ``name`` against the publishable component names.

    This is a substring test over the publishable names joined with no
    separator, so a fragment such as ``"forc-"`` or ``"core"`` matches too.
    Existing callers rely on it; use ``list_publishable()`` for an exact
    membership test.
    """
    joined = "".join(c.name for c in list_publishable())
    return name in joined
