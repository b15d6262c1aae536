"""
Component model — one artifact distributed through fuelup.

A component is either a main tool (``forc``, ``fuel-core``) or a plugin of
one (``forc-fmt``, ``forc-lsp``, …).  Records are parsed from the
``[component.<name>]`` tables of ``components.toml``.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, StrictBool

# forc is an ordinary manifest entry, but callers treat it slightly differently.
FORC = "forc"
# fuelup distributes itself, so it never appears in its own manifest.
FUELUP = "fuelup"


class Component(BaseModel):
    """A named artifact with its executables, source repo and build targets.

    ``is_plugin`` and ``publish`` are tri-state: ``None`` means the key was
    absent from the manifest, which is not the same as an explicit ``false``.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    is_plugin: StrictBool | None = None
    tarball_prefix: str
    executables: tuple[str, ...]
    repository_name: str
    targets: tuple[str, ...]
    publish: StrictBool | None = None

    @property
    def is_main(self) -> bool:
        """True when no ``is_plugin`` opinion is recorded."""
        return self.is_plugin is None

    @property
    def is_publishable(self) -> bool:
        """True when ``publish`` is present, whatever its value."""
        return self.publish is not None

    @classmethod
    def fuelup(cls) -> Component:
        """The synthesized record for fuelup itself."""
        return cls(
            name=FUELUP,
            is_plugin=False,
            tarball_prefix=FUELUP,
            executables=(FUELUP,),
            repository_name=FUELUP,
            targets=(FUELUP,),
            publish=True,
        )


class Components(BaseModel):
    """Every component in a manifest, keyed by its table name."""

    model_config = ConfigDict(frozen=True)

    component: dict[str, Component]

    def __len__(self) -> int:
        return len(self.component)

    def __contains__(self, name: object) -> bool:
        return name in self.component

    def get(self, name: str) -> Component | None:
        return self.component.get(name)


class Plugin(BaseModel):
    """Reduced view of a plugin component: its name and executables."""

    model_config = ConfigDict(frozen=True)

    name: str
    executables: tuple[str, ...] = ()

    @classmethod
    def from_component(cls, component: Component) -> Plugin:
        return cls(name=component.name, executables=component.executables)

    def is_main_executable(self) -> bool:
        """True when the plugin ships exactly one binary named after itself."""
        return len(self.executables) == 1 and self.executables[0] == self.name
