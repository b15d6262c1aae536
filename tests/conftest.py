"""
Shared test fixtures and configuration.
"""

import logging
import textwrap

import pytest

from fuelup_components.core import data


SAMPLE_MANIFEST = textwrap.dedent("""\
    [component.forc]
    name = "forc"
    tarball_prefix = "forc-binaries"
    executables = ["forc"]
    repository_name = "sway"
    targets = ["linux_amd64", "darwin_arm64"]
    publish = true

    [component.forc-client]
    name = "forc-client"
    is_plugin = true
    tarball_prefix = "forc-binaries"
    executables = ["forc-deploy", "forc-run"]
    repository_name = "sway"
    targets = ["linux_amd64", "darwin_arm64"]

    [component.forc-fmt]
    name = "forc-fmt"
    is_plugin = true
    tarball_prefix = "forc-binaries"
    executables = ["forc-fmt"]
    repository_name = "sway"
    targets = ["linux_amd64", "darwin_arm64"]

    [component.fuel-core]
    name = "fuel-core"
    tarball_prefix = "fuel-core"
    executables = ["fuel-core"]
    repository_name = "fuel-core"
    targets = ["x86_64-unknown-linux-gnu"]
    publish = false

    [component.fuel-indexer]
    name = "fuel-indexer"
    is_plugin = false
    tarball_prefix = "fuel-indexer"
    executables = ["fuel-indexer", "forc-index"]
    repository_name = "fuel-indexer"
    targets = ["x86_64-unknown-linux-gnu"]

    [component.a-tool]
    name = "a-tool"
    is_plugin = true
    tarball_prefix = "a-tool"
    executables = ["forc-run"]
    repository_name = "a-tool"
    targets = ["x86_64-unknown-linux-gnu"]
""")


@pytest.fixture
def sample_manifest() -> str:
    """Return a small manifest covering every is_plugin/publish state."""
    return SAMPLE_MANIFEST


@pytest.fixture
def embedded_manifest(monkeypatch: pytest.MonkeyPatch):
    """Replace the embedded manifest text for the duration of a test.

    Returns a setter: ``embedded_manifest(text)``.
    """

    def _set(text: str) -> None:
        monkeypatch.setattr(data, "COMPONENTS_TOML", text)

    return _set


@pytest.fixture(autouse=True)
def _restore_root_logger():
    """Undo any setup_logging() a test performs."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
