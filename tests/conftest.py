"""Shared pytest fixtures and fakes for the yocli test suite.

Guidelines
----------
* No internet access in any test — httpx is driven by ``MockTransport``.
* No real prompts — ``yocli.cli.prompts`` helpers are patched.
* No writes outside ``tmp_path`` — HOME and XDG_CONFIG_HOME are redirected.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from pathlib import Path
from types import SimpleNamespace
from typing import Any

import pytest

from yocli.core.models import GeneratorMeta


class FakeEnvironment:
    """In-memory stand-in for the generator environment."""

    def __init__(self, metas: Sequence[GeneratorMeta] = (), cwd: Path | None = None) -> None:
        self.cwd = cwd or Path(".")
        self.metas = list(metas)
        self.lookups = 0
        self.runs: list[tuple[list[str], dict[str, Any]]] = []
        self.observers: dict[str, list[Callable[[Exception], None]]] = {}

    def lookup(self, callback: Callable[[], None] | None = None) -> None:
        self.lookups += 1
        if callback is not None:
            callback()

    def get_generator_names(self) -> list[str]:
        return sorted({meta.generator_name for meta in self.metas})

    def get_generators_meta(self) -> dict[str, GeneratorMeta]:
        return {meta.namespace: meta for meta in self.metas}

    def run(self, args: Sequence[str], options: Mapping[str, Any]) -> None:
        self.runs.append((list(args), dict(options)))

    def on(self, event: str, handler: Callable[[Exception], None]) -> None:
        self.observers.setdefault(event, []).append(handler)


class RecordingInsight:
    """Analytics double that records every ``track`` call."""

    def __init__(self) -> None:
        self.tracked: list[tuple[str, ...]] = []

    def track(self, *labels: str) -> None:
        self.tracked.append(labels)


def meta(namespace: str, package: str | None = None, version: str | None = "1.0.0") -> GeneratorMeta:
    return GeneratorMeta(
        namespace=namespace,
        package=package,
        version=version,
        target=f"{namespace.split(':')[0]}_gen:main",
    )


def entry_point(name: str, target: Callable[..., Any], *, package: str = "generator-demo") -> Any:
    """Entry-point look-alike accepted by ``EntryPointEnvironment``."""
    return SimpleNamespace(
        name=name,
        value=f"{package.replace('-', '_')}:{name.replace(':', '_')}",
        dist=SimpleNamespace(name=package, version="2.1.0"),
        load=lambda: target,
    )


@pytest.fixture(autouse=True)
def _isolated_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("XDG_CONFIG_HOME", str(home / ".config"))
    return home


@pytest.fixture()
def fake_env(tmp_path: Path) -> FakeEnvironment:
    return FakeEnvironment(cwd=tmp_path)


@pytest.fixture()
def insight() -> RecordingInsight:
    return RecordingInsight()
