"""Tests for the entry-point generator environment (infra/environment.py)."""

from __future__ import annotations

from typing import Any
from unittest.mock import patch

import pytest

from conftest import entry_point
from yocli.exceptions import EnvironmentFatalError, GeneratorNotFoundError
from yocli.infra.environment import EntryPointEnvironment, normalize_namespace


def _env(*entry_points: Any) -> EntryPointEnvironment:
    env = EntryPointEnvironment()
    with patch.object(EntryPointEnvironment, "_discover", return_value=list(entry_points)):
        env.lookup()
    return env


def _collect_errors(env: EntryPointEnvironment) -> list[Exception]:
    errors: list[Exception] = []
    env.on("error", errors.append)
    return errors


class TestNormalizeNamespace:
    def test_bare_name_gets_app(self) -> None:
        assert normalize_namespace("webapp") == "webapp:app"

    def test_qualified_name_unchanged(self) -> None:
        assert normalize_namespace("webapp:controller") == "webapp:controller"


class TestLookup:
    def test_builds_meta_table(self) -> None:
        env = _env(
            entry_point("webapp", print, package="generator-webapp"),
            entry_point("webapp:controller", print, package="generator-webapp"),
        )
        meta = env.get_generators_meta()
        assert sorted(meta) == ["webapp:app", "webapp:controller"]
        assert meta["webapp:app"].package == "generator-webapp"
        assert meta["webapp:app"].version == "2.1.0"
        assert env.get_generator_names() == ["webapp"]

    def test_invokes_callback_after_discovery(self) -> None:
        env = EntryPointEnvironment()
        seen: list[list[str]] = []
        with patch.object(
            EntryPointEnvironment, "_discover", return_value=[entry_point("lib", print)]
        ):
            env.lookup(lambda: seen.append(env.get_generator_names()))
        assert seen == [["lib"]]

    def test_lookup_replaces_previous_table(self) -> None:
        env = _env(entry_point("webapp", print))
        with patch.object(EntryPointEnvironment, "_discover", return_value=[]):
            env.lookup()
        assert env.get_generators_meta() == {}

    def test_duplicate_namespace_keeps_first(self) -> None:
        first = entry_point("webapp", print, package="first")
        second = entry_point("webapp:app", print, package="second")
        env = _env(first, second)
        assert env.get_generators_meta()["webapp:app"].package == "first"

    def test_default_discovery_uses_entry_point_group(self) -> None:
        env = EntryPointEnvironment(group="yocli.test-nothing-registered")
        env.lookup()
        assert env.get_generator_names() == []


class TestRun:
    def test_runs_generator_with_remaining_args(self) -> None:
        calls: list[tuple[list[str], dict[str, Any]]] = []
        env = _env(entry_point("webapp", lambda args, options: calls.append((args, options))))

        env.run(["webapp", "MyApp"], {"skip-install": True})

        assert calls == [(["MyApp"], {"skip-install": True})]

    def test_unknown_namespace_emits_not_found(self) -> None:
        env = _env()
        errors = _collect_errors(env)

        env.run(["missing"], {})

        assert len(errors) == 1
        assert isinstance(errors[0], GeneratorNotFoundError)
        assert "missing:app" in str(errors[0])

    def test_empty_args_emit_error(self) -> None:
        env = _env()
        errors = _collect_errors(env)
        env.run([], {})
        assert isinstance(errors[0], GeneratorNotFoundError)

    def test_generator_failure_is_wrapped_with_code(self) -> None:
        class Exploded(Exception):
            code = 7

        def generator(args: list[str], options: dict[str, Any]) -> None:
            raise Exploded("disk full")

        env = _env(entry_point("webapp", generator))
        errors = _collect_errors(env)

        env.run(["webapp"], {})

        assert isinstance(errors[0], EnvironmentFatalError)
        assert errors[0].code == 7
        assert isinstance(errors[0].__cause__, Exploded)

    def test_generator_failure_defaults_to_code_one(self) -> None:
        def generator(args: list[str], options: dict[str, Any]) -> None:
            raise ValueError("bad")

        env = _env(entry_point("webapp", generator))
        errors = _collect_errors(env)
        env.run(["webapp"], {})
        assert errors[0].code == 1

    def test_error_without_observer_is_raised(self) -> None:
        env = _env()
        with pytest.raises(GeneratorNotFoundError):
            env.run(["missing"], {})
