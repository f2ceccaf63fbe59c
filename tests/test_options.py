"""Tests for generator option handling (core/options.py)."""

from __future__ import annotations

import pytest

from yocli.core.options import add_legacy_aliases, legacy_key, parse_generator_options


class TestLegacyKey:
    @pytest.mark.parametrize(
        ("key", "expected"),
        [
            ("skipInstall", "skip-install"),
            ("skip_install", "skip-install"),
            ("skip-install", "skip-install"),
            ("force", "force"),
            ("someLongName", "some-long-name"),
        ],
    )
    def test_hyphenates(self, key: str, expected: str) -> None:
        assert legacy_key(key) == expected


class TestAddLegacyAliases:
    def test_adds_hyphenated_alias(self) -> None:
        options = add_legacy_aliases({"skipInstall": True})
        assert options == {"skipInstall": True, "skip-install": True}

    def test_does_not_overwrite_existing_key(self) -> None:
        options = add_legacy_aliases({"skipInstall": True, "skip-install": False})
        assert options["skip-install"] is False

    def test_returns_copy(self) -> None:
        original = {"skipInstall": True}
        add_legacy_aliases(original)
        assert original == {"skipInstall": True}


class TestParseGeneratorOptions:
    def test_flags_and_values(self) -> None:
        positionals, options = parse_generator_options(
            ["--skip-install", "--no-color", "--name=demo", "extra"]
        )
        assert positionals == ["extra"]
        assert options == {"skip-install": True, "color": False, "name": "demo"}

    def test_double_dash_ends_options(self) -> None:
        positionals, options = parse_generator_options(["--force", "--", "--literal", "x"])
        assert positionals == ["--literal", "x"]
        assert options == {"force": True}

    def test_empty(self) -> None:
        assert parse_generator_options([]) == ([], {})
