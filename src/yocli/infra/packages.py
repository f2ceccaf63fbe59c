"""Package index lookups and ``pip`` installs for generator packages."""

from __future__ import annotations

import logging
import subprocess
import sys
from collections.abc import Sequence
from dataclasses import dataclass

import httpx

from yocli.exceptions import InstallFailedError

logger = logging.getLogger(__name__)

PYPI_JSON_URL: str = "https://pypi.org/pypi/{package}/json"


@dataclass(frozen=True, slots=True)
class PackageSummary:
    """What the index says about one package."""

    name: str
    version: str
    summary: str


class PackageIndex:
    """Read-only client for the package index JSON API."""

    def __init__(self, client: httpx.Client | None = None, *, timeout: float = 10.0) -> None:
        self._client: httpx.Client = client or httpx.Client(timeout=timeout)

    def lookup(self, name: str) -> PackageSummary | None:
        """Return the index entry for *name*, or ``None`` if it doesn't exist.

        Raises
        ------
        httpx.HTTPError
            On transport failures and non-404 error responses.
        ValueError
            When the body is not the JSON object the index normally sends.
        """
        response = self._client.get(PYPI_JSON_URL.format(package=name))
        if response.status_code == 404:
            return None
        response.raise_for_status()
        data = response.json()
        info = data.get("info") if isinstance(data, dict) else None
        if not isinstance(info, dict):
            raise ValueError(f"Unexpected index response for {name!r}")
        return PackageSummary(
            name=info.get("name") or name,
            version=info.get("version") or "",
            summary=info.get("summary") or "",
        )

    def close(self) -> None:
        self._client.close()


class PackageInstaller:
    """Installs packages into the running interpreter with ``pip``."""

    def __init__(self, python: str | None = None) -> None:
        self.python: str = python or sys.executable

    def build_command(self, names: Sequence[str], *, upgrade: bool = False) -> list[str]:
        command = [self.python, "-m", "pip", "install"]
        if upgrade:
            command.append("--upgrade")
        command.extend(names)
        return command

    def install(self, names: Sequence[str], *, upgrade: bool = False) -> None:
        """Install (or upgrade) *names*.

        Raises
        ------
        InstallFailedError
            When ``pip`` exits with a non-zero status.
        """
        if not names:
            return
        command = self.build_command(names, upgrade=upgrade)
        logger.debug("Running %s", " ".join(command))
        completed = subprocess.run(command, check=False)
        if completed.returncode != 0:
            raise InstallFailedError(
                f"pip could not install {', '.join(names)}.",
                returncode=completed.returncode,
                hint="Re-run with --debug for details, or run the pip command yourself.",
            )
