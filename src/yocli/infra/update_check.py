"""Check the package index for a newer release of yocli."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass

import httpx

logger = logging.getLogger(__name__)

PYPI_JSON_URL: str = "https://pypi.org/pypi/{package}/json"
DEFAULT_TIMEOUT: float = 3.0


@dataclass(frozen=True, slots=True)
class UpdateInfo:
    """A newer release than the one currently installed."""

    package: str
    current: str
    latest: str


_RELEASE_RE = re.compile(
    r"v?(?P<release>\d+(?:\.\d+)*)"
    r"(?:[-_.]?(?P<phase>alpha|beta|rc|a|b|c)[-_.]?(?P<number>\d*))?",
    re.IGNORECASE,
)
_PHASE_RANK: dict[str, int] = {"a": 0, "alpha": 0, "b": 1, "beta": 1, "c": 2, "rc": 2}
_FINAL_RANK: int = 3


def version_key(version: str) -> tuple[tuple[int, ...], tuple[int, int]]:
    """Return a sortable ``(release, pre-release)`` key for *version*.

    ``"1.10.0rc1"`` → ``((1, 10, 0), (2, 1))``.  A final release sorts
    after every alpha, beta or release candidate of the same numbers.
    Anything unparseable yields an empty release.
    """
    match = _RELEASE_RE.match(version.strip())
    if match is None:
        return ((), (_FINAL_RANK, 0))
    release = tuple(int(part) for part in match.group("release").split("."))
    phase = match.group("phase")
    if phase is None:
        return (release, (_FINAL_RANK, 0))
    return (release, (_PHASE_RANK[phase.lower()], int(match.group("number") or 0)))


def check_for_update(
    package: str,
    current: str,
    *,
    client: httpx.Client | None = None,
    timeout: float = DEFAULT_TIMEOUT,
) -> UpdateInfo | None:
    """Return :class:`UpdateInfo` when the index has a newer release.

    Any network or payload problem is logged and treated as "no update".
    """
    url = PYPI_JSON_URL.format(package=package)
    owns_client = client is None
    http = client or httpx.Client(timeout=timeout)
    try:
        response = http.get(url)
        response.raise_for_status()
        latest = response.json()["info"]["version"]
    except (httpx.HTTPError, ValueError, KeyError, TypeError) as exc:
        logger.debug("Update check for %s failed: %s", package, exc)
        return None
    finally:
        if owns_client:
            http.close()

    if not isinstance(latest, str):
        return None
    if version_key(latest) > version_key(current):
        return UpdateInfo(package=package, current=current, latest=latest)
    return None
