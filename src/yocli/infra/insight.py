"""Anonymous usage tracking.

Events are recorded as slash-joined paths (``/yoyo/home``) on the
``yocli.insight`` logger.  Nothing is sent over the network.  The user's
answer to the opt-in question is persisted in a small JSON store so that
it is only ever asked once.
"""

from __future__ import annotations

import logging
from pathlib import Path

from yocli.infra.config_store import JsonConfigStore, user_config_dir

logger = logging.getLogger("yocli.insight")

OPT_OUT_KEY: str = "optOut"


def default_insight_path(package: str) -> Path:
    return user_config_dir() / f"insight-{package}.json"


class Insight:
    """Fire-and-forget usage tracker.

    Satisfies :class:`~yocli.core.protocols.Analytics` structurally.

    ``opt_out`` is ``None`` until the user answered the permission
    question, in which case nothing is tracked.
    """

    def __init__(self, package: str, store: JsonConfigStore | None = None) -> None:
        self.package: str = package
        self.config: JsonConfigStore = store or JsonConfigStore(default_insight_path(package))

    @property
    def opt_out(self) -> bool | None:
        value = self.config.get(OPT_OUT_KEY)
        return value if isinstance(value, bool) else None

    @opt_out.setter
    def opt_out(self, value: bool) -> None:
        self.config.set(OPT_OUT_KEY, bool(value))

    def track(self, *labels: str) -> None:
        """Record one usage event made of *labels*."""
        if self.opt_out is not False or not labels:
            return
        path = "/" + "/".join(str(label) for label in labels)
        logger.debug("track %s", path)
