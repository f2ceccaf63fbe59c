"""Detection of elevated process privileges."""

from __future__ import annotations

import os


def is_root() -> bool:
    """Return ``True`` when running with an effective uid of 0.

    Always ``False`` on platforms without ``os.geteuid`` (Windows).
    """
    geteuid = getattr(os, "geteuid", None)
    if geteuid is None:
        return False
    return geteuid() == 0
