"""Allow ``python -m yocli`` invocation.

Delegates to the CLI error-boundary entry point so that
``python -m yocli`` behaves identically to the ``yo`` console script.
"""

from __future__ import annotations

from yocli.cli.app import cli

if __name__ == "__main__":
    cli()
