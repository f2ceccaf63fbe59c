"""CLI application entry point and error boundary for yocli.

``yo <generator> [args] [options]`` runs a generator directly;
plain ``yo`` starts the interactive menu.

This module is the **sole error boundary** for the application.  It
catches :class:`~yocli.exceptions.YoError`, ``KeyboardInterrupt`` and any
unexpected ``Exception``, renders a user-friendly message and returns a
well-defined exit code.
"""

from __future__ import annotations

import argparse
import logging
import sys
import traceback
from collections.abc import Iterable, Sequence
from typing import Any

from yocli.cli import exit_codes
from yocli.cli.console import console
from yocli.cli.logging_config import configure_logging
from yocli.core.options import add_legacy_aliases, parse_generator_options
from yocli.exceptions import EnvironmentFatalError, YoError
from yocli.version import __version__

logger = logging.getLogger(__name__)

PACKAGE_NAME: str = "yocli"

USAGE: str = """\
Usage: yo GENERATOR [args] [options]

General options:
  -h, --help          # Print this info, or a generator's options and usage
  -V, --version       # Print version
  --generators        # Print available generators, one per line
  --debug             # Show debug logs and full error tracebacks
  --[no-]insight      # Toggle anonymous usage tracking

Install a generator:

  Generators are regular Python packages registering a
  "yocli.generators" entry point. Install them with pip:

  $ pip install yocli-generator-webapp
  $ yo webapp --help

Run the interactive menu:

  $ yo
"""


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser.

    ``--help`` is a plain flag: without a generator it prints
    :data:`USAGE` plus the installed generators, with one it is handed
    over to the generator.
    """
    parser = argparse.ArgumentParser(prog="yo", add_help=False, allow_abbrev=False)
    parser.add_argument("-h", "--help", action="store_true", default=False)
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument("--generators", action="store_true", default=False)
    parser.add_argument("--debug", action="store_true", default=False)
    parser.add_argument("--insight", action=argparse.BooleanOptionalAction, default=None)
    parser.add_argument("args", nargs="*", default=[])
    return parser


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def format_generator_list(namespaces: Iterable[str]) -> str:
    """Render namespaces as an indented tree: app generators first, subs below."""

    def sort_key(namespace: str) -> tuple[str, bool, str]:
        name, _, sub = namespace.partition(":")
        return name, sub != "app", sub

    lines = []
    for namespace in sorted(namespaces, key=sort_key):
        name, _, sub = namespace.partition(":")
        lines.append(f"  {name}" if sub == "app" else f"    {sub}")
    return "\n".join(lines)


def _on_environment_error(command: str, debug: bool, error: Exception) -> None:
    """Report a fatal environment error and terminate with its code."""
    console.print(f"[bold red]Error[/bold red] {command}\n")
    if debug:
        console.print("".join(traceback.format_exception(type(error), error, error.__traceback__)))
    else:
        console.print(str(error))
        hint = getattr(error, "hint", None)
        if hint:
            console.print(f"[yellow]Hint:[/yellow] {hint}")
    code = getattr(error, "code", None)
    raise SystemExit(code if isinstance(code, int) and code else exit_codes.GENERAL_ERROR)


def _make_insight() -> Any:
    from yocli.infra.insight import Insight

    return Insight(PACKAGE_NAME)


def _ask_insight_permission(insight: Any) -> None:
    """Ask once whether anonymous usage statistics may be reported."""
    from yocli.cli import prompts
    from yocli.cli.banners import INSIGHT_MESSAGE

    console.print(INSIGHT_MESSAGE)
    insight.opt_out = not prompts.confirm("May yocli anonymously report usage statistics?")


def _update_check() -> None:
    from yocli.cli.banners import print_update_banner
    from yocli.infra.update_check import check_for_update

    info = check_for_update(PACKAGE_NAME, __version__)
    if info is not None:
        print_update_banner(info)


def _setup_insight(insight_flag: bool | None, args: Sequence[str]) -> None:
    insight = _make_insight()
    if insight_flag is False:
        insight.opt_out = True
    elif insight_flag:
        insight.opt_out = False

    interactive_tty = sys.stdin.isatty() and sys.stdout.isatty()
    if insight_flag is not False and insight.opt_out is None:
        insight.track("downloaded")
        if interactive_tty:
            _ask_insight_permission(insight)
        return

    if insight_flag is not False:
        # Only the first two positionals: the generator and its subcommand.
        insight.track(*args[:2])
    if interactive_tty:
        _update_check()


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

def _handle_doctor() -> int:
    from yocli.cli.doctor import run_doctor

    return run_doctor()


def _handle_mascot() -> int:
    from yocli.cli.banners import print_mascot

    print_mascot()
    return exit_codes.SUCCESS


def _handle_generators(
    parsed: argparse.Namespace,
    args: list[str],
    options: dict[str, Any],
    command: str,
) -> int:
    """Discover generators, then list, explain, run one, or go interactive."""
    from yocli.infra.environment import EntryPointEnvironment

    environment = EntryPointEnvironment()
    environment.on(
        "error",
        lambda error: _on_environment_error(command, parsed.debug, error),
    )
    environment.lookup()

    if parsed.generators:
        names = environment.get_generator_names()
        if names:
            print("\n".join(names))
        return exit_codes.SUCCESS

    if not args:
        if parsed.help:
            print(USAGE)
            print("Available Generators:")
            print(format_generator_list(environment.get_generators_meta()))
            return exit_codes.SUCCESS
        return _handle_interactive(environment)

    from yocli.infra.project_config import set_default_generator

    resolved = set_default_generator(environment.cwd, args)
    logger.debug("Running %r (resolved from %r)", resolved, args)
    environment.run(resolved, options)
    return exit_codes.SUCCESS


def _handle_interactive(environment: Any) -> int:
    from yocli.cli.session import run_interactive
    from yocli.infra.config_store import JsonConfigStore, global_config_path

    run_interactive(environment, _make_insight(), JsonConfigStore(global_config_path()))
    return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the yocli CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.

    Returns
    -------
    int
        OS process exit code.
    """
    argv = sys.argv[1:] if argv is None else list(argv)
    parser = _build_parser()
    parsed, extra = parser.parse_known_args(argv)
    configure_logging(parsed.debug)

    positionals, generator_options = parse_generator_options(extra)
    args: list[str] = [*parsed.args, *positionals]
    options = add_legacy_aliases(
        {
            **generator_options,
            "help": parsed.help,
            "debug": parsed.debug,
        }
    )

    from yocli.infra.privileges import is_root

    if is_root():
        from yocli.cli.banners import print_root_warning

        print_root_warning()

    _setup_insight(parsed.insight, args)

    cmd = args[0] if args else None
    if cmd == "doctor":
        return _handle_doctor()
    if cmd in ("yo", "yeoman"):
        return _handle_mascot()

    return _handle_generators(parsed, args, options, " ".join(argv))


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point."""
    try:
        code = main()
        sys.exit(code)
    except EnvironmentFatalError as exc:
        console.print(f"[bold red]Error:[/bold red] {exc}")
        if exc.hint:
            console.print(f"[yellow]Hint:[/yellow] {exc.hint}")
        sys.exit(exc.code or exit_codes.GENERAL_ERROR)
    except YoError as exc:
        console.print(f"[bold red]Error:[/bold red] {exc}")
        if exc.hint:
            console.print(f"[yellow]Hint:[/yellow] {exc.hint}")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {exc}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
