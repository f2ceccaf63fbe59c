"""``yo doctor`` — environment diagnostics command.

Collects facts about the runtime and renders a Rich table summarising
whether yocli can discover and run generators here.  Falls back to a
plain-text table when Rich is unavailable.
"""

from __future__ import annotations

import json
import platform
import sys
from pathlib import Path

from yocli.cli import exit_codes
from yocli.cli.console import console
from yocli.infra.config_store import global_config_path
from yocli.infra.environment import EntryPointEnvironment
from yocli.infra.privileges import is_root
from yocli.infra.project_config import PROJECT_CONFIG_FILENAME
from yocli.version import __version__

Check = tuple[str, str, str]


# ---------------------------------------------------------------------------
# Diagnostic collectors
# ---------------------------------------------------------------------------

def _yocli_version_check() -> Check:
    return "yocli", __version__, "[green]OK[/green]"


def _python_version_check() -> Check:
    """Return (label, value, status) for the Python version row."""
    version = platform.python_version()
    ok = sys.version_info[:2] >= (3, 10)
    status = "[green]OK[/green]" if ok else "[red]FAIL (>=3.10 required)[/red]"
    return "Python", version, status


def _questionary_check() -> Check:
    try:
        import questionary
    except ImportError:
        return "questionary", "NOT INSTALLED", "[red]FAIL[/red]"
    return "questionary", getattr(questionary, "__version__", "unknown"), "[green]OK[/green]"


def _json_file_check(label: str, path: Path) -> Check:
    """Return a row describing whether *path* holds a JSON object."""
    if not path.exists():
        return label, "not present", "[green]OK[/green]"
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
        return label, f"unreadable: {exc}", "[yellow]WARN[/yellow]"
    if not isinstance(data, dict):
        return label, "not a JSON object", "[yellow]WARN[/yellow]"
    return label, str(path), "[green]OK[/green]"


def _generators_check(environment: EntryPointEnvironment | None = None) -> Check:
    env = environment or EntryPointEnvironment()
    env.lookup()
    names = env.get_generator_names()
    if not names:
        return "Generators", "none installed", "[yellow]WARN[/yellow]"
    return "Generators", ", ".join(names), "[green]OK[/green]"


def _root_check() -> Check:
    if is_root():
        return "User", "root", "[yellow]WARN[/yellow]"
    return "User", "unprivileged", "[green]OK[/green]"


def _os_check() -> Check:
    """Return (label, value, status) for the OS row."""
    system_raw = platform.system()
    system_display = {"Darwin": "macOS"}.get(system_raw, system_raw)
    value = f"{system_display} {platform.release()} ({platform.machine()})"
    return "OS", value, "[green]OK[/green]"


def _status_plain(status: str) -> str:
    """Convert rich-markup status to plain text."""
    for word in ("FAIL", "WARN", "OK"):
        if word in status:
            return word
    return status


def _print_plain_doctor_table(checks: list[Check]) -> None:
    print("\nyo doctor", file=sys.stderr)
    print("=" * 64, file=sys.stderr)
    print(f"{'Component':<14} {'Value':<38} {'Status':<8}", file=sys.stderr)
    print("-" * 64, file=sys.stderr)
    for label, value, status in checks:
        print(f"{label:<14} {value:<38} {_status_plain(status):<8}", file=sys.stderr)
    print(file=sys.stderr)


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------

def run_doctor(cwd: Path | None = None) -> int:
    """Run every diagnostic and render the summary.

    Returns
    -------
    int
        :data:`exit_codes.SUCCESS` unless a check FAILs, in which case
        :data:`exit_codes.GENERAL_ERROR`.
    """
    project_dir = cwd if cwd is not None else Path.cwd()
    checks = [
        _yocli_version_check(),
        _python_version_check(),
        _questionary_check(),
        _json_file_check("Global config", global_config_path()),
        _json_file_check("Project config", project_dir / PROJECT_CONFIG_FILENAME),
        _generators_check(EntryPointEnvironment(project_dir)),
        _root_check(),
        _os_check(),
    ]
    has_failure = any("FAIL" in status for _, _, status in checks)

    try:
        from rich.table import Table
    except ModuleNotFoundError:
        _print_plain_doctor_table(checks)
        print("Some checks failed." if has_failure else "All checks passed.", file=sys.stderr)
    else:
        table = Table(
            title="yo doctor",
            show_header=True,
            header_style="bold cyan",
            border_style="dim",
        )
        table.add_column("Component", style="bold", min_width=14)
        table.add_column("Value", min_width=20)
        table.add_column("Status", justify="center", min_width=8)
        for label, value, status in checks:
            table.add_row(label, value, status)

        console.print()
        console.print(table)
        console.print()
        if has_failure:
            console.print("[bold red]Some checks failed.[/bold red]")
        else:
            console.print("[bold green]All checks passed.[/bold green]")

    return exit_codes.GENERAL_ERROR if has_failure else exit_codes.SUCCESS
