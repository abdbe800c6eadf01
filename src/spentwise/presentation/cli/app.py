"""Thin CLI wrapper — Typer commands that delegate to the settings store.

All access goes through the Container (bootstrap.py); the CLI never touches
the preference backend directly.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Annotated, Optional

import typer

from spentwise.bootstrap import Container
from spentwise.domain.errors import UnknownSettingError
from spentwise.domain.models.enums import SettingCategory
from spentwise.domain.models.registry import parse_category, specs_for
from spentwise.presentation.cli.formatters import (
    console,
    error_message,
    settings_table,
    success_panel,
)

app = typer.Typer(
    name="spentwise",
    help="💰 SpentWise — personal finance settings",
    rich_markup_mode="rich",
    no_args_is_help=True,
)

# Sub-app for settings commands
settings_app = typer.Typer(
    name="settings",
    help="⚙️  Inspect and reset stored preferences",
    rich_markup_mode="rich",
    no_args_is_help=True,
)
app.add_typer(settings_app, name="settings")


@app.callback()
def main(
    ctx: typer.Context,
    config_dir: Annotated[
        Optional[Path],
        typer.Option("--config-dir", help="Directory holding preferences.json"),
    ] = None,
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Log store activity to stderr")
    ] = False,
) -> None:
    """SpentWise command line."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )
    ctx.obj = Container(config_dir)


def _resolve_category(value: str) -> SettingCategory:
    try:
        return parse_category(value)
    except UnknownSettingError as e:
        error_message(str(e))
        raise typer.Exit(code=1)


# ---------------------------------------------------------------------------
# spentwise settings show / get / path
# ---------------------------------------------------------------------------


@settings_app.command("show")
def settings_show(
    ctx: typer.Context,
    category: Annotated[
        Optional[str],
        typer.Option("--category", "-c", help="account, app-preferences or notifications"),
    ] = None,
) -> None:
    """Show the effective value of every setting."""
    container: Container = ctx.obj
    store = container.settings_store

    categories = [_resolve_category(category)] if category else list(SettingCategory)
    for cat in categories:
        rows = [
            (spec.key, store.get(spec.key), spec.default, store.is_customized(spec.key))
            for spec in specs_for(cat)
        ]
        settings_table(f"⚙️  {cat.label}", rows)


@settings_app.command("get")
def settings_get(
    ctx: typer.Context,
    key: Annotated[str, typer.Argument(help="Persisted key, e.g. darkMode")],
) -> None:
    """Print the effective value of one setting."""
    container: Container = ctx.obj
    try:
        value = container.settings_store.get(key)
    except UnknownSettingError as e:
        error_message(str(e))
        raise typer.Exit(code=1)

    typer.echo(value if isinstance(value, str) else json.dumps(value))


@settings_app.command("path")
def settings_path(ctx: typer.Context) -> None:
    """Print the location of the preferences file."""
    container: Container = ctx.obj
    typer.echo(str(container.config.preferences_path))


# ---------------------------------------------------------------------------
# spentwise settings reset
# ---------------------------------------------------------------------------


@settings_app.command("reset")
def settings_reset(
    ctx: typer.Context,
    category: Annotated[
        Optional[str],
        typer.Option("--category", "-c", help="Category to reset"),
    ] = None,
    all_settings: Annotated[
        bool, typer.Option("--all", help="Reset every category")
    ] = False,
    yes: Annotated[bool, typer.Option("--yes", "-y", help="Do not ask for confirmation")] = False,
) -> None:
    """Restore defaults for one category, or for everything with --all."""
    container: Container = ctx.obj
    store = container.settings_store

    if all_settings == bool(category):
        error_message("Pass exactly one of --category or --all")
        raise typer.Exit(code=1)

    target = _resolve_category(category) if category else None
    scope = target.label if target else "all"

    if not yes and not typer.confirm(f"Reset {scope} settings to defaults?"):
        raise typer.Abort()

    result = store.reset(target) if target else store.reset_all_settings()
    if not result.ok:
        error_message(f"Reset failed: {result.error}")
        raise typer.Exit(code=1)

    success_panel(
        f"✅ {scope} settings restored to defaults ({len(result.keys)} keys)",
        title="⚙️  Settings Reset",
    )
    console.print(str(container.config.preferences_path), style="dim", markup=False)
