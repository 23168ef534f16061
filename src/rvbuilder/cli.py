"""ReVanced builder settings CLI.

Inspect and edit the builder's settings.json: upstream sources and the
patches selected for each application package.
"""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path
from typing import Any, Final

import typer
from dotenv import load_dotenv
from pydantic import ValidationError

from rvbuilder.constants import JSON_INDENT, SETTINGS_ENV_VAR, SETTINGS_FILENAME
from rvbuilder.settings import SettingsError, SettingsStore, SourceSettings

# Pick up RVBUILDER_SETTINGS from a .env file
load_dotenv()

# ── CLI setup ────────────────────────────────────────────────────────────────
app = typer.Typer(help="ReVanced builder settings", add_completion=False)
sources_app = typer.Typer(help="Upstream source repositories")
patches_app = typer.Typer(help="Per-package patch selections")
app.add_typer(sources_app, name="sources")
app.add_typer(patches_app, name="patches")

logger: Final = logging.getLogger(__name__)  # Will be "rvbuilder.cli"

SETTINGS_OPTION = typer.Option(
    Path(SETTINGS_FILENAME),
    "--settings",
    "-s",
    envvar=SETTINGS_ENV_VAR,
    dir_okay=False,
    help="Settings file to use",
)
DEBUG_OPTION = typer.Option(False, "--debug", help="Enable debug logging")
PACKAGE_ARGUMENT = typer.Argument(..., help="Application package name")
PATCHES_ARGUMENT = typer.Argument(None, help="Patch names to select")
YES_OPTION = typer.Option(False, "--yes", "-y", help="Do not ask for confirmation")


def _open_store(settings: Path, debug: bool) -> SettingsStore:
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(message)s",
    )
    logger.debug("Using settings file %s", settings)
    return SettingsStore(settings)


def _fail(exc: SettingsError) -> typer.Exit:
    typer.secho(str(exc), fg=typer.colors.RED, err=True)
    return typer.Exit(code=1)


def _echo_json(value: Any) -> None:
    typer.echo(json.dumps(value, indent=JSON_INDENT, ensure_ascii=False))


# ───────────────────────── sources sub-commands ──────────────────────────────
@sources_app.command("show")
def show_sources(settings: Path = SETTINGS_OPTION, debug: bool = DEBUG_OPTION) -> None:
    """Print the configured sources as JSON."""
    store = _open_store(settings, debug)
    try:
        _echo_json(store.get_sources())
    except SettingsError as exc:
        raise _fail(exc) from exc


@sources_app.command("set")
def set_sources(
    cli: str | None = typer.Option(None, help="CLI repository (owner/repo)"),
    patches: str | None = typer.Option(None, help="Patches repository (owner/repo)"),
    integrations: str | None = typer.Option(None, help="Integrations repository (owner/repo)"),
    microg: str | None = typer.Option(None, help="microG repository (owner/repo)"),
    prereleases: bool | None = typer.Option(
        None, "--prereleases/--no-prereleases", help="Use pre-release builds"
    ),
    cli4: bool | None = typer.Option(None, "--cli4/--no-cli4", help="CLI is a v4 build"),
    settings: Path = SETTINGS_OPTION,
    debug: bool = DEBUG_OPTION,
) -> None:
    """Change one or more sources, keeping the others."""
    updates: dict[str, str] = {
        key: value
        for key, value in {
            "cli": cli,
            "patches": patches,
            "integrations": integrations,
            "microg": microg,
        }.items()
        if value is not None
    }
    if prereleases is not None:
        updates["prereleases"] = SourceSettings.flag(prereleases)
    if cli4 is not None:
        updates["cli4"] = SourceSettings.flag(cli4)

    if not updates:
        typer.echo("Nothing to change.")
        return

    store = _open_store(settings, debug)
    try:
        current = store.get_sources()
    except SettingsError as exc:
        raise _fail(exc) from exc

    try:
        merged = SourceSettings.model_validate({**current, **updates})
    except ValidationError as err:
        typer.secho("Source error(s):", fg=typer.colors.RED, err=True)
        for e in err.errors():
            typer.secho(f"  • {e['loc'][0]} - {e['msg']}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1) from err

    # Keys SourceSettings does not model are written back untouched
    store.write_sources({**current, **merged.as_sources()})
    typer.secho(f"Sources written to {settings}", fg=typer.colors.GREEN)


# ───────────────────────── patches sub-commands ──────────────────────────────
@patches_app.command("list")
def list_packages(settings: Path = SETTINGS_OPTION, debug: bool = DEBUG_OPTION) -> None:
    """List packages that have a stored patch selection."""
    store = _open_store(settings, debug)
    try:
        names = store.package_names()
    except SettingsError as exc:
        raise _fail(exc) from exc
    for name in names:
        typer.echo(name)


@patches_app.command("show")
def show_patches(
    package: str = PACKAGE_ARGUMENT,
    settings: Path = SETTINGS_OPTION,
    debug: bool = DEBUG_OPTION,
) -> None:
    """Print the patches selected for a package as JSON."""
    store = _open_store(settings, debug)
    try:
        _echo_json(store.get_patch_list(package))
    except SettingsError as exc:
        raise _fail(exc) from exc


@patches_app.command("set")
def set_patches(
    package: str = PACKAGE_ARGUMENT,
    patches: list[str] | None = PATCHES_ARGUMENT,
    settings: Path = SETTINGS_OPTION,
    debug: bool = DEBUG_OPTION,
) -> None:
    """Replace the patches selected for a package. No patches clears the selection."""
    store = _open_store(settings, debug)
    selected = list(patches or [])
    try:
        store.write_patches(package, selected)
    except SettingsError as exc:
        raise _fail(exc) from exc
    typer.secho(f"{len(selected)} patch(es) saved for {package}", fg=typer.colors.GREEN)


# ───────────────────────────── reset ─────────────────────────────────────────
@app.command()
def reset(
    yes: bool = YES_OPTION,
    settings: Path = SETTINGS_OPTION,
    debug: bool = DEBUG_OPTION,
) -> None:
    """Restore default sources and drop every patch selection."""
    if not yes:
        typer.confirm(f"Reset {settings} to defaults?", abort=True)
    store = _open_store(settings, debug)
    store.reset_patches_sources()
    typer.secho("Settings reset to defaults", fg=typer.colors.GREEN)


# ───────────────────────── module entrypoint ────────────────────────────────
if __name__ == "__main__":
    try:
        app()
    except KeyboardInterrupt:
        sys.exit(0)
