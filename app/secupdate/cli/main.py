"""Main CLI application entry point.

Defines the Typer application and the single update command. The run is a
straight pipeline: list the catalog, extract labels, classify them, gate
Safari, then install each planned label.
"""

import logging
from pathlib import Path
from typing import Annotated

import typer
from rich.logging import RichHandler

from secupdate import __version__
from secupdate.backends.base import BackendError, UpdateBackend
from secupdate.backends.softwareupdate import SoftwareUpdateBackend
from secupdate.cli import display
from secupdate.core.catalog import extract_labels
from secupdate.core.classifier import classify
from secupdate.core.gate import evaluate_safari_gate
from secupdate.core.installer import run_installs
from secupdate.core.planner import build_plan
from secupdate.core.settings import SettingsError, UpdaterSettings, load_settings
from secupdate.models.config import RunConfig
from secupdate.models.update import UpdateCategory
from secupdate.utils.formatting import console, err_console, print_error, print_info

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="secupdate",
    help="Install XProtect, MRT and Safari updates in the background.",
    rich_markup_mode="rich",
    add_completion=False,
)


def help_callback(ctx: typer.Context, value: bool) -> None:
    """Print usage and exit with status 1."""
    if value:
        typer.echo(ctx.get_help())
        raise typer.Exit(code=1)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"secupdate version {__version__}")
        raise typer.Exit()


def _reject_arguments(ctx: typer.Context) -> None:
    """Report unrecognized options with usage and exit with status 1."""
    print_error(f"Invalid option: {' '.join(ctx.args)}")
    err_console.print(ctx.get_usage(), markup=False, highlight=False)
    raise typer.Exit(code=1)


def get_backend(settings: UpdaterSettings) -> UpdateBackend:
    """Create the update backend for this system."""
    return SoftwareUpdateBackend(settings)


def _configure_logging(verbose: bool) -> None:
    """Route secupdate's log records to stderr through Rich."""
    package_logger = logging.getLogger("secupdate")
    package_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    if not any(isinstance(h, RichHandler) for h in package_logger.handlers):
        package_logger.addHandler(
            RichHandler(console=err_console, show_time=False, show_path=False)
        )


@app.command(
    add_help_option=False,
    context_settings={"ignore_unknown_options": True, "allow_extra_args": True},
)
def main(
    ctx: typer.Context,
    install_xprotect: Annotated[
        bool,
        typer.Option(
            "--install-xprotect",
            "-x",
            help="Install updates containing XProtect (and MRTConfigData) in the label.",
        ),
    ] = False,
    install_safari: Annotated[
        bool,
        typer.Option(
            "--install-safari",
            "-s",
            help="Install updates containing Safari in the label.",
        ),
    ] = False,
    force_safari_update: Annotated[
        bool,
        typer.Option(
            "--force-safari-update",
            "-f",
            help="Install Safari updates even if Safari is currently running.",
        ),
    ] = False,
    config: Annotated[
        Path | None,
        typer.Option(
            "--config",
            "-c",
            help="Settings file (default: ~/.config/secupdate/config.toml).",
            dir_okay=False,
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable debug logging."),
    ] = False,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
    help_: Annotated[
        bool | None,
        typer.Option(
            "--help",
            "-h",
            callback=help_callback,
            is_eager=True,
            help="Show this message and exit.",
        ),
    ] = None,
) -> None:
    """Install XProtect, MRTConfigData and Safari updates.

    With neither -x nor -s, both kinds of updates are installed.
    """
    if ctx.args:
        _reject_arguments(ctx)

    _configure_logging(verbose)

    try:
        settings = load_settings(config)
    except SettingsError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from None

    run_config = RunConfig.from_flags(
        install_xprotect=install_xprotect,
        install_safari=install_safari,
        force_safari=force_safari_update,
    )
    logger.debug("Run configuration: %s", run_config)
    if not (install_xprotect or install_safari):
        print_info("Updating Safari and XProtect")

    backend = get_backend(settings)
    if not backend.is_available():
        print_error("softwareupdate is not available on this system")
        raise typer.Exit(code=1)

    try:
        _run(backend, run_config)
    except BackendError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from None


def _run(backend: UpdateBackend, run_config: RunConfig) -> None:
    """Execute the update pipeline.

    Raises:
        typer.Exit: On fatal errors and when there is nothing to install.
        BackendError: If an external tool cannot be run.
    """
    print_info("Checking for available software updates...")
    listing = backend.list_updates()

    if not listing.success:
        print_error("Failed to check for software updates")
        err_console.print(listing.output, markup=False, highlight=False)
        raise typer.Exit(code=1)

    catalog = extract_labels(listing.output)
    if not catalog:
        print_info("No software updates are available at this time.")
        raise typer.Exit(code=0)

    display.print_catalog(catalog)

    buckets = classify(catalog, run_config)
    for match in buckets.matches:
        display.print_match(match)

    display.print_bucket(UpdateCategory.XPROTECT, buckets.xprotect)
    display.print_bucket(UpdateCategory.MRT_CONFIG_DATA, buckets.mrtconfigdata)

    gate = evaluate_safari_gate(buckets, run_config, backend)
    display.print_gate_result(gate)
    if gate.decision.admits_safari:
        display.print_bucket(UpdateCategory.SAFARI, buckets.safari)

    plan = build_plan(buckets, gate.decision)
    if plan.is_empty:
        print_info("No matching updates found to install.")
        raise typer.Exit(code=0)

    results = run_installs(
        backend,
        plan.labels,
        on_start=display.print_install_start,
        on_result=display.print_install_result,
    )

    console.print()
    console.print(display.create_results_table(results))
    display.print_results_summary(results)
    print_info("Update process completed.")


if __name__ == "__main__":
    app()
