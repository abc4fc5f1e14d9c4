"""Rich display functions for the update run.

Each stage of the run reports through one of these helpers so the CLI
command itself stays a plain sequence of steps.
"""

from rich.markup import escape
from rich.table import Table

from secupdate.models.plan import GateResult, InstallResult, SafariDecision
from secupdate.models.update import CategoryMatch, UpdateCatalog, UpdateCategory, UpdateLabel
from secupdate.utils.formatting import console, print_info, print_success, print_warning


def print_catalog(catalog: UpdateCatalog) -> None:
    """Print every label found in the catalog."""
    console.print("Available updates:")
    for label in catalog:
        console.print(f"  [label]{escape(label)}[/]")


def print_match(match: CategoryMatch) -> None:
    """Print a label as it is matched to a category."""
    style = match.category.style
    console.print(
        f"Found [{style}]{match.category.display_name}[/] update: {escape(match.label)}"
    )


def print_bucket(category: UpdateCategory, labels: tuple[UpdateLabel, ...]) -> None:
    """Print the labels of one category that are queued for install.

    Produces no output for an empty bucket.
    """
    if not labels:
        return
    console.print(f"[{category.style}]{category.display_name}[/] updates to install:")
    for label in labels:
        console.print(f"  - {escape(label)}")


def print_gate_result(gate: GateResult) -> None:
    """Print the Safari gate's diagnostics and decision.

    Produces no output when no Safari updates were considered.
    """
    if gate.decision == SafariDecision.NOT_REQUESTED:
        return

    if gate.lookup_error is not None:
        print_warning(f"Could not check whether Safari is running: {gate.lookup_error}")
    elif gate.processes:
        console.print("Safari processes detected:")
        for process in gate.processes:
            console.print(f"  PID: {process.pid}, Command: {escape(process.command)}")

    if gate.decision == SafariDecision.SKIPPED:
        print_warning("Safari is currently running. Safari updates will be skipped.")
        print_warning("Use the -f option to force Safari updates even when Safari is running.")
    elif gate.decision == SafariDecision.FORCED:
        print_warning("Safari is running but updates will be installed due to -f flag.")
    else:
        print_info("Safari is not running. Safari updates will be installed.")


def print_install_start(label: UpdateLabel) -> None:
    """Announce the install of a label."""
    console.print(f"Installing: [label]{escape(label)}[/]")


def print_install_result(result: InstallResult) -> None:
    """Report the outcome of one install immediately."""
    if result.succeeded:
        console.print(f"[success]Successfully installed:[/] {escape(result.label)}")
    else:
        console.print(f"[error]Failed to install:[/] {escape(result.label)}")


def create_results_table(results: list[InstallResult]) -> Table:
    """Create a Rich table displaying install results.

    Args:
        results: Install results in install order.

    Returns:
        Rich Table with Status, Label, and Message columns.
    """
    table = Table(
        title="Results",
        show_header=True,
        header_style="bold_header",
        border_style="border",
    )
    table.add_column("Status", width=8, justify="center")
    table.add_column("Label", no_wrap=True)
    table.add_column("Message")

    for result in results:
        if result.succeeded:
            status = "[success]OK[/success]"
            message = "Installed"
        else:
            status = "[error]FAIL[/error]"
            message = result.error or "Unknown error"

        table.add_row(status, escape(result.label), f"[muted]{escape(message)}[/muted]")

    return table


def print_results_summary(results: list[InstallResult]) -> None:
    """Print a summary of install results.

    Args:
        results: Install results.
    """
    success_count = sum(1 for r in results if r.succeeded)
    fail_count = sum(1 for r in results if r.failed)

    if fail_count == 0:
        print_success(f"All {success_count} update(s) installed successfully.")
    else:
        console.print(
            f"\n[success]{success_count} succeeded[/success], [error]{fail_count} failed[/error]"
        )
