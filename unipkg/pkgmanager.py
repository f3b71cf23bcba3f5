# unipkg/pkgmanager.py

import enum
import logging
import re
import subprocess
from dataclasses import dataclass
from typing import Optional

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from unipkg import overrides
from unipkg.backends import descriptor_of
from unipkg.utils import osdetect, probe
from unipkg.utils.errors import (
    CommandFailed,
    ElevationUnavailable,
    InvalidPackageName,
)
from unipkg.utils.osdetect import OSFamily

logger = logging.getLogger(__name__)
console = Console()
err_console = Console(stderr=True)

PACKAGE_NAME = re.compile(r"[A-Za-z0-9._-]+")
ELEVATION_WRAPPERS = ("sudo", "doas")


class Operation(enum.Enum):
    INSTALL = "install"
    UNINSTALL = "uninstall"

    def __str__(self):
        return self.value


class OutcomeKind(enum.Enum):
    INSTALLED = "installed"
    ALREADY_PRESENT = "already present"
    UNINSTALLED = "uninstalled"
    ALREADY_ABSENT = "already absent"
    SKIPPED_BY_OVERRIDE = "skipped by override"
    FAILED = "failed"


@dataclass(frozen=True)
class OperationOutcome:
    kind: OutcomeKind
    package: str
    reason: Optional[str] = None
    exit_code: Optional[int] = None

    @property
    def failed(self) -> bool:
        return self.kind is OutcomeKind.FAILED


def validate_name(name) -> str:
    if not isinstance(name, str) or not PACKAGE_NAME.fullmatch(name):
        raise InvalidPackageName(name)
    return name


def is_installed(package: str, desc) -> bool:
    """
    Ask the manager itself whether 'package' is installed. Runs the check
    command on every call.
    """
    argv = desc.check_argv(package)
    logger.debug("Checking installed state: %s", " ".join(argv))
    try:
        proc = subprocess.run(
            argv,
            stdout=subprocess.PIPE,
            stderr=subprocess.DEVNULL,
            text=True,
            errors="replace",
        )
    except OSError as e:
        logger.warning("Could not run %s: %s; assuming %s is not installed", argv[0], e, package)
        return False

    if desc.installed_pattern is None:
        return proc.returncode == 0
    return desc.matches(proc.stdout or "", package)


def elevate(argv, desc, os_family):
    """Prefix argv with sudo/doas when the manager needs root and we lack it."""
    if not desc.needs_elevation or os_family is OSFamily.WINDOWS:
        return argv
    if osdetect.is_privileged():
        return argv

    wrappers = ELEVATION_WRAPPERS
    if os_family is OSFamily.OPENBSD:
        wrappers = tuple(reversed(wrappers))
    for wrapper in wrappers:
        if probe.has_command(wrapper):
            logger.debug("Elevating %s with %s", desc.name, wrapper)
            return [wrapper] + list(argv)
    raise ElevationUnavailable(
        f"{desc.name} needs root privileges but neither sudo nor doas is available"
    )


def _run(argv) -> int:
    logger.debug("Running: %s", " ".join(argv))
    try:
        return subprocess.run(argv).returncode
    except OSError as e:
        logger.error("Could not run %s: %s", argv[0], e)
        return 127


def perform(package, operation, context) -> OperationOutcome:
    """
    Install or uninstall a single package with the context's manager.

    Validation errors raise; everything else comes back as an outcome.
    """
    package = validate_name(package)
    desc = descriptor_of(context.manager, context.os_family)

    decision = overrides.resolve(
        package,
        desc.kind,
        operation,
        skip_overrides=context.skip_overrides,
        overrides_dir=context.overrides_dir,
    )
    if decision.skip:
        return OperationOutcome(OutcomeKind.SKIPPED_BY_OVERRIDE, package, reason=decision.reason)

    present = is_installed(package, desc)

    if operation is Operation.INSTALL:
        if present:
            return OperationOutcome(OutcomeKind.ALREADY_PRESENT, package)
        argv = desc.install_argv(package)
        done = OutcomeKind.INSTALLED
        label = "Installing"
    else:
        if not present:
            return OperationOutcome(OutcomeKind.ALREADY_ABSENT, package)
        argv = desc.uninstall_argv(package)
        done = OutcomeKind.UNINSTALLED
        label = "Uninstalling"

    argv = elevate(argv, desc, context.os_family)
    console.print(f"[cyan]{label} {package} using {desc.name}...[/cyan]")
    code = _run(argv)
    if code != 0:
        return OperationOutcome(OutcomeKind.FAILED, package, exit_code=code)
    return OperationOutcome(done, package)


def report(outcome: OperationOutcome, operation):
    pkg = outcome.package
    kind = outcome.kind
    if kind is OutcomeKind.SKIPPED_BY_OVERRIDE:
        err_console.print(
            f"[yellow]Warning:[/] Skipping {operation} of {pkg}: {escape(outcome.reason or '')}"
        )
    elif kind is OutcomeKind.ALREADY_PRESENT:
        console.print(f"Package {pkg} is already installed")
    elif kind is OutcomeKind.ALREADY_ABSENT:
        console.print(f"Package {pkg} is not installed")
    elif kind is OutcomeKind.INSTALLED:
        console.print(f"[green]✔️ Installed {pkg}[/green]")
    elif kind is OutcomeKind.UNINSTALLED:
        console.print(f"[green]✔️ Uninstalled {pkg}[/green]")
    else:
        err_console.print(
            f"[red]❌ Failed to {operation} package: {pkg} (exit code {outcome.exit_code})[/red]"
        )


def run_batch(packages, operation, context) -> list:
    """
    Process packages one at a time, in order. The first failure raises
    CommandFailed unless the context asks to keep going.
    """
    outcomes = []
    for name in packages:
        outcome = perform(name, operation, context)
        outcomes.append(outcome)
        # handle_errors prints the failure when it aborts the batch
        if outcome.failed and not context.keep_going:
            raise CommandFailed(outcome.package, operation, outcome.exit_code)
        report(outcome, operation)
    return outcomes


def print_summary(outcomes):
    table = Table(title="Summary")
    table.add_column("Package", style="cyan")
    table.add_column("Result", style="green")
    table.add_column("Details", style="white")
    for o in outcomes:
        if o.failed:
            details = f"exit code {o.exit_code}"
        else:
            details = escape(o.reason) if o.reason else "-"
        result = f"[red]{o.kind.value}[/red]" if o.failed else o.kind.value
        table.add_row(o.package, result, details)
    console.print(table)
