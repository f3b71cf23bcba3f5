# unipkg/cli.py
#!/usr/bin/env python3
import argparse
import logging
import sys

from rich.console import Console

from unipkg import __version__
from unipkg.backends import descriptor_of
from unipkg.config import RunContext, default_overrides_dir, default_package_manager
from unipkg.pkgmanager import Operation, print_summary, run_batch, validate_name
from unipkg.selector import MANAGER_CHOICES, parse_kind, select
from unipkg.utils import osdetect
from unipkg.utils.errors import ElevationRequired, handle_errors
from unipkg.utils.osdetect import OSFamily

console = Console()
err_console = Console(stderr=True)

ACTIONS = ["install", "uninstall", "detect"]


class RichParser(argparse.ArgumentParser):
    def error(self, message):
        err_console.print(f"[bold red]Error:[/] {message}\n")
        self.print_usage(sys.stderr)
        sys.exit(1)


def build_parser(prog="unipkg", action=None):
    parser = RichParser(
        prog=prog,
        description="Install or uninstall packages with the host's native package manager",
        allow_abbrev=False,
    )
    if action is None:
        parser.add_argument("action", choices=ACTIONS, help="Action to perform")
    parser.add_argument(
        "-v", "--version", action="version", version=f"Version: {__version__}"
    )
    parser.add_argument(
        "-p",
        "--package-manager",
        metavar="<manager>",
        default=default_package_manager(),
        help=f"Package manager to use: {', '.join(MANAGER_CHOICES)} (default: auto)",
    )
    parser.add_argument("--debug", action="store_true", help="Verbose logging")
    if action == "detect":
        return parser

    parser.add_argument(
        "-s", "--skip-overrides", action="store_true", help="Skip checking package overrides"
    )
    parser.add_argument(
        "--overrides-dir",
        default=None,
        help="Directory holding <manager>/<package>.json overrides (default: overrides)",
    )
    parser.add_argument(
        "-k",
        "--keep-going",
        action="store_true",
        help="Continue after a failed package and print a summary",
    )
    parser.add_argument("packages", nargs="*", metavar="package", help="Package names")
    return parser


def check_windows_preconditions(desc):
    osdetect.check_windows_build()
    if desc.needs_elevation and not osdetect.is_privileged():
        raise ElevationRequired(
            f"{desc.name} must be run from an elevated (Administrator) prompt"
        )


def run(action, args):
    if args.debug:
        logging.getLogger("unipkg").setLevel(logging.DEBUG)

    packages = getattr(args, "packages", [])
    if action != "detect":
        if not packages:
            err_console.print("[bold red]Error:[/] at least one package is required")
            return 1
        # a bad name aborts before any manager is looked up
        for name in packages:
            validate_name(name)

    os_family = osdetect.get_os_family()
    manager = select(parse_kind(args.package_manager), os_family)
    if action == "detect":
        console.print(manager.value)
        return 0

    desc = descriptor_of(manager, os_family)
    if os_family is OSFamily.WINDOWS:
        check_windows_preconditions(desc)

    ctx = RunContext(
        manager=manager,
        os_family=os_family,
        skip_overrides=args.skip_overrides,
        overrides_dir=args.overrides_dir or default_overrides_dir(),
        keep_going=args.keep_going,
    )
    outcomes = run_batch(packages, Operation(action), ctx)
    if ctx.keep_going:
        print_summary(outcomes)
        if any(o.failed for o in outcomes):
            return 1
    return 0


@handle_errors
def main(argv=None):
    args = build_parser().parse_intermixed_args(argv)
    return run(args.action, args)


def _single(action, prog):
    @handle_errors
    def entry(argv=None):
        args = build_parser(prog=prog, action=action).parse_intermixed_args(argv)
        return run(action, args)

    return entry


install_main = _single("install", "install-pkg")
uninstall_main = _single("uninstall", "uninstall-pkg")
detect_main = _single("detect", "get-package-manager")


if __name__ == "__main__":
    sys.exit(main())
