import functools
import logging
import sys

from rich.console import Console
from rich.markup import escape

logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")

logger = logging.getLogger("unipkg")
err_console = Console(stderr=True)


class UnipkgError(Exception):
    """Base class for every fatal condition; the front end exits with exit_code."""

    exit_code = 1


class InvalidPackageName(UnipkgError):
    def __init__(self, name):
        self.name = name
        super().__init__(f"Invalid package name: {name}")


class NoManagerFound(UnipkgError):
    def __init__(self, os_family, candidates):
        self.os_family = os_family
        self.candidates = list(candidates)
        names = ", ".join(self.candidates) or "none registered"
        super().__init__(
            f"Unable to find supported package manager on {os_family} ({names})"
        )


class ManagerNotInstalled(UnipkgError):
    def __init__(self, requested):
        self.requested = requested
        super().__init__(f"Package manager {requested} is not installed")


class UnknownManager(UnipkgError):
    def __init__(self, name, os_family=None):
        self.name = name
        self.os_family = os_family
        where = f" on {os_family}" if os_family else ""
        super().__init__(f"Unsupported package manager{where}: {name}")


class CommandFailed(UnipkgError):
    def __init__(self, package, operation, exit_code):
        self.package = package
        self.operation = operation
        self.returncode = exit_code
        super().__init__(
            f"Failed to {operation} package: {package} (exit code {exit_code})"
        )


class UnsupportedPlatform(UnipkgError):
    pass


class ElevationRequired(UnipkgError):
    pass


class ElevationUnavailable(UnipkgError):
    pass


def handle_errors(func):
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except SystemExit:
            raise
        except UnipkgError as e:
            err_console.print(f"[bold red]Error:[/] {escape(str(e))}")
            sys.exit(e.exit_code)
        except KeyboardInterrupt:
            err_console.print("[yellow]Interrupted[/yellow]")
            sys.exit(1)
        except Exception as e:
            logger.debug("%s failed", func.__name__, exc_info=True)
            err_console.print(f"[bold red]Error:[/] {func.__name__} failed: {escape(str(e))}")
            sys.exit(1)

    return wrapper
