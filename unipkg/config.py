# unipkg/config.py

import os
from dataclasses import dataclass
from pathlib import Path

from unipkg.backends import ManagerKind
from unipkg.overrides import DEFAULT_OVERRIDES_DIR
from unipkg.utils.osdetect import OSFamily

ENV_OVERRIDES_DIR = "UNIPKG_OVERRIDES_DIR"
ENV_PACKAGE_MANAGER = "UNIPKG_PACKAGE_MANAGER"


@dataclass(frozen=True)
class RunContext:
    """Everything one invocation needs, built once from the command line."""

    manager: ManagerKind
    os_family: OSFamily
    skip_overrides: bool = False
    overrides_dir: Path = Path(DEFAULT_OVERRIDES_DIR)
    keep_going: bool = False


def default_overrides_dir(environ=None):
    environ = os.environ if environ is None else environ
    return Path(environ.get(ENV_OVERRIDES_DIR) or DEFAULT_OVERRIDES_DIR)


def default_package_manager(environ=None):
    environ = os.environ if environ is None else environ
    return environ.get(ENV_PACKAGE_MANAGER) or ManagerKind.AUTO.value
