import enum
import os
import platform

import psutil

from unipkg.utils.errors import UnsupportedPlatform

# Windows 10 1809, the first build shipping winget's App Installer
MIN_WINDOWS_BUILD = 17763


class OSFamily(enum.Enum):
    LINUX = "Linux"
    DARWIN = "Darwin"
    FREEBSD = "FreeBSD"
    OPENBSD = "OpenBSD"
    NETBSD = "NetBSD"
    WINDOWS = "Windows"

    def __str__(self):
        return self.value


def get_os_family(system=None):
    """Map platform.system() onto an OSFamily."""
    system = system if system is not None else platform.system()
    lowered = system.lower()
    for family in OSFamily:
        if lowered == family.value.lower():
            return family
    raise UnsupportedPlatform(f"Unsupported OS: {system or 'unknown'}")


def is_privileged():
    """True when the current process already runs as root / Administrator."""
    if os.name == "nt":
        import ctypes

        try:
            return bool(ctypes.windll.shell32.IsUserAnAdmin())
        except (AttributeError, OSError):
            return False
    return psutil.Process().uids().effective == 0


def windows_build(version=None):
    version = version if version is not None else platform.version()
    parts = version.split(".")
    try:
        return int(parts[2]) if len(parts) >= 3 else int(parts[-1])
    except ValueError:
        return 0


def check_windows_build(version=None):
    build = windows_build(version)
    if build < MIN_WINDOWS_BUILD:
        raise UnsupportedPlatform(
            f"Windows build {build} is too old (need {MIN_WINDOWS_BUILD} or newer)"
        )
    return build
