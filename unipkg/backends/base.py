import enum
import re
from dataclasses import dataclass
from typing import Optional


class ManagerKind(enum.Enum):
    APT = "apt"
    APT_GET = "apt-get"
    YUM = "yum"
    DNF = "dnf"
    PACMAN = "pacman"
    APK = "apk"
    ZYPPER = "zypper"
    EMERGE = "emerge"
    XBPS = "xbps"
    PKG = "pkg"
    DOAS = "doas"
    PKGIN = "pkgin"
    PKG_ADD = "pkg_add"
    BREW = "brew"
    PORT = "port"
    CHOCO = "choco"
    SCOOP = "scoop"
    WINGET = "winget"
    AUTO = "auto"

    def __str__(self):
        return self.value


@dataclass(frozen=True)
class ManagerDescriptor:
    """
    How to drive one native package manager.

    The argv templates use a '{package}' placeholder. When installed_pattern
    is None the exit status of the installed check decides; otherwise the
    pattern (with '{package}' substituted, regex-escaped) is searched line by
    line in the check's stdout.
    """

    kind: ManagerKind
    probe: str
    install: tuple
    uninstall: tuple
    installed_check: tuple
    installed_pattern: Optional[str]
    needs_elevation: bool = True

    @property
    def name(self) -> str:
        return self.kind.value

    def install_argv(self, package: str) -> list[str]:
        return _fill(self.install, package)

    def uninstall_argv(self, package: str) -> list[str]:
        return _fill(self.uninstall, package)

    def check_argv(self, package: str) -> list[str]:
        return _fill(self.installed_check, package)

    def matches(self, output: str, package: str) -> bool:
        """True if 'package' shows up as a whole leading token of some line."""
        if self.installed_pattern is None:
            raise ValueError(f"{self.name} decides installed state by exit status")
        regex = re.compile(
            self.installed_pattern.replace("{package}", re.escape(package)),
            re.MULTILINE,
        )
        return regex.search(output) is not None


def _fill(template, package):
    return [part.replace("{package}", package) for part in template]
