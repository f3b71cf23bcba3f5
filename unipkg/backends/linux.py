# unipkg/backends/linux.py

from unipkg.backends.base import ManagerDescriptor, ManagerKind
from unipkg.utils.osdetect import OSFamily

RPM_NAMES = ("rpm", "-qa", "--queryformat", "%{NAME}\\n")
WHOLE_LINE = r"^{package}$"


def _rpm_family(kind):
    pm = kind.value
    return ManagerDescriptor(
        kind=kind,
        probe=pm,
        install=(pm, "install", "{package}", "-y"),
        uninstall=(pm, "remove", "{package}", "-y"),
        installed_check=RPM_NAMES,
        installed_pattern=WHOLE_LINE,
    )


def _debian_family(kind):
    pm = kind.value
    return ManagerDescriptor(
        kind=kind,
        probe=pm,
        install=(pm, "install", "{package}", "--no-install-recommends", "-y"),
        uninstall=(pm, "remove", "{package}", "-y"),
        installed_check=("dpkg", "-l"),
        # "ii  vim:amd64  2:9.0  amd64  Vi IMproved"
        installed_pattern=r"^ii\s+{package}(:\S+)?\s",
    )


DNF = _rpm_family(ManagerKind.DNF)
YUM = _rpm_family(ManagerKind.YUM)
APT_GET = _debian_family(ManagerKind.APT_GET)
APT = _debian_family(ManagerKind.APT)

PACMAN = ManagerDescriptor(
    kind=ManagerKind.PACMAN,
    probe="pacman",
    install=("pacman", "-Syu", "{package}", "--noconfirm"),
    uninstall=("pacman", "-R", "{package}", "--noconfirm"),
    installed_check=("pacman", "-Q"),
    installed_pattern=r"^{package}\s",
)

APK = ManagerDescriptor(
    kind=ManagerKind.APK,
    probe="apk",
    install=("apk", "--update", "add", "--no-cache", "{package}"),
    uninstall=("apk", "del", "{package}"),
    installed_check=("apk", "info"),
    installed_pattern=WHOLE_LINE,
)

ZYPPER = ManagerDescriptor(
    kind=ManagerKind.ZYPPER,
    probe="zypper",
    install=("zypper", "install", "{package}", "-y"),
    uninstall=("zypper", "remove", "{package}", "-y"),
    installed_check=RPM_NAMES,
    installed_pattern=WHOLE_LINE,
)

EMERGE = ManagerDescriptor(
    kind=ManagerKind.EMERGE,
    probe="emerge",
    install=("emerge", "{package}"),
    uninstall=("emerge", "--unmerge", "{package}"),
    # portage-utils: "app-editors/vim"
    installed_check=("qlist", "-IC"),
    installed_pattern=r"^[^/\s]+/{package}$",
)

XBPS = ManagerDescriptor(
    kind=ManagerKind.XBPS,
    probe="xbps-install",
    install=("xbps-install", "-y", "{package}"),
    uninstall=("xbps-remove", "-y", "{package}"),
    # "ii vim-9.0.1_1   Vim editor"
    installed_check=("xbps-query", "-l"),
    installed_pattern=r"^ii\s+{package}-[^-\s]+\s",
)

DESCRIPTORS = (DNF, YUM, PACMAN, APK, APT_GET, APT, ZYPPER, EMERGE, XBPS)

PRIORITY = {
    OSFamily.LINUX: (
        ManagerKind.DNF,
        ManagerKind.YUM,
        ManagerKind.PACMAN,
        ManagerKind.APK,
        ManagerKind.APT_GET,
        ManagerKind.APT,
        ManagerKind.ZYPPER,
        ManagerKind.EMERGE,
        ManagerKind.XBPS,
    ),
}
