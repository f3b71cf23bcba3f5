# unipkg/backends/windows.py

from unipkg.backends.base import ManagerDescriptor, ManagerKind
from unipkg.utils.osdetect import OSFamily

CHOCO = ManagerDescriptor(
    kind=ManagerKind.CHOCO,
    probe="choco",
    install=("choco", "install", "{package}", "-y"),
    uninstall=("choco", "uninstall", "{package}", "-y"),
    # choco 2.x lists local packages only; "git|2.43.0"
    installed_check=("choco", "list", "--limit-output"),
    installed_pattern=r"^{package}\|",
)

WINGET = ManagerDescriptor(
    kind=ManagerKind.WINGET,
    probe="winget",
    install=(
        "winget", "install", "--id", "{package}", "--exact", "--silent",
        "--accept-source-agreements", "--accept-package-agreements",
    ),
    uninstall=("winget", "uninstall", "--id", "{package}", "--exact", "--silent"),
    installed_check=(
        "winget", "list", "--id", "{package}", "--exact",
        "--accept-source-agreements",
    ),
    installed_pattern=None,
)

SCOOP = ManagerDescriptor(
    kind=ManagerKind.SCOOP,
    probe="scoop",
    install=("scoop", "install", "{package}"),
    uninstall=("scoop", "uninstall", "{package}"),
    installed_check=("scoop", "list"),
    installed_pattern=r"^\s*{package}\s",
    needs_elevation=False,
)

DESCRIPTORS = (CHOCO, WINGET, SCOOP)

PRIORITY = {
    OSFamily.WINDOWS: (ManagerKind.CHOCO, ManagerKind.WINGET, ManagerKind.SCOOP),
}
