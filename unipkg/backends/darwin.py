# unipkg/backends/darwin.py

from unipkg.backends.base import ManagerDescriptor, ManagerKind
from unipkg.utils.osdetect import OSFamily

BREW = ManagerDescriptor(
    kind=ManagerKind.BREW,
    probe="brew",
    install=("brew", "install", "{package}"),
    uninstall=("brew", "uninstall", "{package}"),
    installed_check=("brew", "list", "-1"),
    installed_pattern=r"^{package}$",
    needs_elevation=False,
)

PORT = ManagerDescriptor(
    kind=ManagerKind.PORT,
    probe="port",
    install=("port", "install", "{package}"),
    uninstall=("port", "uninstall", "{package}"),
    # "  vim @9.0.1000_0+huge (active)"
    installed_check=("port", "installed"),
    installed_pattern=r"^\s+{package}\s+@",
    needs_elevation=False,
)

DESCRIPTORS = (BREW, PORT)

PRIORITY = {
    OSFamily.DARWIN: (ManagerKind.BREW, ManagerKind.PORT),
}
