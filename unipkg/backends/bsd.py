# unipkg/backends/bsd.py

from unipkg.backends.base import ManagerDescriptor, ManagerKind
from unipkg.utils.osdetect import OSFamily

# "vim-9.0.1000p0      vi clone, many additional features"
NAME_DASH_VERSION = r"^{package}-\d\S*\s"

PKG = ManagerDescriptor(
    kind=ManagerKind.PKG,
    probe="pkg",
    install=("pkg", "install", "-y", "{package}"),
    uninstall=("pkg", "delete", "-y", "{package}"),
    installed_check=("pkg", "query", "%n"),
    installed_pattern=r"^{package}$",
)

PKGIN = ManagerDescriptor(
    kind=ManagerKind.PKGIN,
    probe="pkgin",
    install=("pkgin", "-y", "install", "{package}"),
    uninstall=("pkgin", "-y", "remove", "{package}"),
    installed_check=("pkgin", "list"),
    installed_pattern=NAME_DASH_VERSION,
)

PKG_ADD = ManagerDescriptor(
    kind=ManagerKind.PKG_ADD,
    probe="pkg_add",
    install=("pkg_add", "-I", "{package}"),
    uninstall=("pkg_delete", "{package}"),
    installed_check=("pkg_info",),
    installed_pattern=NAME_DASH_VERSION,
)

DESCRIPTORS = (PKG, PKGIN, PKG_ADD)

PRIORITY = {
    OSFamily.FREEBSD: (ManagerKind.PKG,),
    OSFamily.OPENBSD: (ManagerKind.PKG_ADD,),
    OSFamily.NETBSD: (ManagerKind.PKGIN, ManagerKind.PKG_ADD),
}
