"""Test configuration for unipkg"""

import subprocess
import sys
from pathlib import Path

import pytest

# Add the project root directory to Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from unipkg.backends import ManagerKind  # noqa: E402
from unipkg.backends.registry import _DESCRIPTORS  # noqa: E402

# How each manager's installed-check prints one installed package
LISTING_LINES = {
    ManagerKind.APT: "ii  {p}  1.0-1  amd64  the {p} package",
    ManagerKind.APT_GET: "ii  {p}:amd64  1.0-1  amd64  the {p} package",
    ManagerKind.DNF: "{p}",
    ManagerKind.YUM: "{p}",
    ManagerKind.ZYPPER: "{p}",
    ManagerKind.APK: "{p}",
    ManagerKind.PACMAN: "{p} 1.0-1",
    ManagerKind.EMERGE: "app-misc/{p}",
    ManagerKind.XBPS: "ii {p}-1.0_1   the {p} package",
    ManagerKind.BREW: "{p}",
    ManagerKind.PORT: "  {p} @1.0_0 (active)",
    ManagerKind.PKG: "{p}",
    ManagerKind.PKGIN: "{p}-1.0nb1   the {p} package",
    ManagerKind.PKG_ADD: "{p}-1.0p0   the {p} package",
    ManagerKind.CHOCO: "{p}|1.0.0",
    ManagerKind.SCOOP: "  {p} 1.0 main",
}

DPKG_HEADER = (
    "Desired=Unknown/Install/Remove/Purge/Hold\n"
    "||/ Name           Version      Architecture Description\n"
    "+++-==============-============-============-=================\n"
)


class FakeHost:
    """
    Stands in for PATH and for the package manager processes.

    Install/uninstall commands mutate 'installed' so later checks see the
    new state; every argv that would have been spawned is kept in 'calls'.
    """

    def __init__(self, kind, installed=(), extra_binaries=(), privileged=True):
        self.desc = _DESCRIPTORS[kind]
        self.installed = set(installed)
        self.privileged = privileged
        self.fail_with = {}
        self.calls = []
        probe_pkg = "x"
        self.binaries = {
            self.desc.probe,
            self.desc.check_argv(probe_pkg)[0],
            self.desc.install_argv(probe_pkg)[0],
            self.desc.uninstall_argv(probe_pkg)[0],
        } | set(extra_binaries)

    # shutil.which
    def which(self, name, *args, **kwargs):
        return f"/usr/bin/{name}" if name in self.binaries else None

    def listing(self):
        if self.desc.kind in (ManagerKind.APT, ManagerKind.APT_GET):
            head = DPKG_HEADER
        else:
            head = ""
        line = LISTING_LINES[self.desc.kind]
        return head + "".join(line.format(p=p) + "\n" for p in sorted(self.installed))

    def _package_for(self, argv, build):
        for token in argv:
            if build(token) == argv:
                return token
        return None

    # subprocess.run
    def run(self, argv, *args, **kwargs):
        argv = list(argv)
        self.calls.append(argv)
        if argv[0] not in self.binaries:
            raise FileNotFoundError(2, "No such file or directory", argv[0])
        cmd = argv[1:] if argv[0] in ("sudo", "doas") else argv

        pkg = self._package_for(cmd, self.desc.install_argv)
        if pkg is not None:
            rc = self.fail_with.get(pkg, 0)
            if rc == 0:
                self.installed.add(pkg)
            return subprocess.CompletedProcess(argv, rc)

        pkg = self._package_for(cmd, self.desc.uninstall_argv)
        if pkg is not None:
            rc = self.fail_with.get(pkg, 0)
            if rc == 0:
                self.installed.discard(pkg)
            return subprocess.CompletedProcess(argv, rc)

        if self.desc.installed_pattern is None:
            pkg = self._package_for(cmd, self.desc.check_argv)
            rc = 0 if pkg in self.installed else 1
            return subprocess.CompletedProcess(argv, rc, stdout="")

        if cmd == self.desc.check_argv("x"):
            return subprocess.CompletedProcess(argv, 0, stdout=self.listing())

        return subprocess.CompletedProcess(argv, 0, stdout="")

    def spawned(self, verb):
        build = self.desc.install_argv if verb == "install" else self.desc.uninstall_argv
        out = []
        for c in self.calls:
            cmd = c[1:] if c[0] in ("sudo", "doas") else c
            if self._package_for(cmd, build) is not None:
                out.append(c)
        return out


@pytest.fixture
def fake_host(monkeypatch):
    """Factory: fake_host(ManagerKind.APT_GET, installed={"git"}) -> FakeHost"""

    def make(kind, installed=(), extra_binaries=(), privileged=True):
        host = FakeHost(kind, installed, extra_binaries, privileged)
        monkeypatch.setattr("unipkg.utils.probe.shutil.which", host.which)
        monkeypatch.setattr("unipkg.pkgmanager.subprocess.run", host.run)
        monkeypatch.setattr(
            "unipkg.utils.osdetect.is_privileged", lambda: host.privileged
        )
        return host

    return make


@pytest.fixture
def overrides_dir(tmp_path):
    """Create an empty overrides directory for testing"""
    path = tmp_path / "overrides"
    path.mkdir()
    return path
