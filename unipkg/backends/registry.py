import importlib
import os
import pkgutil

from unipkg.backends.base import ManagerKind
from unipkg.utils.errors import UnknownManager

_DESCRIPTORS = {}
_PRIORITY = {}

for _, modname, _ in pkgutil.iter_modules([os.path.dirname(__file__)]):
    mod = importlib.import_module(f"unipkg.backends.{modname}")
    if not hasattr(mod, "PRIORITY"):
        continue
    for desc in mod.DESCRIPTORS:
        _DESCRIPTORS[desc.kind] = desc
    for family, kinds in mod.PRIORITY.items():
        _PRIORITY.setdefault(family, ())
        _PRIORITY[family] += tuple(kinds)


def descriptors_for(os_family):
    """Descriptors registered for os_family, highest priority first."""
    return [_DESCRIPTORS[kind] for kind in _PRIORITY.get(os_family, ())]


def descriptor_of(kind, os_family):
    if kind is ManagerKind.AUTO or kind not in _PRIORITY.get(os_family, ()):
        raise UnknownManager(str(kind), os_family)
    return _DESCRIPTORS[kind]
