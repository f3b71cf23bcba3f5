# unipkg/selector.py

import logging

from unipkg.backends import ManagerKind, descriptor_of, descriptors_for
from unipkg.utils import probe
from unipkg.utils.errors import ManagerNotInstalled, NoManagerFound, UnknownManager

logger = logging.getLogger(__name__)

MANAGER_CHOICES = [kind.value for kind in ManagerKind]


def parse_kind(name):
    """'apt-get' -> ManagerKind.APT_GET; raises UnknownManager otherwise."""
    try:
        return ManagerKind(name)
    except ValueError:
        raise UnknownManager(name) from None


def select(requested, os_family):
    """
    Pick the manager to drive on this host.

    A concrete request is honoured only if its binary is on PATH; 'auto'
    walks the platform priority list and takes the first one found.
    """
    if requested is not ManagerKind.AUTO:
        desc = descriptor_of(requested, os_family)
        if not probe.has_command(desc.probe):
            raise ManagerNotInstalled(requested.value)
        logger.debug("Using requested package manager %s", desc.name)
        return requested

    candidates = descriptors_for(os_family)
    for desc in candidates:
        if probe.has_command(desc.probe):
            logger.debug("Detected package manager %s on %s", desc.name, os_family)
            return desc.kind
    raise NoManagerFound(os_family, [d.name for d in candidates])
