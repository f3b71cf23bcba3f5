from unipkg.backends.base import ManagerDescriptor, ManagerKind
from unipkg.backends.registry import descriptor_of, descriptors_for

__all__ = [
    "ManagerDescriptor",
    "ManagerKind",
    "descriptor_of",
    "descriptors_for",
]
