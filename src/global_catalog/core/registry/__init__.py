from global_catalog.core.registry.abc import Registration, SharedServices
from global_catalog.core.registry.real import InMemorySharedServices

__all__ = [
    "InMemorySharedServices",
    "Registration",
    "SharedServices",
]
