"""Shared services registry interface.

A registry is owned by one build tree. Each named registration is created
exactly once (first writer wins) and is visible to every build nested in the
tree, which reaches it through its parent's registry.

Architecture:
- Registration: concrete handle holding a service factory and its memoized result
- SharedServices: abstract registry interface
- InMemorySharedServices (real.py): production implementation
- FakeSharedServices (fake.py): test implementation with call tracking
"""

import threading
from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import Any


class Registration[S]:
    """Handle to a named shared service.

    The service is built lazily by the factory on the first get_service()
    call and memoized afterwards. Read-only once created.
    """

    def __init__(self, name: str, factory: Callable[[], S]) -> None:
        self._name = name
        self._factory = factory
        self._lock = threading.Lock()
        self._service: S | None = None
        self._built = False

    @property
    def name(self) -> str:
        return self._name

    @property
    def is_built(self) -> bool:
        """Whether the factory has already run."""
        return self._built

    def get_service(self) -> S:
        """Build the service on first use and return the memoized instance."""
        with self._lock:
            if not self._built:
                self._service = self._factory()
                self._built = True
        return self._service  # type: ignore[return-value]


class SharedServices(ABC):
    """Abstract interface for a build tree's shared services registry.

    All implementations (real and fake) must implement this interface.
    """

    @abstractmethod
    def register_if_absent[S](self, name: str, factory: Callable[[], S]) -> Registration[S]:
        """Register a service under name unless one already exists.

        Must be an atomic test-and-set: when two callers race on the same
        name, exactly one registration is created and both receive it. The
        factory is stored, not called.

        Args:
            name: Registration name, unique within the tree
            factory: Zero-argument callable building the service on first use

        Returns:
            The existing registration if name was taken, otherwise the new one

        Raises:
            ValueError: If name is empty
        """
        ...

    @abstractmethod
    def find_registration(self, name: str) -> Registration[Any] | None:
        """Look up a registration in this registry only.

        Returns:
            The registration if present, None otherwise
        """
        ...

    @abstractmethod
    def registration_names(self) -> list[str]:
        """List registered names in registration order."""
        ...
