"""Fake shared services registry for testing.

FakeSharedServices behaves like the in-memory registry and additionally
records every call, and can simulate a registry that fails on lookup.
"""

from collections.abc import Callable
from typing import Any

from global_catalog.core.registry.abc import Registration, SharedServices


class FakeSharedServices(SharedServices):
    """In-memory fake implementation with call tracking.

    This class has NO public setup methods. All state is provided via
    constructor or captured during execution.
    """

    def __init__(
        self,
        *,
        registrations: dict[str, Registration[Any]] | None = None,
        lookup_error: Exception | None = None,
    ) -> None:
        """Create FakeSharedServices.

        Args:
            registrations: Optional pre-existing registrations (name -> Registration)
            lookup_error: If set, find_registration() raises this exception
        """
        self._registrations: dict[str, Registration[Any]] = dict(registrations or {})
        self._lookup_error = lookup_error
        self._register_calls: list[str] = []
        self._lookup_calls: list[str] = []

    @property
    def register_calls(self) -> list[str]:
        """Names passed to register_if_absent(), in call order.

        This property is for test assertions only.
        """
        return self._register_calls

    @property
    def lookup_calls(self) -> list[str]:
        """Names passed to find_registration(), in call order.

        This property is for test assertions only.
        """
        return self._lookup_calls

    def register_if_absent[S](self, name: str, factory: Callable[[], S]) -> Registration[S]:
        if not name:
            raise ValueError("Shared service name must not be empty")
        self._register_calls.append(name)
        if name not in self._registrations:
            self._registrations[name] = Registration(name, factory)
        return self._registrations[name]

    def find_registration(self, name: str) -> Registration[Any] | None:
        self._lookup_calls.append(name)
        if self._lookup_error is not None:
            raise self._lookup_error
        return self._registrations.get(name)

    def registration_names(self) -> list[str]:
        return list(self._registrations)
