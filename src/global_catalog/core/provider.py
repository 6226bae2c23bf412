"""Lazy, memoized values.

A CatalogProvider wraps a zero-argument computation. Nothing runs until
get_or_none() is called, and the computation runs at most once per provider
instance. Derived providers (map, filter, or_else) are themselves lazy and
memoized, so wiring a chain of providers at construction time forces no I/O.
"""

import threading
from collections.abc import Callable


class CatalogProvider[T]:
    """Lazy value that resolves to T or to absent (None)."""

    def __init__(self, compute: Callable[[], T | None]) -> None:
        self._compute = compute
        self._lock = threading.Lock()
        self._resolved = False
        self._value: T | None = None

    @staticmethod
    def of(value: T) -> "CatalogProvider[T]":
        """Provider that is already resolved to value."""
        return CatalogProvider(lambda: value)

    @staticmethod
    def absent() -> "CatalogProvider[T]":
        """Provider that always resolves to absent."""
        return CatalogProvider(lambda: None)

    @property
    def is_resolved(self) -> bool:
        """Whether the computation has already run.

        This property is for test assertions only.
        """
        return self._resolved

    def get_or_none(self) -> T | None:
        """Resolve the value, running the computation on first call only."""
        if self._resolved:
            return self._value
        with self._lock:
            if not self._resolved:
                self._value = self._compute()
                self._resolved = True
        return self._value

    def map[U](self, transform: Callable[[T], U | None]) -> "CatalogProvider[U]":
        """Derive a provider by transforming a present value.

        Absent stays absent; transform is never called with None.
        """

        def compute() -> U | None:
            value = self.get_or_none()
            if value is None:
                return None
            return transform(value)

        return CatalogProvider(compute)

    def filter(self, predicate: Callable[[T], bool]) -> "CatalogProvider[T]":
        """Derive a provider that is absent unless predicate holds."""

        def compute() -> T | None:
            value = self.get_or_none()
            if value is None or not predicate(value):
                return None
            return value

        return CatalogProvider(compute)

    def or_else(self, fallback: "CatalogProvider[T]") -> "CatalogProvider[T]":
        """Derive a provider that uses fallback when this one is absent.

        The fallback is not resolved when this provider is present.
        """

        def compute() -> T | None:
            value = self.get_or_none()
            if value is not None:
                return value
            return fallback.get_or_none()

        return CatalogProvider(compute)
