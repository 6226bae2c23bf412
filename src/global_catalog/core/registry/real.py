"""Production shared services registry."""

import logging
import threading
from collections.abc import Callable
from typing import Any

from global_catalog.core.registry.abc import Registration, SharedServices

logger = logging.getLogger(__name__)


class InMemorySharedServices(SharedServices):
    """Registry held in memory for the lifetime of its build tree."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._registrations: dict[str, Registration[Any]] = {}

    def register_if_absent[S](self, name: str, factory: Callable[[], S]) -> Registration[S]:
        if not name:
            raise ValueError("Shared service name must not be empty")

        with self._lock:
            existing = self._registrations.get(name)
            if existing is not None:
                logger.debug("Reusing shared service registration: name=%s", name)
                return existing
            registration = Registration(name, factory)
            self._registrations[name] = registration

        logger.debug("Registered shared service: name=%s", name)
        return registration

    def find_registration(self, name: str) -> Registration[Any] | None:
        with self._lock:
            return self._registrations.get(name)

    def registration_names(self) -> list[str]:
        with self._lock:
            return list(self._registrations)
