"""Tests for the shared services registry."""

import threading

import pytest

from global_catalog.core.registry.abc import Registration
from global_catalog.core.registry.fake import FakeSharedServices
from global_catalog.core.registry.real import InMemorySharedServices


class TestInMemorySharedServices:
    """Tests for the production registry."""

    def test_register_stores_factory_without_calling_it(self) -> None:
        services = InMemorySharedServices()
        calls: list[int] = []

        registration = services.register_if_absent("svc", lambda: calls.append(1) or "service")

        assert calls == []
        assert not registration.is_built
        assert registration.name == "svc"

    def test_register_is_idempotent(self) -> None:
        services = InMemorySharedServices()
        second_factory_calls: list[int] = []

        first = services.register_if_absent("svc", lambda: "first")
        second = services.register_if_absent(
            "svc", lambda: second_factory_calls.append(1) or "second"
        )

        assert second is first
        assert second.get_service() == "first"
        assert second_factory_calls == []

    def test_find_registration(self) -> None:
        services = InMemorySharedServices()
        registration = services.register_if_absent("svc", lambda: "service")

        assert services.find_registration("svc") is registration
        assert services.find_registration("other") is None

    def test_registration_names_in_order(self) -> None:
        services = InMemorySharedServices()
        services.register_if_absent("b", lambda: 1)
        services.register_if_absent("a", lambda: 2)
        services.register_if_absent("b", lambda: 3)

        assert services.registration_names() == ["b", "a"]

    def test_empty_name_rejected(self) -> None:
        with pytest.raises(ValueError, match="must not be empty"):
            InMemorySharedServices().register_if_absent("", lambda: None)

    def test_concurrent_registration_has_single_winner(self) -> None:
        services = InMemorySharedServices()
        barrier = threading.Barrier(8)
        results: list[Registration[int]] = []
        results_lock = threading.Lock()

        def register(index: int) -> None:
            barrier.wait()
            registration = services.register_if_absent("svc", lambda: index)
            with results_lock:
                results.append(registration)

        threads = [threading.Thread(target=register, args=(i,)) for i in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert len(results) == 8
        assert all(r is results[0] for r in results)


class TestRegistration:
    def test_factory_runs_once(self) -> None:
        calls: list[int] = []

        def factory() -> object:
            calls.append(1)
            return object()

        registration = Registration("svc", factory)

        first = registration.get_service()
        second = registration.get_service()

        assert first is second
        assert calls == [1]
        assert registration.is_built

    def test_factory_error_propagates(self) -> None:
        def factory() -> str:
            raise OSError("boom")

        registration = Registration("svc", factory)

        with pytest.raises(OSError, match="boom"):
            registration.get_service()
        assert not registration.is_built


class TestFakeSharedServices:
    def test_tracks_calls(self) -> None:
        services = FakeSharedServices()

        services.register_if_absent("svc", lambda: 1)
        services.register_if_absent("svc", lambda: 2)
        services.find_registration("svc")

        assert services.register_calls == ["svc", "svc"]
        assert services.lookup_calls == ["svc"]
        assert services.registration_names() == ["svc"]

    def test_lookup_error_is_raised(self) -> None:
        services = FakeSharedServices(lookup_error=RuntimeError("isolation boundary"))

        with pytest.raises(RuntimeError, match="isolation boundary"):
            services.find_registration("svc")
