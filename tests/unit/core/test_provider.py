"""Tests for lazy memoized providers."""

from global_catalog.core.provider import CatalogProvider


class CountingSource:
    """Zero-argument callable that counts its invocations."""

    def __init__(self, value: str | None) -> None:
        self.value = value
        self.calls = 0

    def __call__(self) -> str | None:
        self.calls += 1
        return self.value


def test_computation_is_deferred_until_resolved() -> None:
    source = CountingSource("a")
    provider = CatalogProvider(source)

    assert source.calls == 0
    assert not provider.is_resolved

    assert provider.get_or_none() == "a"
    assert source.calls == 1


def test_computation_runs_at_most_once() -> None:
    source = CountingSource("a")
    provider = CatalogProvider(source)

    provider.get_or_none()
    provider.get_or_none()

    assert source.calls == 1


def test_absent_result_is_memoized_too() -> None:
    source = CountingSource(None)
    provider = CatalogProvider(source)

    assert provider.get_or_none() is None
    assert provider.get_or_none() is None
    assert source.calls == 1


def test_absent_provider() -> None:
    assert CatalogProvider.absent().get_or_none() is None


def test_map_skips_transform_when_absent() -> None:
    calls: list[str] = []

    def transform(value: str) -> str:
        calls.append(value)
        return value.upper()

    assert CatalogProvider.of("a").map(transform).get_or_none() == "A"
    assert CatalogProvider.absent().map(transform).get_or_none() is None
    assert calls == ["a"]


def test_filter_drops_values_failing_predicate() -> None:
    provider = CatalogProvider.of("keep")

    assert provider.filter(lambda v: v == "keep").get_or_none() == "keep"
    assert provider.filter(lambda v: v == "other").get_or_none() is None


def test_or_else_prefers_present_value_without_resolving_fallback() -> None:
    fallback_source = CountingSource("fallback")
    fallback = CatalogProvider(fallback_source)

    assert CatalogProvider.of("primary").or_else(fallback).get_or_none() == "primary"
    assert fallback_source.calls == 0


def test_or_else_uses_fallback_when_absent() -> None:
    fallback = CatalogProvider.of("fallback")

    assert CatalogProvider.absent().or_else(fallback).get_or_none() == "fallback"


def test_derived_provider_shares_upstream_memoization() -> None:
    source = CountingSource("a")
    upstream = CatalogProvider(source)
    first = upstream.map(lambda v: v + "1")
    second = upstream.map(lambda v: v + "2")

    assert first.get_or_none() == "a1"
    assert second.get_or_none() == "a2"
    assert source.calls == 1
