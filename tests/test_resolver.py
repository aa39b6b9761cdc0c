"""Status resolution: exact lookup, substring fallback and unknown identifiers."""

from __future__ import annotations

from baseline_checker import BaselineStatus, StatusResolver

from conftest import build_registry, record


def test_exact_match_is_a_cache_hit(resolver: StatusResolver) -> None:
    result = resolver.resolve("gap")

    assert result.status is BaselineStatus.WIDELY
    assert result.is_baseline is True
    assert result.match == "exact"
    assert result.confidence == "high"
    assert result.available_since == 2021
    assert resolver.get_stats()["cache_hits"] == 1


def test_exact_match_ignores_case_and_whitespace(resolver: StatusResolver) -> None:
    result = resolver.resolve("  DIALOG ")

    assert result.record.id == "dialog"
    assert result.identifier == "  DIALOG "
    assert result.suggestions == ('<div role="dialog"> with ARIA',)
    assert result.polyfills == ("dialog-polyfill",)
    assert result.migration == ("Use ARIA roles", "Add polyfill")


def test_substring_fallback_matches_names(resolver: StatusResolver) -> None:
    result = resolver.resolve("clamp()")

    assert result.record.id == "clamp-function"
    assert result.match == "fuzzy"
    assert result.confidence == "medium"
    assert result.is_baseline is False


def test_substring_fallback_takes_first_in_insertion_order() -> None:
    resolver = StatusResolver(build_registry([
        record("grid-template-areas", BaselineStatus.WIDELY),
        record("grid-lanes", BaselineStatus.LIMITED),
    ]))

    assert resolver.resolve("grid").record.id == "grid-template-areas"


def test_unknown_identifier_is_a_result_not_an_error(resolver: StatusResolver) -> None:
    result = resolver.resolve("nonexistent-feature")

    assert result.status is BaselineStatus.UNKNOWN
    assert result.is_baseline is False
    assert result.record is None
    assert result.confidence == "low"
    assert result.reason == 'Feature "nonexistent-feature" not found'
    assert result.suggestions == ("Check feature name spelling",)


def test_empty_identifier_resolves_to_unknown(resolver: StatusResolver) -> None:
    assert resolver.resolve("   ").status is BaselineStatus.UNKNOWN


def test_stats_count_every_resolution(resolver: StatusResolver) -> None:
    for identifier in ("gap", "dialog", "clamp()", "nonexistent-feature"):
        resolver.resolve(identifier)

    assert resolver.get_stats() == {
        "checks": 4,
        "cache_hits": 2,
        "api_calls": 0,
        "cache_size": 4,
    }


def test_to_dict_is_json_ready(resolver: StatusResolver) -> None:
    data = resolver.resolve("dialog").to_dict()

    assert data["status"] == "newly"
    assert data["feature"]["id"] == "dialog"
    assert data["available_since"] == 2022
    assert data["suggestions"] == ['<div role="dialog"> with ARIA']
