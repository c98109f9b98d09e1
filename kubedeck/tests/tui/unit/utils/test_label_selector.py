"""Tests for label selector parsing."""

from __future__ import annotations

import pytest

from kubedeck.utils.label_selector import extract_label_terms, join_label_terms


class TestExtractLabelTerms:
    """Tests for extract_label_terms()."""

    def test_json_object(self) -> None:
        terms = extract_label_terms('\'{"app":"web","tier":"frontend"}\'')
        assert terms == {"app=web", "tier=frontend"}

    def test_single_pair(self) -> None:
        assert extract_label_terms("'{\"app\":\"x\"}'") == {"app=x"}

    def test_go_map_rendering(self) -> None:
        assert extract_label_terms("'map[app:web tier:frontend]'") == {
            "app=web",
            "tier=frontend",
        }

    def test_surrounding_whitespace_ignored(self) -> None:
        assert extract_label_terms("  '{\"app\":\"x\"}'\n") == {"app=x"}

    @pytest.mark.parametrize("raw", ["", "'", "''", "'{}'", "'map[]'"])
    def test_empty_selector_yields_no_terms(self, raw: str) -> None:
        assert extract_label_terms(raw) == frozenset()

    @pytest.mark.parametrize(
        "raw",
        ["'not a selector'", "'[\"app\"]'", "'map[app]'", "'{\"app\":'"],
    )
    def test_unparseable_selector_yields_no_terms(self, raw: str) -> None:
        assert extract_label_terms(raw) == frozenset()

    def test_none_value_dropped(self) -> None:
        assert extract_label_terms('\'{"app":"web","tier":null}\'') == {"app=web"}


class TestJoinLabelTerms:
    """Tests for join_label_terms()."""

    def test_sorted_comma_join(self) -> None:
        assert join_label_terms({"tier=frontend", "app=web"}) == "app=web,tier=frontend"

    def test_empty(self) -> None:
        assert join_label_terms(frozenset()) == ""
