"""Unit tests for the search state models."""

from __future__ import annotations

import pytest

from models import (
    END_YEAR_CHOICES,
    END_YEAR_OPTIONS,
    START_YEAR_CHOICES,
    START_YEAR_OPTIONS,
    YEARS,
    AppState,
    ResultRecord,
    YearRange,
)


class TestYearOptions:
    def test_years_cover_2002_through_2021(self) -> None:
        assert YEARS[0] == "2002"
        assert YEARS[-1] == "2021"
        assert len(YEARS) == 20

    def test_start_options_begin_with_sentinel(self) -> None:
        assert START_YEAR_OPTIONS == ["beginning"] + YEARS
        assert START_YEAR_CHOICES[0] == ("The beginning", "beginning")

    def test_end_options_begin_with_sentinel(self) -> None:
        assert END_YEAR_OPTIONS == ["current"] + YEARS
        assert END_YEAR_CHOICES[0] == ("Current", "current")


class TestYearRange:
    def test_defaults(self) -> None:
        assert YearRange() == YearRange(start="beginning", end="current")

    def test_updates_are_field_independent(self) -> None:
        year_range = YearRange().with_field("start", "2010")
        assert year_range == YearRange(start="2010", end="current")

        year_range = year_range.with_field("end", "2015")
        assert year_range == YearRange(start="2010", end="2015")

    def test_inverted_range_is_accepted(self) -> None:
        year_range = YearRange().with_field("start", "2010").with_field("end", "2005")
        assert (year_range.start, year_range.end) == ("2010", "2005")

    def test_with_field_returns_copy(self) -> None:
        original = YearRange()
        original.with_field("start", "2010")
        assert original.start == "beginning"

    def test_unknown_field_raises(self) -> None:
        with pytest.raises(ValueError):
            YearRange().with_field("middle", "2010")


class TestResultRecord:
    def test_reads_title_and_description(self) -> None:
        record = ResultRecord.from_payload({"title": "T1", "description": "D1", "other": 1})
        assert record == ResultRecord(title="T1", description="D1")
        assert (record.heading, record.body) == ("T1", "D1")

    def test_missing_fields_render_empty(self) -> None:
        record = ResultRecord.from_payload({"archived_snapshots": {}})
        assert record.title is None
        assert record.description is None
        assert (record.heading, record.body) == ("", "")

    def test_non_object_payload_has_no_fields(self) -> None:
        record = ResultRecord.from_payload([["a"], ["b"]])
        assert (record.heading, record.body) == ("", "")

    def test_non_string_values_are_stringified(self) -> None:
        record = ResultRecord.from_payload({"title": 2010})
        assert record.heading == "2010"


class TestAppState:
    def test_defaults(self) -> None:
        state = AppState()
        assert state.search_term == ""
        assert state.year_range == YearRange()
        assert state.loading is False
        assert state.results == []

    def test_results_are_not_shared_between_instances(self) -> None:
        first, second = AppState(), AppState()
        first.results.append({})
        assert second.results == []
