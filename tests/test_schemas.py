from datetime import date, datetime, timedelta, timezone

import pytest

from allnewsapi import InvalidOptionsError, SearchOptions, SortBy
from allnewsapi.schemas import coerce_options
from allnewsapi.utils.date_utils import to_iso_timestamp


class TestToIsoTimestamp:
    def test_aware_datetime_is_converted_to_utc(self):
        value = datetime(2024, 5, 1, 10, 30, tzinfo=timezone(timedelta(hours=2)))

        assert to_iso_timestamp(value) == "2024-05-01T08:30:00.000Z"

    def test_naive_datetime_is_read_as_utc(self):
        assert to_iso_timestamp(datetime(2024, 5, 1, 8, 30)) == "2024-05-01T08:30:00.000Z"

    def test_milliseconds_are_kept(self):
        value = datetime(2024, 5, 1, 8, 30, 15, 123456, tzinfo=timezone.utc)

        assert to_iso_timestamp(value) == "2024-05-01T08:30:15.123Z"

    def test_plain_date_is_midnight_utc(self):
        assert to_iso_timestamp(date(2024, 1, 31)) == "2024-01-31T00:00:00.000Z"


class TestSearchOptions:
    def test_dates_are_formatted(self):
        options = SearchOptions(
            startDate=datetime(2024, 5, 1, tzinfo=timezone.utc),
            endDate=date(2024, 5, 2)
        )

        params = options.to_query_params()

        assert params["startDate"] == "2024-05-01T00:00:00.000Z"
        assert params["endDate"] == "2024-05-02T00:00:00.000Z"

    def test_string_dates_pass_through(self):
        params = SearchOptions(startDate="2024-05-01").to_query_params()

        assert params["startDate"] == "2024-05-01"

    def test_snake_case_names_are_accepted(self):
        params = SearchOptions(start_date="2024-05-01", end_date="2024-05-31").to_query_params()

        assert params == {"startDate": "2024-05-01", "endDate": "2024-05-31"}

    def test_unset_fields_are_dropped(self):
        params = SearchOptions(q="google", lang=None).to_query_params()

        assert params == {"q": "google"}

    def test_extra_params_pass_through(self):
        params = SearchOptions(q="google", domain="example.com").to_query_params()

        assert params["domain"] == "example.com"

    def test_list_and_scalar_filters(self):
        params = SearchOptions(lang=["en", "fr"], country="us", sortby=SortBy.RELEVANCE).to_query_params()

        assert params["lang"] == ["en", "fr"]
        assert params["country"] == "us"


class TestCoerceOptions:
    def test_mapping_is_validated(self):
        options = coerce_options({"q": "google", "max": 5})

        assert options.q == "google"
        assert options.max == 5

    def test_keywords_override_mapping(self):
        options = coerce_options({"q": "google", "startDate": "2024-01-01"}, q="apple", start_date="2024-02-01")

        assert options.q == "apple"
        assert options.start_date == "2024-02-01"

    def test_snake_case_keys_in_mapping(self):
        options = coerce_options({"start_date": "2024-01-01"})

        assert options.to_query_params() == {"startDate": "2024-01-01"}

    def test_search_options_instance_is_returned_as_is(self):
        options = SearchOptions(q="google")

        assert coerce_options(options) is options

    def test_search_options_merged_with_keywords(self):
        options = coerce_options(SearchOptions(q="google", page=1), page=2)

        assert options.q == "google"
        assert options.page == 2

    def test_none_gives_empty_options(self):
        assert coerce_options().to_query_params() == {}

    def test_caller_mapping_is_not_mutated(self):
        start = datetime(2024, 5, 1, tzinfo=timezone.utc)
        raw = {"startDate": start, "q": "google"}

        coerce_options(raw).to_query_params()

        assert raw == {"startDate": start, "q": "google"}

    def test_scalars_are_kept_as_given(self):
        params = coerce_options(
            {"q": 2024, "publisher": 42, "max": 10.5, "page": "first", "content": 1, "sortby": "yes"}
        ).to_query_params()

        assert params == {"q": 2024, "content": 1, "max": 10.5, "page": "first", "sortby": "yes", "publisher": 42}

    def test_string_content_flag_is_not_coerced(self):
        options = coerce_options({"content": "yes", "lang": ["en", 1]})

        assert options.content == "yes"
        assert options.lang == ["en", 1]

    def test_non_scalar_value_raises(self):
        with pytest.raises(InvalidOptionsError) as exc_info:
            coerce_options({"max": {"value": 10}})

        assert exc_info.value.details["errors"]

    def test_non_mapping_raises(self):
        with pytest.raises(InvalidOptionsError):
            coerce_options(["q", "google"])
