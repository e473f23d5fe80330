from datetime import date, datetime, timedelta, timezone

import pytest

from clio_adapter.exceptions import ParameterError
from clio_adapter.helpers import (
    amount_to_cents,
    build_fields_param,
    build_query_params,
    cents_to_amount,
    chunk_array,
    clean_object,
    extract_id,
    format_date,
    format_phone_number,
    hours_to_seconds,
    is_valid_id,
    prepare_output,
    seconds_to_hours,
    simplify_response,
    validate_required_fields,
)


class TestMoney:
    def test_cents_to_amount(self):
        assert cents_to_amount(100) == 1
        assert cents_to_amount(150) == 1.5
        assert cents_to_amount(99) == 0.99
        assert cents_to_amount(-100) == -1

    def test_amount_to_cents(self):
        assert amount_to_cents(1) == 100
        assert amount_to_cents(1.5) == 150
        assert amount_to_cents(0) == 0
        assert amount_to_cents(0.99) == 99

    def test_amount_to_cents_rounds_to_nearest_cent(self):
        assert amount_to_cents(1.999) == 200
        assert amount_to_cents(250.004) == 25000


def test_time_conversions():
    assert seconds_to_hours(5400) == 1.5
    assert hours_to_seconds(1.5) == 5400


class TestFormatDate:
    def test_iso_string(self):
        assert format_date("2024-01-15T10:30:00Z") == "2024-01-15"

    def test_aware_datetime_is_converted_to_utc(self):
        tz = timezone(timedelta(hours=-8))
        assert format_date(datetime(2024, 1, 15, 20, 0, tzinfo=tz)) == "2024-01-16"

    def test_date(self):
        assert format_date(date(2024, 3, 1)) == "2024-03-01"

    @pytest.mark.parametrize("value", ["", None])
    def test_empty(self, value):
        assert format_date(value) == ""


class TestQueryParams:
    def test_keeps_filters(self):
        assert build_query_params({"status": "Open", "client_id": 123}) == {"status": "Open", "client_id": 123}

    def test_skips_empty_values(self):
        assert build_query_params({"status": "Open", "client_id": None, "query": ""}) == {"status": "Open"}

    def test_strips_filter_prefix(self):
        assert build_query_params({"filter_status": "Open"}) == {"status": "Open"}

    def test_none(self):
        assert build_query_params(None) == {}


class TestIds:
    @pytest.mark.parametrize(
        "value, expected",
        [(123, 123), ("123", 123), ("42abc", 42), ({"id": 7}, 7), ({"id": "8"}, 8), (None, None), ("abc", None), (True, None), (12.0, 12), (1.5, None)],
    )
    def test_extract_id(self, value, expected):
        assert extract_id(value) == expected

    def test_is_valid_id(self):
        assert is_valid_id(1)
        assert is_valid_id(123)
        assert not is_valid_id(0)
        assert not is_valid_id(-1)
        assert not is_valid_id(1.5)
        assert not is_valid_id("123")

    def test_fractional_id_is_rejected(self):
        assert not is_valid_id(extract_id(1.5))
        assert not is_valid_id(extract_id({"id": 2.25}))


class TestPrepareOutput:
    def test_single_object(self):
        out = prepare_output({"id": 1, "name": "Test"})
        assert [o.json_data for o in out] == [{"id": 1, "name": "Test"}]

    def test_list(self):
        out = prepare_output([{"id": 1}, {"id": 2}])
        assert [o.json_data for o in out] == [{"id": 1}, {"id": 2}]

    def test_scalars_are_wrapped(self):
        assert prepare_output(["a"])[0].json_data == {"value": "a"}

    def test_serializes_under_json_key(self):
        dumped = prepare_output({"id": 1})[0].model_dump(by_alias=True, exclude_none=True)
        assert dumped == {"json": {"id": 1}}


def test_clean_object():
    assert clean_object({"a": 1, "b": None, "c": "", "d": 0, "e": False}) == {"a": 1, "d": 0, "e": False}


def test_chunk_array():
    assert chunk_array([1, 2, 3, 4, 5], 2) == [[1, 2], [3, 4], [5]]
    with pytest.raises(ValueError):
        chunk_array([1], 0)


def test_validate_required_fields():
    validate_required_fields({"name": "x"}, ["name"])
    with pytest.raises(ParameterError, match="Required field 'email' is missing"):
        validate_required_fields({"name": "x", "email": ""}, ["name", "email"])


def test_build_fields_param():
    assert build_fields_param("client", ["id", "name"]) == "client{id,name}"


def test_format_phone_number():
    assert format_phone_number("+1 (555) 010-2000") == "+15550102000"


def test_simplify_response():
    data = {"id": 1, "client": {"id": 5, "name": "Jane"}, "matter": {"id": 9, "a": 1, "b": 2, "c": 3}}
    assert simplify_response(data) == {"id": 1, "client": 5, "matter": {"id": 9, "a": 1, "b": 2, "c": 3}}
