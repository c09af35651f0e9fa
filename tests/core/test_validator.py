"""
Unit tests for per-field movie validation.
"""

import json

import pytest

from app.core.exceptions import FieldValidationError, MalformedInputError
from app.core.sanitizer import sanitize, sanitize_mapping
from app.core.validator import MOVIE_FIELDS, FieldValidator, is_integer, is_numeric, parse_date


def valid_movie(**overrides):
    movie = {
        "uid": "mv007",
        "title": "Dune",
        "year": "2021",
        "released": "2021-10-22",
        "runtime": "155",
        "directors": "Denis Villeneuve",
        "actors": "Timothée Chalamet",
        "country": "USA",
        "poster": "x.jpg",
        "imdb": "8",
        "type": "movie",
    }
    movie.update(overrides)
    return movie


def body(data) -> bytes:
    return json.dumps(data).encode("utf-8")


@pytest.fixture
def validator():
    return FieldValidator()


class TestScenarios:
    """End-to-end behavior of sanitize + validate."""

    def test_all_valid(self, validator):
        record = validator.validate_body(body(valid_movie()))

        assert record == {
            "uid": "mv007",
            "title": "Dune",
            "year": 2021,
            "released": "2021-10-22",
            "runtime": "155 mins",
            "directors": "Denis Villeneuve",
            "actors": "Timothée Chalamet",
            "country": "USA",
            "poster": "",
            "imdb": "8/10",
            "type": "movie",
        }

    def test_bad_uid_and_year(self, validator):
        with pytest.raises(FieldValidationError) as exc_info:
            validator.validate_body(body(valid_movie(uid="abc", year="twenty")))

        error = exc_info.value
        assert set(error.errors) == {"uid", "year"}
        assert error.kind == "Unprocessable Entity"
        assert error.message == "Invalid Entries"
        assert error.errors["uid"] == "Please pass a valid movie unique id"

    def test_empty_object(self, validator):
        record, errors = validator.validate(sanitize(b"{}"))

        assert record == {}
        assert len(errors) == 10
        assert "poster" not in errors
        assert set(errors) == set(MOVIE_FIELDS) - {"poster"}

    def test_malformed_body_skips_validation(self, validator):
        with pytest.raises(MalformedInputError):
            validator.validate_body(b"{not json")

    def test_json_numbers_accepted(self, validator):
        record = validator.validate_body(body(valid_movie(year=2021, runtime=155, imdb=8)))
        assert record["year"] == 2021
        assert record["runtime"] == "155 mins"
        assert record["imdb"] == "8/10"

    def test_unknown_keys_ignored(self, validator):
        record = validator.validate_body(body(valid_movie(extra="ignored")))
        assert "extra" not in record

    def test_values_are_escaped(self, validator):
        record = validator.validate_body(body(valid_movie(title="Tom & Jerry")))
        assert record["title"] == "Tom &#38; Jerry"


class TestFieldRules:
    """Tests for individual field rules."""

    @pytest.mark.parametrize("uid", ["mv123", "mv1234"])
    def test_uid_accepted(self, validator, uid):
        _, errors = validator.check(sanitize_mapping(valid_movie(uid=uid)))
        assert "uid" not in errors

    @pytest.mark.parametrize("uid", ["mv12", "MV123", "mv12345", "", "mv12a", " mv123"])
    def test_uid_rejected(self, validator, uid):
        _, errors = validator.check(sanitize_mapping(valid_movie(uid=uid)))
        assert "uid" in errors

    @pytest.mark.parametrize("year, expected", [("2021", 2021), ("2021.9", 2021), (" 1999", 1999), ("1e3", 1000)])
    def test_year_normalized_to_int(self, validator, year, expected):
        record, _ = validator.check(sanitize_mapping(valid_movie(year=year)))
        assert record["year"] == expected

    @pytest.mark.parametrize("year", ["twenty", "", "20 21", "0x7E5"])
    def test_year_rejected(self, validator, year):
        _, errors = validator.check(sanitize_mapping(valid_movie(year=year)))
        assert errors["year"] == "Please pass a valid movie year"

    @pytest.mark.parametrize("year", ["1e30", "-1e30", "1e99999999", "99999999999999999999"])
    def test_year_out_of_range_rejected(self, validator, year):
        record, errors = validator.check(sanitize_mapping(valid_movie(year=year)))
        assert "year" in errors
        assert "year" not in record

    @pytest.mark.parametrize("released", ["2021-10-22", "2021/10/22", "10/22/2021", "22 October 2021", "Oct 22, 2021"])
    def test_released_accepted(self, validator, released):
        record, errors = validator.check(sanitize_mapping(valid_movie(released=released)))
        assert "released" not in errors
        assert record["released"] == released

    @pytest.mark.parametrize("released", ["", "someday", "2021-13-01", "2021-02-30"])
    def test_released_rejected(self, validator, released):
        _, errors = validator.check(sanitize_mapping(valid_movie(released=released)))
        assert "released" in errors

    def test_runtime_keeps_supplied_text(self, validator):
        record, _ = validator.check(sanitize_mapping(valid_movie(runtime="95.5")))
        assert record["runtime"] == "95.5 mins"

    @pytest.mark.parametrize("imdb", ["08", "8.5", "eight", ""])
    def test_imdb_rejected(self, validator, imdb):
        _, errors = validator.check(sanitize_mapping(valid_movie(imdb=imdb)))
        assert errors["imdb"] == "Please pass a valid movie rating"

    def test_imdb_overlong_digits_rejected(self, validator):
        _, errors = validator.check(sanitize_mapping(valid_movie(imdb="9" * 5000)))
        assert "imdb" in errors

    @pytest.mark.parametrize("field", ["title", "directors", "actors", "country", "type"])
    def test_text_fields_reject_empty_and_nested(self, validator, field):
        _, errors = validator.check(sanitize_mapping(valid_movie(**{field: ""})))
        assert field in errors
        _, errors = validator.check(sanitize_mapping(valid_movie(**{field: ["a", "b"]})))
        assert field in errors

    @pytest.mark.parametrize("poster", ["x.jpg", "", None, ["nested"], 42])
    def test_poster_always_blank(self, validator, poster):
        record, errors = validator.check(sanitize_mapping(valid_movie(poster=poster)))
        assert record["poster"] == ""
        assert "poster" not in errors

    def test_absent_key_same_as_empty_string(self, validator):
        absent = valid_movie()
        del absent["country"]
        assert validator.check(sanitize_mapping(absent)) == validator.check(
            sanitize_mapping(valid_movie(country=""))
        )


class TestPipelineProperties:
    """Properties that hold for any input."""

    INPUTS = [
        {},
        valid_movie(),
        valid_movie(uid="abc", year="twenty"),
        valid_movie(title=["x"], imdb="9.9", released="never"),
        {"uid": None, "poster": {"a": 1}, "noise": True},
    ]

    @pytest.mark.parametrize("data", INPUTS)
    def test_every_field_in_exactly_one_map(self, validator, data):
        record, errors = validator.check(sanitize_mapping(data))
        assert set(record) | set(errors) == set(MOVIE_FIELDS)
        assert not set(record) & set(errors)

    @pytest.mark.parametrize("data", INPUTS)
    def test_validation_is_idempotent(self, validator, data):
        raw = body(data)
        assert validator.validate(sanitize(raw)) == validator.validate(sanitize(raw))

    @pytest.mark.parametrize("data", INPUTS)
    def test_errors_discard_record(self, validator, data):
        record, errors = validator.validate(sanitize_mapping(data))
        assert not (record and errors)


class TestHelpers:
    """Tests for the numeric, integer and date helpers."""

    @pytest.mark.parametrize("text", ["1", "-1", "+1.5", ".5", "5.", "1e5", "  7  "])
    def test_is_numeric(self, text):
        assert is_numeric(text)

    @pytest.mark.parametrize("text", ["", ".", "1e", "abc", "1,000", "NaN"])
    def test_is_not_numeric(self, text):
        assert not is_numeric(text)

    def test_is_integer_range(self):
        assert is_integer(str(2**63 - 1))
        assert not is_integer(str(2**63))

    def test_parse_date_datetime(self):
        assert parse_date("2021-10-22T10:00:00").isoformat() == "2021-10-22"
