from datetime import datetime, timedelta, timezone

import pytest

from gps_trips.cleaning import clean_records, parse_timestamp, validate_record
from gps_trips.models import CleanedPoint, RawRecord, RejectEntry, RejectReason
from helpers import make_record


def test_valid_record_becomes_cleaned_point() -> None:
    result = validate_record(make_record(" dev7 ", " 52.5 ", "-4.25", " 2025-05-13T05:15:30 "), 2)
    assert isinstance(result, CleanedPoint)
    assert result.device_id == "dev7"
    assert result.lat == 52.5
    assert result.lon == -4.25
    assert result.timestamp_text == "2025-05-13T05:15:30"
    assert result.instant == datetime(2025, 5, 13, 5, 15, 30, tzinfo=timezone.utc)


@pytest.mark.parametrize(
    "field,value",
    [
        ("device_id", None),
        ("lat", ""),
        ("lon", "   "),
        ("timestamp", None),
    ],
)
def test_missing_fields(field, value) -> None:
    record = make_record()
    setattr(record, field, value)
    result = validate_record(record, 7)
    assert isinstance(result, RejectEntry)
    assert result.reason is RejectReason.MISSING_FIELDS
    assert result.describe() == "Line 7: Missing required fields"


def test_empty_record_is_missing_fields() -> None:
    result = validate_record(RawRecord(), 3)
    assert result.reason is RejectReason.MISSING_FIELDS


@pytest.mark.parametrize(
    "lat,lon",
    [
        ("abc", "4.0"),
        ("52.0", "east"),
        ("90.0001", "4.0"),
        ("-90.5", "4.0"),
        ("52.0", "180.01"),
        ("52.0", "-181"),
        ("nan", "4.0"),
        ("52.0", "inf"),
        ("5_2", "4.0"),
    ],
)
def test_invalid_coordinates(lat, lon) -> None:
    result = validate_record(make_record(lat=lat, lon=lon), 4)
    assert isinstance(result, RejectEntry)
    assert result.reason is RejectReason.INVALID_COORDINATES


def test_coordinate_range_is_inclusive() -> None:
    for lat, lon in (("90", "180"), ("-90", "-180"), ("0", "0"), ("1e1", "+.5")):
        assert isinstance(validate_record(make_record(lat=lat, lon=lon), 2), CleanedPoint)


def test_invalid_coordinates_detail_uses_raw_text() -> None:
    result = validate_record(make_record(lat="95.0", lon="4.89"), 6)
    assert result.describe() == "Line 6: Invalid coordinates (95.0, 4.89)"


@pytest.mark.parametrize(
    "text",
    ["13/05/2025 05:06", "2025-13-01T00:00:00", "2025-05-13", "yesterday", "2025-05-13T05:15:30+0200x"],
)
def test_invalid_timestamp(text) -> None:
    result = validate_record(make_record(timestamp=text), 9)
    assert isinstance(result, RejectEntry)
    assert result.reason is RejectReason.INVALID_TIMESTAMP
    assert result.describe() == f"Line 9: Invalid timestamp ({text})"


def test_first_failure_wins() -> None:
    # Missing device id beats bad coordinates and timestamp.
    result = validate_record(make_record(device_id="", lat="999", timestamp="bad"), 2)
    assert result.reason is RejectReason.MISSING_FIELDS
    # Bad coordinates beat a bad timestamp.
    result = validate_record(make_record(lat="999", timestamp="bad"), 2)
    assert result.reason is RejectReason.INVALID_COORDINATES


@pytest.mark.parametrize(
    "text,expected",
    [
        ("2025-05-13T07:15:30+02:00", datetime(2025, 5, 13, 5, 15, 30, tzinfo=timezone.utc)),
        ("2025-05-13T05:15:30Z", datetime(2025, 5, 13, 5, 15, 30, tzinfo=timezone.utc)),
        ("2025-05-13T05:15:30", datetime(2025, 5, 13, 5, 15, 30, tzinfo=timezone.utc)),
        ("2025-05-13 05:15:30", datetime(2025, 5, 13, 5, 15, 30, tzinfo=timezone.utc)),
        (
            "2025-05-13T05:15:30.250Z",
            datetime(2025, 5, 13, 5, 15, 30, 250000, tzinfo=timezone.utc),
        ),
        (
            "2025-05-13T05:15:30.123456",
            datetime(2025, 5, 13, 5, 15, 30, 123456, tzinfo=timezone.utc),
        ),
    ],
)
def test_parse_timestamp_accepted_formats(text, expected) -> None:
    assert parse_timestamp(text) == expected


def test_parse_timestamp_keeps_offset() -> None:
    parsed = parse_timestamp("2025-05-13T07:15:30+02:00")
    assert parsed.utcoffset() == timedelta(hours=2)


def test_parse_timestamp_rejects_garbage() -> None:
    assert parse_timestamp("") is None
    assert parse_timestamp("2025/05/13 05:15:30") is None


def test_clean_records_splits_and_keeps_order(mixed_records) -> None:
    points, rejects = clean_records(mixed_records)
    assert [p.device_id for p in points] == ["dev2", "dev1", "dev1", "dev2", "dev1", "dev3"]
    assert [(r.line_ref, r.reason) for r in rejects] == [
        (4, RejectReason.MISSING_FIELDS),
        (6, RejectReason.INVALID_COORDINATES),
        (9, RejectReason.INVALID_TIMESTAMP),
    ]


def test_clean_records_empty() -> None:
    assert clean_records([]) == ([], [])
