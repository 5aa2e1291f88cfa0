from datetime import datetime, timezone

from wellbeing.formatting import format_timestamp, humanize_tag, truncate_content


def test_format_naive_datetime():
    assert format_timestamp(datetime(2025, 3, 3, 14, 5)) == "Monday 3 March, 14:05"


def test_format_iso_string_in_given_timezone():
    assert format_timestamp("2025-03-03T14:05:00Z", tz=timezone.utc) == "Monday 3 March, 14:05"


def test_unparsable_value_is_returned_unchanged():
    assert format_timestamp("yesterday-ish") == "yesterday-ish"


def test_truncate_content():
    assert truncate_content("short") == "short"
    assert truncate_content("x" * 100) == "x" * 100
    assert truncate_content("x" * 101) == "x" * 100 + "..."


def test_humanize_tag():
    assert humanize_tag("burnt_out") == "burnt out"
