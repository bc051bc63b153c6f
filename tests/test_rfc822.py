import time

import pytest

from feedmerge.rfc822 import DateFormatError, format_rfc822_date, parse_rfc822_date

ROUND_TRIP_CASES = [
    ("Mon, 18 Jan 2038 04:14:07 GMT", "2038-01-18 04:14:07"),
    ("Mon, 20 Oct 2036 20:15:00 GMT", "2036-10-20 20:15:00"),
    ("Thu, 31 Dec 2015 23:59:59 GMT", "2015-12-31 23:59:59"),
    ("Thu, 24 Dec 2015 16:30:00 GMT", "2015-12-24 16:30:00"),
    ("Wed, 11 Nov 2015 11:11:11 GMT", "2015-11-11 11:11:11"),
    ("Tue, 20 Oct 2015 23:21:19 GMT", "2015-10-20 23:21:19"),
    ("Mon, 28 Sep 2015 01:02:03 GMT", "2015-09-28 01:02:03"),
    ("Sun, 16 Aug 2015 14:15:16 GMT", "2015-08-16 14:15:16"),
    ("Sat, 25 Jul 2015 09:11:00 GMT", "2015-07-25 09:11:00"),
    ("Fri, 24 Jul 2015 11:11:11 GMT", "2015-07-24 11:11:11"),
    ("Thu, 18 Jun 2015 22:22:22 GMT", "2015-06-18 22:22:22"),
    ("Wed, 20 May 2015 10:59:59 GMT", "2015-05-20 10:59:59"),
    ("Tue, 07 Apr 2015 00:00:00 GMT", "2015-04-07 00:00:00"),
    ("Mon, 09 Mar 2015 17:01:45 GMT", "2015-03-09 17:01:45"),
    ("Sun, 22 Feb 2015 23:59:59 GMT", "2015-02-22 23:59:59"),
    ("Sat, 31 Jan 2015 00:00:00 GMT", "2015-01-31 00:00:00"),
    ("Tue, 10 Jun 2003 04:00:00 GMT", "2003-06-10 04:00:00"),
    ("Tue, 03 Jun 2003 09:39:21 GMT", "2003-06-03 09:39:21"),
    ("Fri, 30 May 2003 11:06:42 GMT", "2003-05-30 11:06:42"),
    ("Tue, 27 May 2003 08:37:32 GMT", "2003-05-27 08:37:32"),
    ("Sat, 14 Dec 1901 21:45:52 GMT", "1901-12-14 21:45:52"),
]


def _local_fields(timestamp):
    tm = time.localtime(timestamp)
    return (
        f"{tm.tm_year:04d}-{tm.tm_mon:02d}-{tm.tm_mday:02d} "
        f"{tm.tm_hour:02d}:{tm.tm_min:02d}:{tm.tm_sec:02d}"
    )


@pytest.mark.parametrize("text, expected", ROUND_TRIP_CASES)
def test_parse_gives_expected_local_time(text, expected):
    assert _local_fields(parse_rfc822_date(text)) == expected


@pytest.mark.parametrize("text, expected", ROUND_TRIP_CASES)
def test_format_round_trip(text, expected):
    assert format_rfc822_date(parse_rfc822_date(text)) == text


def test_day_of_week_is_optional():
    assert parse_rfc822_date("03 Jun 2003 09:39:21 GMT") == parse_rfc822_date(
        "Tue, 03 Jun 2003 09:39:21 GMT"
    )


def test_seconds_are_optional():
    assert parse_rfc822_date("Tue, 03 Jun 2003 09:39 GMT") == parse_rfc822_date(
        "Tue, 03 Jun 2003 09:39:00 GMT"
    )


@pytest.mark.parametrize(
    "short, full",
    [
        ("18 Jan 15 04:14:07 GMT", "18 Jan 2015 04:14:07 GMT"),
        ("18 Jan 69 04:14:07 GMT", "18 Jan 2069 04:14:07 GMT"),
        ("18 Jan 70 04:14:07 GMT", "18 Jan 1970 04:14:07 GMT"),
        ("18 Jan 99 04:14:07 GMT", "18 Jan 1999 04:14:07 GMT"),
    ],
)
def test_two_digit_years(short, full):
    assert parse_rfc822_date(short) == parse_rfc822_date(full)


@pytest.mark.parametrize(
    "text",
    [
        "",
        "Xyz, 18 Jan 2015 04:14:07 GMT",
        "Mon, 18 Foo 2015 04:14:07 GMT",
        "Mon, 00 Jan 2015 04:14:07 GMT",
        "Mon, 32 Jan 2015 04:14:07 GMT",
        "Mon, 18 Jan 2015 24:00:00 GMT",
        "Mon, 18 Jan 2015 04:60:00 GMT",
        "Mon, 18 Jan 2015 04:14:60 GMT",
        "Mon, 18 Jan 2015 04 GMT",
        "Mon, 18 Jan 2015 04:14:07",
        "Mon, 18 Jan 2015 04:14:07 GMT extra",
        "Mon, 18 Jan 2015 04:14:07 J",
        "Mon, 18 Jan 2015 04:14:07 UTC",
        "Mon, 18 Jan 2015 04:14:07 +1300",
        "Mon, 18 Jan 2015 04:14:07 +0160",
        "Mon, 18 Jan 2015 04:14:07 x0100",
        "Mon, 1a Jan 2015 04:14:07 GMT",
        "Mon, 18 Jan 20x5 04:14:07 GMT",
        "Mon, 18 Jan 2015 ab:14:07 GMT",
    ],
)
def test_invalid_dates_raise(text):
    with pytest.raises(DateFormatError):
        parse_rfc822_date(text)


def test_error_is_value_error():
    with pytest.raises(ValueError):
        parse_rfc822_date("not a date")


def test_format_uses_english_names_and_gmt_suffix():
    text = format_rfc822_date(parse_rfc822_date("Thu, 24 Dec 2015 16:30:00 GMT"))
    assert text.startswith("Thu, 24 Dec 2015")
    assert text.endswith(" GMT")


def test_format_out_of_range_raises():
    with pytest.raises(DateFormatError):
        format_rfc822_date(10**20)