"""Feed parser tests."""

from __future__ import annotations

import pytest

from cnb_fixing import CurrencyRecord, ParseError, parse_feed


def _feed(*rows: str, header: str = "Country|Currency|Amount|Code|Rate") -> bytes:
    return "\n".join(["19 Oct 2026 #202", header, *rows, ""]).encode("utf-8")


def test_sample_feed_yields_records_in_order(sample_feed):
    records = parse_feed(sample_feed)
    assert [r.code for r in records] == ["AUD", "EUR", "JPY", "USD"]
    assert records[0] == CurrencyRecord(country="Australia", code="AUD", rate=14.894)
    assert records[3].rate == pytest.approx(23.5)


def test_columns_zero_three_four_are_mapped():
    rows = [f"Country{i}|unit|1|C{i:02d}|{i + 1}.25" for i in range(7)]
    records = parse_feed(_feed(*rows))
    assert len(records) == 7
    for i, record in enumerate(records):
        assert record.country == f"Country{i}"
        assert record.code == f"C{i:02d}"
        assert record.rate == pytest.approx(i + 1.25)


def test_parsing_is_repeatable(sample_feed):
    assert parse_feed(sample_feed) == parse_feed(sample_feed)


def test_blank_lines_and_crlf_are_ignored():
    raw = b"19 Oct 2026 #202\r\n\r\nCountry|Currency|Amount|Code|Rate\r\n\r\nUSA|dollar|1|USD|23.500\r\n\r\n"
    assert parse_feed(raw) == [CurrencyRecord(country="USA", code="USD", rate=23.5)]


def test_header_only_feed_has_no_records():
    assert parse_feed(_feed()) == []


def test_feed_without_newline_is_rejected():
    with pytest.raises(ParseError):
        parse_feed(b"19 Oct 2026 #202")


def test_feed_without_header_is_rejected():
    with pytest.raises(ParseError, match="header"):
        parse_feed(b"19 Oct 2026 #202\n\n")


def test_short_row_is_rejected_with_line_number():
    with pytest.raises(ParseError, match="Line 4"):
        parse_feed(_feed("USA|dollar|1|USD|23.500", "Broken|row|1"))


@pytest.mark.parametrize("rate", ["abc", "", "nan", "inf", "0", "-1.5", "23,500"])
def test_invalid_rate_aborts_the_feed(rate):
    with pytest.raises(ParseError):
        parse_feed(_feed("USA|dollar|1|USD|23.500", f"EMU|euro|1|EUR|{rate}"))


def test_duplicate_codes_are_rejected():
    with pytest.raises(ParseError, match="duplicate"):
        parse_feed(_feed("USA|dollar|1|USD|23.500", "Ecuador|dollar|1|USD|23.500"))


def test_empty_code_is_rejected():
    with pytest.raises(ParseError, match="code"):
        parse_feed(_feed("USA|dollar|1| |23.500"))


def test_invalid_utf8_is_rejected():
    with pytest.raises(ParseError):
        parse_feed(b"19 Oct 2026 #202\n\xff\xfe|bad\n")
