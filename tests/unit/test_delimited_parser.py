from __future__ import annotations

from sheet_listing.delimited.parser import ParsedSheet, parse_csv, parse_csv_line


def test_quoted_comma_is_one_field():
    assert parse_csv_line('a,"b,c",d') == ["a", "b,c", "d"]


def test_doubled_quote_is_literal_quote():
    assert parse_csv_line('"say ""hi""",x') == ['say "hi"', "x"]


def test_unmatched_quote_keeps_rest_of_line_quoted():
    assert parse_csv_line('a,"b,c,d') == ["a", "b,c,d"]


def test_empty_line_is_single_empty_field():
    assert parse_csv_line("") == [""]
    assert parse_csv_line(",") == ["", ""]


def test_parse_csv_header_and_rows(sample_csv: str, headers: list[str]):
    sheet = parse_csv(sample_csv)
    assert sheet.headers == headers
    assert len(sheet.rows) == 3
    assert sheet.rows[0]["Lakás"] == "A3"
    assert sheet.rows[0]["m2"] == "54,20"
    assert sheet.rows[1]["Kert m2"] == "32,5"
    assert sheet.rows[2]["Kulcsrakész ár"] == ""


def test_parse_csv_crlf_bom_blank_lines_and_trimming():
    text = "\ufeffLakás , m2\r\n A1 , 50 \r\n\r\n   \r\nA2\r\n"
    sheet = parse_csv(text)
    assert sheet.headers == ["Lakás", "m2"]
    assert sheet.rows == [
        {"Lakás": "A1", "m2": "50"},
        {"Lakás": "A2", "m2": ""},
    ]


def test_parse_csv_extra_fields_not_addressable():
    sheet = parse_csv("a,b\n1,2,3,4\n")
    assert sheet.rows == [{"a": "1", "b": "2"}]


def test_parse_csv_empty_input():
    assert parse_csv("") == ParsedSheet()
    assert parse_csv("\n  \n") == ParsedSheet()


def test_parse_csv_header_only():
    sheet = parse_csv("Lakás,Emelet\n")
    assert sheet.headers == ["Lakás", "Emelet"]
    assert sheet.rows == []
