from tagcontent.common.strings.sanitize import clean_text
from tagcontent.common.strings.splitters import csv_to_list


def test_csv_to_list_none():
    assert csv_to_list(None) == []


def test_csv_to_list_list_input():
    assert csv_to_list([" a ", "b", "", "  "]) == ["a", "b"]


def test_csv_to_list_string_input():
    assert csv_to_list(" a, b ,c ,, d ") == ["a", "b", "c", "d"]


def test_clean_text_strips_control_chars_and_collapses_whitespace():
    assert clean_text("  Hero\x00 Image \n ") == "Hero Image"
    assert clean_text(None) == ""


def test_clean_text_multiline_keeps_newlines():
    assert clean_text(" line one\nline\x07 two ", multiline=True) == "line one\nline two"
