"""Tests for spreadsheet MCQ import."""
import pytest

from content_editor.importer import MalformedImportError, parse_mcq_paste, parse_row, read_file_content


def test_single_row():
    result = parse_mcq_paste("Q1\tA\tB\tC\tD\t2\texp")
    assert result["skipped"] == 0
    [item] = result["items"]
    assert item.question == "Q1"
    assert item.options == ["A", "B", "C", "D"]
    assert item.correct_answer == 1
    assert item.explanation == "exp"


def test_explanation_optional():
    [item] = parse_mcq_paste("Q1\tA\tB\tC\tD\t4")["items"]
    assert item.correct_answer == 3
    assert item.explanation == ""


def test_no_tabs_rejected():
    with pytest.raises(MalformedImportError):
        parse_mcq_paste("Q1, A, B, C, D, 2\nQ2, A, B, C, D, 1")


def test_empty_input_imports_nothing():
    assert parse_mcq_paste("   \n  ") == {"items": [], "skipped": 0}


def test_short_row_dropped_sibling_kept():
    text = "Q1\tA\tB\tC\tD\t1\nQ2\tA\tB\tC\tD\nQ3\tA\tB\tC\tD\t3\twhy"
    result = parse_mcq_paste(text)
    assert [q.question for q in result["items"]] == ["Q1", "Q3"]
    assert result["skipped"] == 1


def test_blank_lines_ignored():
    result = parse_mcq_paste("\nQ1\tA\tB\tC\tD\t1\n\n\nQ2\tA\tB\tC\tD\t2\n")
    assert len(result["items"]) == 2
    assert result["skipped"] == 0


def test_windows_line_endings():
    [a, b] = parse_mcq_paste("Q1\tA\tB\tC\tD\t1\texp one\r\nQ2\tA\tB\tC\tD\t2\texp two\r\n")["items"]
    assert a.explanation == "exp one"
    assert b.explanation == "exp two"


@pytest.mark.parametrize("ordinal", ["x", "0", "5", ""])
def test_bad_ordinal_dropped(ordinal):
    assert parse_row(f"Q\tA\tB\tC\tD\t{ordinal}") is None


def test_read_tsv_file(tmp_path):
    f = tmp_path / "bank.tsv"
    f.write_text("Q1\tA\tB\tC\tD\t2\n", encoding="utf-8")
    assert read_file_content(str(f)).startswith("Q1\t")
