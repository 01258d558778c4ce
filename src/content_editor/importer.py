"""Bulk MCQ import from spreadsheet pastes (tab-separated rows)."""
import logging
from pathlib import Path

from content_editor.models import MCQItem

logger = logging.getLogger(__name__)

# question, A, B, C, D, answer ordinal (1-4), explanation (optional)
MIN_COLUMNS = 6


class MalformedImportError(ValueError):
    """Raised when pasted text doesn't look like tab-separated spreadsheet rows."""


def read_file_content(file_path: str) -> str:
    path = Path(file_path)
    if path.suffix.lower() not in (".tsv", ".txt", ".tab"):
        logger.warning("Reading %s as plain text", path.name)
    return path.read_text(encoding="utf-8-sig")


def parse_row(line: str) -> MCQItem | None:
    """Turn one tab-separated row into an MCQItem. Returns None for rows that don't fit."""
    cols = line.split("\t")
    if len(cols) < MIN_COLUMNS:
        return None
    try:
        ordinal = int(cols[5])
    except ValueError:
        return None
    if not 1 <= ordinal <= 4:
        return None
    return MCQItem(
        question=cols[0],
        options=[cols[1], cols[2], cols[3], cols[4]],
        correct_answer=ordinal - 1,
        explanation=cols[6] if len(cols) > 6 else "",
    )


def parse_mcq_paste(text: str) -> dict:
    """Parse a spreadsheet paste into questions.

    Rows with too few columns or an answer ordinal outside 1-4 are skipped and
    only counted. Raises MalformedImportError when there is no tab anywhere,
    which means the text wasn't copied from a spreadsheet.
    """
    raw = text.strip()
    if not raw:
        return {"items": [], "skipped": 0}
    if "\t" not in raw:
        raise MalformedImportError("Please use tab-separated values (copy from Excel or Google Sheets)")
    lines = [line.rstrip("\r") for line in raw.split("\n") if line.strip()]
    items = []
    for line in lines:
        item = parse_row(line)
        if item is not None:
            items.append(item)
    skipped = len(lines) - len(items)
    if skipped:
        logger.info("Skipped %d malformed rows out of %d", skipped, len(lines))
    return {"items": items, "skipped": skipped}
