"""
Excel export of the ordered note index.

One row per note, in the same order the pages list them:
Book #, Book, Chapter, Verse, Reference, DOC, Heading / Title, Page.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, List

from .canon import book_name
from .model import NoteRecord
from .paths import book_document_path
from .util import info, ok

try:
    from openpyxl import Workbook
except ImportError:  # pragma: no cover
    Workbook = None  # type: ignore[assignment]

INDEX_COLUMNS: List[str] = [
    "Book #",
    "Book",
    "Chapter",
    "Verse",
    "Reference",
    "DOC",
    "Heading / Title",
    "Page",
]


def index_rows(records: Iterable[NoteRecord], working_folder: str) -> List[List[object]]:
    rows: List[List[object]] = []
    for record in records:
        name = book_name(record.book_num)
        if record.is_appendix:
            chapter, verse, label = "", "", record.heading or record.title or ""
        else:
            chapter, verse, label = record.chapter, record.verse or "", record.title or ""
        rows.append([
            record.book_num,
            name,
            chapter,
            verse,
            record.reference,
            record.doc,
            label,
            book_document_path(working_folder, record.book_num, name),
        ])
    return rows


def export_index(
    records: Iterable[NoteRecord],
    output_path: Path,
    working_folder: str,
) -> int:
    """
    Write the note index to an .xlsx workbook. Returns the number of rows.
    """
    if Workbook is None:
        raise RuntimeError(
            "openpyxl is not installed. Install it with: pip install openpyxl"
        )

    output_path = output_path.with_suffix(".xlsx")
    output_path.parent.mkdir(parents=True, exist_ok=True)

    wb = Workbook()
    ws = wb.active
    ws.title = "Notes"
    ws.append(INDEX_COLUMNS)

    rows = index_rows(records, working_folder)
    for row in rows:
        ws.append(row)
    ws.freeze_panes = "A2"

    info(f"Saving note index to: {output_path}")
    wb.save(output_path)
    ok(f"Saved {len(rows)} note(s) to {output_path.name}")
    return len(rows)
