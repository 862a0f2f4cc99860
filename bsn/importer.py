"""
Study-notes import pipeline.

    read source -> tokenize -> normalize -> order/group -> render -> write

The host supplies three collaborators:

- read(name) -> str          : full text of the export
- write(path, text) -> None  : write one page (may raise)
- report(path) -> None       : progress sink, called after each written page

A source that cannot be read aborts the run before anything is written.
A page that cannot be written is reported and skipped; the rest continue.
"""

from __future__ import annotations

from collections import OrderedDict
from typing import Callable, Dict, Iterable, List, Optional, Tuple

from .grouping import group_records, order_records
from .model import BookDocument, ImportResult, NoteRecord
from .normalizer import normalize_all
from .render import render_documents
from .tokenizer import tokenize
from .util import info, ok, warn

ReadFn = Callable[[str], str]
WriteFn = Callable[[str, str], None]
ReportFn = Callable[[str], None]
CancelFn = Callable[[], bool]


class SourceUnreadableError(Exception):
    """The export text could not be obtained; nothing was written."""

    def __init__(self, location: str, cause: Optional[BaseException] = None):
        self.location = location
        self.cause = cause
        msg = f"Cannot read study notes export: {location}"
        if cause is not None:
            msg += f" ({cause})"
        super().__init__(msg)


def read_source(read: ReadFn, location: str) -> str:
    try:
        return read(location)
    except Exception as e:
        raise SourceUnreadableError(location, e) from e


def build_records(text: str) -> List[NoteRecord]:
    """
    Tokenize, normalize and sort the export text.
    """
    raws = tokenize(text)
    records = normalize_all(raws)
    return order_records(records)


def emit_documents(
    documents: Iterable[BookDocument],
    write: WriteFn,
    report: Optional[ReportFn] = None,
    cancel: Optional[CancelFn] = None,
) -> ImportResult:
    """
    Write each page. Failures are logged and collected, never raised.

    cancel, if given, is checked before each page; a True result stops the
    run and marks the result cancelled.
    """
    result = ImportResult()
    for doc in documents:
        if cancel is not None and cancel():
            warn("Import cancelled; remaining books skipped.")
            result.cancelled = True
            break

        result.record_count += doc.record_count
        try:
            write(doc.path, doc.content)
        except Exception as e:
            warn(f"Failed to write {doc.path}: {e}")
            result.failed.append(doc.path)
            continue

        result.written.append(doc.path)
        if report is not None:
            try:
                report(doc.path)
            except Exception as e:
                warn(f"Progress report failed for {doc.path}: {e}")
    return result


def create_study_notes(
    read: ReadFn,
    write: WriteFn,
    report: Optional[ReportFn],
    source_location: str,
    working_folder: str,
    cancel: Optional[CancelFn] = None,
) -> ImportResult:
    """
    Run the full import: one page per book found in the export.

    Raises
    ------
    SourceUnreadableError
        If the export cannot be read.
    """
    info(f"=== IMPORT === source={source_location!r}, folder={working_folder!r}")
    text = read_source(read, source_location)

    records = build_records(text)
    info(f"Parsed {len(records)} note(s).")

    documents = render_documents(group_records(records), working_folder)
    result = emit_documents(documents, write, report=report, cancel=cancel)

    if result.failed:
        warn(f"{len(result.failed)} page(s) could not be written.")
    ok(f"Wrote {len(result.written)} page(s) to {working_folder!r}.")
    return result


def summarize(records: Iterable[NoteRecord]) -> Dict[int, Tuple[int, int]]:
    """
    Map book_num -> (note count, distinct chapter count), in sorted order.
    """
    notes: Dict[int, int] = OrderedDict()
    chapters: Dict[int, set] = {}
    for record in records:
        notes[record.book_num] = notes.get(record.book_num, 0) + 1
        if not record.is_appendix:
            chapters.setdefault(record.book_num, set()).add(record.chapter)
    return {b: (n, len(chapters.get(b, ()))) for b, n in notes.items()}
