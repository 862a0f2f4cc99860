"""
Record normalizer: resolves each record's sort key and book number.

Scripture notes carry a fixed-width Reference tag ('bbcccvvv'); the first 7
characters are the sort key and the first 2 the book number. Anything else is
an appendix note keyed on '67' plus the start of its DOC id.
"""

from __future__ import annotations

from typing import Iterable, List

from .canon import APPENDIX_BOOK, is_scripture_book
from .model import DOC, REFERENCE, NoteRecord, RawRecord
from .util import warn

REFERENCE_KEY_LENGTH = 7
BOOK_PREFIX_LENGTH = 2
DOC_PREFIX_LENGTH = 7


def _scripture_book(reference: str) -> int | None:
    prefix = reference[:BOOK_PREFIX_LENGTH]
    if len(prefix) != BOOK_PREFIX_LENGTH or not prefix.isdigit():
        return None
    book_num = int(prefix)
    if not is_scripture_book(book_num):
        return None
    return book_num


def appendix_sort_key(doc: str) -> str:
    return f"{APPENDIX_BOOK}{doc[:DOC_PREFIX_LENGTH]}"


def normalize(raw: RawRecord) -> NoteRecord:
    """
    Resolve sort_key and book_num for one record.

    Malformed records never raise: a Reference without a valid book prefix,
    or a record with neither Reference nor DOC, is filed under the appendix
    (with an empty document id when DOC is missing).
    """
    reference = raw.get(REFERENCE)
    if reference is not None:
        book_num = _scripture_book(reference)
        if book_num is not None:
            return NoteRecord(
                raw=raw,
                sort_key=reference[:REFERENCE_KEY_LENGTH],
                book_num=book_num,
            )
        warn(f"Reference {reference!r} has no valid book number; filing under the appendix.")

    doc = raw.get(DOC)
    if doc is None:
        warn(f"Record without Reference or DOC (title={raw.title!r}); filing under the appendix.")
        doc = ""

    return NoteRecord(raw=raw, sort_key=appendix_sort_key(doc), book_num=APPENDIX_BOOK)


def normalize_all(records: Iterable[RawRecord]) -> List[NoteRecord]:
    return [normalize(r) for r in records]
