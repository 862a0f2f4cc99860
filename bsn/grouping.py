"""
Ordering and grouping of normalized records.

order_records sorts by sort_key (plain string order). Sort keys are
fixed-width, so string and numeric order agree; a shorter malformed key sorts
before any longer key it is a prefix of. Equal keys fall back to the full
reference and the note text so the result does not depend on input order.

group_records then walks the sorted list once and marks where chapter
headings and book pages start and end.
"""

from __future__ import annotations

from typing import Iterable, Iterator, List, Optional, Tuple

from .model import GroupedRecord, NoteRecord


def order_records(records: Iterable[NoteRecord]) -> List[NoteRecord]:
    return sorted(records, key=NoteRecord.order_key)


def _chapter_of(record: NoteRecord) -> Tuple[int, str]:
    return record.book_num, record.chapter


def group_records(ordered: List[NoteRecord]) -> Iterator[GroupedRecord]:
    """
    Yield each record with its emission signals.

    chapter_changed is True for a scripture record whose (book, chapter)
    differs from the previous record's, so the first record of every book
    opens a chapter. Appendix records never open a chapter.

    book_boundary is True when the next record belongs to another book, or
    this is the last record.
    """
    previous: Optional[NoteRecord] = None
    last = len(ordered) - 1

    for i, record in enumerate(ordered):
        if record.is_appendix:
            chapter_changed = False
        else:
            chapter_changed = previous is None or _chapter_of(previous) != _chapter_of(record)

        book_boundary = i == last or ordered[i + 1].book_num != record.book_num

        yield GroupedRecord(
            record=record,
            chapter_changed=chapter_changed,
            book_boundary=book_boundary,
        )
        previous = record
