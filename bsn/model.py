"""
Data model definitions for Bible Study Notes.

- RawRecord    : header tags plus the title/note lines that followed them
- NoteRecord   : a RawRecord with its sort key and book number resolved
- GroupedRecord: a NoteRecord with its chapter/book emission signals
- BookDocument : one rendered page, ready to be written
- ImportResult : what a run wrote, what failed
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from .canon import APPENDIX_BOOK

# Header keys used by the export format
REFERENCE = "Reference"
DOC = "DOC"
BK = "BK"
CH = "CH"
VS = "VS"
HEADING = "HEADING"

# Synthesized field names
TITLE = "TITLE"
NOTE = "NOTE"


@dataclass(frozen=True)
class RawRecord:
    """
    One annotation as exported: the header tags, in header order, and the
    content lines that followed the header.

    title: first content line, None if the header had no content lines
    note : remaining content lines joined by newlines ("" if only a title)
    """
    tags: Tuple[Tuple[str, str], ...] = ()
    title: Optional[str] = None
    note: Optional[str] = None

    def get(self, key: str, default: Optional[str] = None) -> Optional[str]:
        for k, v in self.tags:
            if k == key:
                return v
        return default

    def is_empty(self) -> bool:
        return not self.tags and self.title is None and self.note is None

    def fields(self) -> Dict[str, str]:
        """
        All fields as a plain dict, with TITLE/NOTE appended when present.
        """
        result = dict(self.tags)
        if self.title is not None:
            result[TITLE] = self.title
        if self.note is not None:
            result[NOTE] = self.note
        return result


@dataclass(frozen=True)
class NoteRecord:
    """
    A RawRecord with its canonical sort key and book number.

    Scripture notes have book_num 1..66 and a 7-character sort key taken from
    the Reference tag. Everything else is filed under the Appendix (67).
    """
    raw: RawRecord
    sort_key: str
    book_num: int

    @property
    def is_appendix(self) -> bool:
        return self.book_num == APPENDIX_BOOK

    @property
    def reference(self) -> str:
        return self.raw.get(REFERENCE) or ""

    @property
    def doc(self) -> str:
        return self.raw.get(DOC) or ""

    @property
    def chapter(self) -> str:
        """
        CH tag if present, otherwise the chapter digits of the Reference.
        """
        chapter = self.raw.get(CH)
        if chapter is not None:
            return chapter
        digits = self.reference[2:5]
        if digits.isdigit():
            return str(int(digits))
        return ""

    @property
    def verse(self) -> Optional[str]:
        """
        VS tag if present, otherwise the verse digits of the Reference.
        None for chapter-level notes (no VS, verse digits missing or zero).
        """
        verse = self.raw.get(VS)
        if verse is not None:
            return verse
        digits = self.reference[5:8]
        if digits.isdigit() and int(digits) > 0:
            return str(int(digits))
        return None

    @property
    def heading(self) -> Optional[str]:
        return self.raw.get(HEADING)

    @property
    def title(self) -> Optional[str]:
        return self.raw.title

    @property
    def note(self) -> Optional[str]:
        return self.raw.note

    def order_key(self) -> tuple:
        """
        Full ordering key: sort_key first, then tie-breakers so equal sort
        keys still order the same way regardless of input order.
        """
        return (
            self.sort_key,
            self.reference or self.doc,
            self.heading or "",
            self.title or "",
            self.note or "",
            self.raw.tags,
        )


@dataclass(frozen=True)
class GroupedRecord:
    """
    A record in sorted order with its emission signals.

    chapter_changed: start a new chapter heading before this record
    book_boundary  : this is the last record of its book; emit the page after it
    """
    record: NoteRecord
    chapter_changed: bool
    book_boundary: bool


@dataclass
class BookDocument:
    book_num: int
    book_name: str
    path: str
    content: str
    record_count: int = 0


@dataclass
class ImportResult:
    written: List[str] = field(default_factory=list)
    failed: List[str] = field(default_factory=list)
    record_count: int = 0
    cancelled: bool = False

    @property
    def success(self) -> bool:
        return not self.failed and not self.cancelled
