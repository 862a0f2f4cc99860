"""
Markdown rendering of the grouped records, one page per book.

Page layout (scripture book):

    FIELD | INFO
    ---- | ----
    ORDER | 1
    ...

    # Genesis 1

    **Genesis 1:1** "In the beginning"
    God created the heavens.

The appendix page starts with '# 67 Appendix' and lists each note under its
bolded heading.
"""

from __future__ import annotations

from typing import Iterable, Iterator, List

from .canon import APPENDIX_BOOK, book_info, book_name
from .model import BookDocument, GroupedRecord, NoteRecord
from .paths import book_document_path

VERSE_PLACEHOLDER = "—"


def render_info_table(book_num: int) -> str:
    lines = ["FIELD | INFO", "---- | ----"]
    for label, value in book_info(book_num):
        lines.append(f"{label} | {value}")
    return "\n".join(lines) + "\n"


def render_page_header(book_num: int) -> str:
    if book_num == APPENDIX_BOOK:
        return f"# {APPENDIX_BOOK} {book_name(APPENDIX_BOOK)}\n\n"
    return render_info_table(book_num) + "\n"


def _render_appendix(record: NoteRecord) -> str:
    heading = record.heading or record.title or VERSE_PLACEHOLDER
    return f"**{heading}**\n{record.note or ''}\n\n"


def _render_scripture(record: NoteRecord, chapter_changed: bool) -> str:
    name = book_name(record.book_num)
    out = ""
    if chapter_changed:
        out += f"# {name} {record.chapter}\n\n"
    locator = f"{name} {record.chapter}:{record.verse or VERSE_PLACEHOLDER}"
    out += f'**{locator}** "{record.title or ""}"\n{record.note or ""}\n\n'
    return out


def render_record(grouped: GroupedRecord) -> str:
    record = grouped.record
    if record.is_appendix:
        return _render_appendix(record)
    return _render_scripture(record, grouped.chapter_changed)


def render_documents(
    grouped: Iterable[GroupedRecord],
    working_folder: str,
) -> Iterator[BookDocument]:
    """
    Accumulate rendered records per book and yield a BookDocument at every
    book boundary. Rendering is pure; nothing is written here.
    """
    parts: List[str] = []
    count = 0

    for item in grouped:
        parts.append(render_record(item))
        count += 1

        if not item.book_boundary:
            continue

        book_num = item.record.book_num
        name = book_name(book_num)
        yield BookDocument(
            book_num=book_num,
            book_name=name,
            path=book_document_path(working_folder, book_num, name),
            content=render_page_header(book_num) + "".join(parts),
            record_count=count,
        )
        parts = []
        count = 0
