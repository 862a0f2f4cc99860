"""
Record tokenizer for the study-notes export.

The export is line-oriented:

    ==={Reference=01001001}{BK=1}{CH=1}{VS=1}===
    In the beginning              <- title (first content line)
    God created the heavens.      <- note (every later line)
    ==={DOC=ABC123}{HEADING=...}===
    ...
    ==={END}===

Every header line opens a new record. The tokenizer performs no I/O; it is
handed the full text.
"""

from __future__ import annotations

import re
from typing import Iterable, List, Optional, Tuple

from .model import RawRecord

HEADER_OPEN = "==={"
HEADER_CLOSE = "}==="
TAG_SEPARATOR = "}{"
KEY_SEPARATOR = "="
END_MARKER = "==={END}==="

_LINE_BREAK = re.compile(r"\r\n|\n|\r")


def split_lines(text: str) -> List[str]:
    """
    Split text on CRLF, LF or CR. A trailing line terminator does not produce
    an extra empty line, and a leading byte-order mark is dropped.
    """
    text = text.removeprefix("\ufeff")
    lines = _LINE_BREAK.split(text)
    if lines and lines[-1] == "":
        lines.pop()
    return lines


def is_header(line: str) -> bool:
    return line.startswith(HEADER_OPEN)


def parse_header(line: str) -> List[Tuple[str, str]]:
    """
    Parse a header line into (key, value) pairs, in header order.

    The 4-character wrappers are stripped (a bare closing '}' is accepted),
    the rest is split on '}{' and each tag on its first '='. A tag without
    '=' gets an empty value; empty tags are skipped.
    """
    body = line[len(HEADER_OPEN):]
    if body.endswith(HEADER_CLOSE):
        body = body[: -len(HEADER_CLOSE)]
    elif body.endswith("}"):
        # header cut short after the last tag
        body = body[:-1]
    tags: List[Tuple[str, str]] = []
    for tag in body.split(TAG_SEPARATOR):
        if not tag:
            continue
        key, _, value = tag.partition(KEY_SEPARATOR)
        tags.append((key, value))
    return tags


def format_header(tags: Iterable[Tuple[str, str]]) -> str:
    """
    Inverse of parse_header.
    """
    body = TAG_SEPARATOR.join(f"{k}{KEY_SEPARATOR}{v}" for k, v in tags)
    return f"{HEADER_OPEN}{body}{HEADER_CLOSE}"


class _RecordBuilder:
    """
    Accumulates one record between a header and the next header.
    """

    def __init__(self, tags: List[Tuple[str, str]]):
        self.tags = tags
        self.title: Optional[str] = None
        self.note: Optional[str] = None

    def add_line(self, line: str) -> None:
        if self.note is None:
            self.title = line
            self.note = ""
        elif self.note == "":
            self.note = line
        else:
            self.note = f"{self.note}\n{line}"

    def build(self) -> RawRecord:
        return RawRecord(tags=tuple(self.tags), title=self.title, note=self.note)


def tokenize(text: str) -> List[RawRecord]:
    """
    Split the export into RawRecords, in input order.

    - the END marker line is ignored
    - a header line closes the open record and starts a new one
    - content lines before the first header are ignored
    - records with no tags, title or note are dropped
    """
    results: List[RawRecord] = []
    current: Optional[_RecordBuilder] = None

    for line in split_lines(text):
        if line == END_MARKER:
            continue

        if is_header(line):
            if current is not None:
                _push(results, current)
            current = _RecordBuilder(parse_header(line))
        elif current is not None:
            current.add_line(line)

    if current is not None:
        _push(results, current)
    return results


def _push(results: List[RawRecord], builder: _RecordBuilder) -> None:
    record = builder.build()
    if not record.is_empty():
        results.append(record)
