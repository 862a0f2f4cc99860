"""
Vault path helpers for Bible Study Notes.
"""

from __future__ import annotations

import re
import unicodedata

_SLASHES = re.compile(r"/+")


def normalize_path(path: str) -> str:
    """
    Normalize a vault-relative path.

    - backslashes become forward slashes
    - repeated slashes collapse to one
    - leading/trailing slashes are removed
    - non-breaking spaces become plain spaces
    - the result is NFC-normalized

    An empty result becomes "/" (the vault root).
    """
    path = path.replace("\\", "/").replace("\u00a0", " ").replace("\u202f", " ")
    path = _SLASHES.sub("/", path).strip("/")
    if not path:
        return "/"
    return unicodedata.normalize("NFC", path)


def book_document_path(working_folder: str, book_num: int, book_name: str) -> str:
    """
    Path of the page for one book, e.g. 'Bible/01 Genesis.md'.
    """
    return normalize_path(f"{working_folder}/{book_num:02d} {book_name}.md")
