"""
bsn - Bible Study Notes core package

This package turns a study-notes export into one Markdown page per Bible book:
- config: Project configuration and versioning
- paths: Vault path helpers
- util: Utility functions for console output
- canon: Book names and per-book reference info
- tokenizer: Export text to raw records
- normalizer: Sort keys and book numbers
- grouping: Canonical ordering and chapter/book boundaries
- render: Markdown pages per book
- importer: The full import pipeline
- vault: Folder-backed read/write collaborator
- index_export: Excel index of all notes
"""

from . import config
from .util import info, warn, error, ok
from .tokenizer import tokenize
from .normalizer import normalize, normalize_all
from .grouping import order_records, group_records
from .render import render_documents
from .importer import create_study_notes, build_records, SourceUnreadableError
from .vault import FolderVault

__version__ = config.__version__
__all__ = [
    "config",
    "info",
    "warn",
    "error",
    "ok",
    "tokenize",
    "normalize",
    "normalize_all",
    "order_records",
    "group_records",
    "render_documents",
    "create_study_notes",
    "build_records",
    "SourceUnreadableError",
    "FolderVault",
]
