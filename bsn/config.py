"""
Project configuration for Bible Study Notes.

Defaults mirror the export workflow: the exported text file sits in the
working folder, and the generated book pages are written next to it.
Environment variables override the defaults; command-line flags override both.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

__version__ = "0.3.0"

DEFAULT_SOURCE_FILE = "jwlnotes.txt"
DEFAULT_WORKING_FOLDER = "Bible"


@dataclass
class Settings:
    """
    Where to read the export and where to write the book pages.

    root          : folder the vault paths are relative to
    working_folder: vault-relative folder holding the export and the pages
    source_file   : name of the exported text file inside working_folder
    """
    root: str = "."
    working_folder: str = DEFAULT_WORKING_FOLDER
    source_file: str = DEFAULT_SOURCE_FILE

    @property
    def source_location(self) -> str:
        return f"{self.working_folder}/{self.source_file}"


def load_settings(
    root: str | None = None,
    working_folder: str | None = None,
    source_file: str | None = None,
) -> Settings:
    """
    Build Settings from (in increasing priority) defaults, BSN_* environment
    variables and explicit arguments.
    """
    settings = Settings(
        root=os.getenv("BSN_ROOT", "") or ".",
        working_folder=os.getenv("BSN_WORKING_FOLDER", "") or DEFAULT_WORKING_FOLDER,
        source_file=os.getenv("BSN_SOURCE_FILE", "") or DEFAULT_SOURCE_FILE,
    )
    if root:
        settings.root = root
    if working_folder:
        settings.working_folder = working_folder
    if source_file:
        settings.source_file = source_file
    return settings
