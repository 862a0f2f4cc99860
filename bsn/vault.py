"""
Folder-backed vault: reads and writes vault-relative paths under a root folder.
"""

from __future__ import annotations

from pathlib import Path

from .paths import normalize_path


class FolderVault:
    """
    Minimal file-system collaborator for the import pipeline.

    Paths are vault-relative ('Bible/01 Genesis.md'); parent folders are
    created on write and existing files are overwritten.
    """

    def __init__(self, root: Path | str):
        self.root = Path(root)

    def full_path(self, location: str) -> Path:
        location = normalize_path(location)
        if location == "/":
            return self.root
        return self.root / location

    def read(self, location: str) -> str:
        return self.full_path(location).read_text(encoding="utf-8")

    def write(self, location: str, content: str) -> None:
        path = self.full_path(location)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8", newline="")
