"""Tests for the import pipeline and folder vault (bsn/importer.py, bsn/vault.py)"""

import pytest

from bsn.importer import (
    SourceUnreadableError,
    build_records,
    create_study_notes,
    emit_documents,
    summarize,
)
from bsn.model import BookDocument
from bsn.vault import FolderVault

EXPORT = (
    "==={Reference=40005003}{BK=40}{CH=5}{VS=3}===\r\n"
    "Happy are those conscious of their spiritual need\r\n"
    "Sermon on the Mount.\r\n"
    "==={Reference=01001001}{BK=1}{CH=1}{VS=1}===\r\n"
    "In the beginning\r\n"
    "God created the heavens.\r\n"
    "==={DOC=ABC123}{HEADING=Creation week}===\r\n"
    "Appendix title\r\n"
    "Days of creation.\r\n"
    "==={END}===\r\n"
)


class MemoryVault:
    """Dict-backed collaborator; paths in `unwritable` raise on write."""

    def __init__(self, files=None, unwritable=()):
        self.files = dict(files or {})
        self.unwritable = set(unwritable)
        self.writes = []

    def read(self, location):
        if location not in self.files:
            raise FileNotFoundError(location)
        return self.files[location]

    def write(self, path, content):
        self.writes.append(path)
        if path in self.unwritable:
            raise PermissionError(f"read-only: {path}")
        self.files[path] = content


def run(vault, reported=None, **kwargs):
    return create_study_notes(
        read=vault.read,
        write=vault.write,
        report=(reported.append if reported is not None else None),
        source_location="Bible/jwlnotes.txt",
        working_folder="Bible",
        **kwargs,
    )


class TestCreateStudyNotes:
    def test_one_page_per_book(self):
        vault = MemoryVault({"Bible/jwlnotes.txt": EXPORT})
        reported = []
        result = run(vault, reported)

        expected = ["Bible/01 Genesis.md", "Bible/40 Matthew.md", "Bible/67 Appendix.md"]
        assert result.written == expected
        assert reported == expected
        assert result.failed == []
        assert result.record_count == 3
        assert result.success

        matthew = vault.files["Bible/40 Matthew.md"]
        assert "# Matthew 5\n\n" in matthew
        assert '**Matthew 5:3** "Happy are those conscious of their spiritual need"\nSermon on the Mount.\n\n' in matthew
        assert vault.files["Bible/67 Appendix.md"].startswith("# 67 Appendix\n\n**Creation week**\n")

    def test_idempotent(self):
        vault = MemoryVault({"Bible/jwlnotes.txt": EXPORT})
        run(vault)
        first = dict(vault.files)
        run(vault)
        assert vault.files == first

    def test_unreadable_source(self):
        vault = MemoryVault()
        with pytest.raises(SourceUnreadableError) as exc:
            run(vault)
        assert exc.value.location == "Bible/jwlnotes.txt"
        assert vault.writes == []

    def test_write_failure_skips_only_that_book(self, capsys):
        vault = MemoryVault({"Bible/jwlnotes.txt": EXPORT}, unwritable={"Bible/01 Genesis.md"})
        reported = []
        result = run(vault, reported)

        assert result.failed == ["Bible/01 Genesis.md"]
        assert result.written == ["Bible/40 Matthew.md", "Bible/67 Appendix.md"]
        assert reported == result.written
        assert not result.success

        # the failed book's content does not leak into the next page
        assert "Genesis" not in vault.files["Bible/40 Matthew.md"]
        out = capsys.readouterr().out
        assert out.count("Failed to write") == 1

    def test_cancel_between_books(self):
        vault = MemoryVault({"Bible/jwlnotes.txt": EXPORT})
        result = run(vault, cancel=lambda: len(vault.writes) >= 1)
        assert result.cancelled
        assert result.written == ["Bible/01 Genesis.md"]
        assert vault.writes == ["Bible/01 Genesis.md"]

    def test_failing_progress_report_keeps_later_books(self):
        vault = MemoryVault({"Bible/jwlnotes.txt": EXPORT})

        def report(path):
            raise RuntimeError("notice closed")

        result = create_study_notes(
            read=vault.read,
            write=vault.write,
            report=report,
            source_location="Bible/jwlnotes.txt",
            working_folder="Bible",
        )
        assert len(result.written) == 3
        assert "Bible/40 Matthew.md" in vault.files

    def test_empty_export_writes_nothing(self):
        vault = MemoryVault({"Bible/jwlnotes.txt": "==={END}===\r\n"})
        result = run(vault)
        assert result.written == []
        assert vault.writes == []


class TestEmitDocuments:
    def test_report_not_called_on_failure(self):
        docs = [
            BookDocument(1, "Genesis", "a.md", "x", 1),
            BookDocument(2, "Exodus", "b.md", "y", 2),
        ]
        vault = MemoryVault(unwritable={"a.md"})
        reported = []
        result = emit_documents(docs, vault.write, reported.append)
        assert reported == ["b.md"]
        assert result.record_count == 3

    def test_failing_progress_report_does_not_stop_run(self, capsys):
        docs = [
            BookDocument(1, "Genesis", "Bible/01 Genesis.md", "x", 1),
            BookDocument(40, "Matthew", "Bible/40 Matthew.md", "y", 1),
        ]
        vault = MemoryVault()
        calls = []

        def report(path):
            calls.append(path)
            if len(calls) == 1:
                raise RuntimeError("notice closed")

        result = emit_documents(docs, vault.write, report)
        assert result.written == ["Bible/01 Genesis.md", "Bible/40 Matthew.md"]
        assert result.failed == []
        assert vault.files["Bible/40 Matthew.md"] == "y"
        assert calls == result.written
        assert "Progress report failed for Bible/01 Genesis.md" in capsys.readouterr().out


class TestSummarize:
    def test_counts_per_book(self):
        text = EXPORT + "==={Reference=40006001}===\r\nPray\r\n==={Reference=40005004}===\r\nMourn\r\n"
        counts = summarize(build_records(text))
        assert list(counts) == [1, 40, 67]
        assert counts[40] == (3, 2)
        assert counts[67] == (1, 0)


class TestFolderVault:
    def test_round_trip_on_disk(self, tmp_path):
        (tmp_path / "Bible").mkdir()
        (tmp_path / "Bible" / "jwlnotes.txt").write_bytes(EXPORT.encode("utf-8"))
        vault = FolderVault(tmp_path)
        result = run(vault)

        assert len(result.written) == 3
        page = (tmp_path / "Bible" / "01 Genesis.md").read_text(encoding="utf-8")
        assert "# Genesis 1" in page

    def test_overwrites_existing_page(self, tmp_path):
        vault = FolderVault(tmp_path)
        vault.write("Bible/01 Genesis.md", "old")
        vault.write("Bible/01 Genesis.md", "new")
        assert vault.read("Bible/01 Genesis.md") == "new"

    def test_unwritable_folder(self, tmp_path):
        (tmp_path / "Bible").mkdir()
        (tmp_path / "Bible" / "jwlnotes.txt").write_text(EXPORT, encoding="utf-8")
        # a plain file where the output folder should be
        (tmp_path / "Out").write_text("not a folder", encoding="utf-8")
        vault = FolderVault(tmp_path)
        result = create_study_notes(
            read=vault.read,
            write=vault.write,
            report=None,
            source_location="Bible/jwlnotes.txt",
            working_folder="Out",
        )
        assert len(result.failed) == 3
        assert result.written == []
