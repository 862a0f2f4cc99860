"""Tests for vault path helpers (bsn/paths.py)"""

import pytest

from bsn.paths import book_document_path, normalize_path


class TestNormalizePath:
    @pytest.mark.parametrize("raw, expected", [
        ("Bible/01 Genesis.md", "Bible/01 Genesis.md"),
        ("/Bible//Notes/", "Bible/Notes"),
        ("Bible\\Notes\\x.md", "Bible/Notes/x.md"),
        ("Study\u00a0Notes/a.md", "Study Notes/a.md"),
        ("", "/"),
        ("///", "/"),
    ])
    def test_normalize(self, raw, expected):
        assert normalize_path(raw) == expected

    def test_nfc(self):
        decomposed = "Cafe\u0301/a.md"
        assert normalize_path(decomposed) == "Caf\u00e9/a.md"


class TestBookDocumentPath:
    def test_zero_padded(self):
        assert book_document_path("Bible", 1, "Genesis") == "Bible/01 Genesis.md"

    def test_two_digit_book(self):
        assert book_document_path("Bible/", 46, "1 Corinthians") == "Bible/46 1 Corinthians.md"

    def test_nested_folder(self):
        assert book_document_path("Vault/Study", 67, "Appendix") == "Vault/Study/67 Appendix.md"
