#!/usr/bin/env python
"""
study_notes.py – command line for Bible Study Notes

Commands:

  python study_notes.py import
      Read Bible/jwlnotes.txt and write one page per book into Bible/

  python study_notes.py import --folder Notes --source export.txt --dry-run
      Show which pages would be written, without writing them

  python study_notes.py summary
      Print note and chapter counts per book

  python study_notes.py export-index notes_index.xlsx
      Write the ordered note index to an Excel workbook

Global option --root sets the vault folder (default: current directory, or $BSN_ROOT).
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from bsn import config
from bsn.canon import book_name
from bsn.config import Settings, load_settings
from bsn.grouping import group_records
from bsn.importer import (
    SourceUnreadableError,
    build_records,
    create_study_notes,
    read_source,
    summarize,
)
from bsn.index_export import export_index
from bsn.render import render_documents
from bsn.util import error, info, timed, warn
from bsn.vault import FolderVault


def _settings(args: argparse.Namespace) -> Settings:
    return load_settings(
        root=args.root,
        working_folder=getattr(args, "folder", None),
        source_file=getattr(args, "source", None),
    )


def _load_records(vault: FolderVault, settings: Settings):
    text = read_source(vault.read, settings.source_location)
    return build_records(text)


# ---------- Command handlers ----------


def cmd_import(args: argparse.Namespace) -> int:
    """
    Run the import pipeline against the folder vault.
    """
    settings = _settings(args)
    vault = FolderVault(settings.root)

    if args.dry_run:
        records = _load_records(vault, settings)
        info(f"Dry run: {len(records)} note(s) parsed; nothing will be written.")
        for doc in render_documents(group_records(records), settings.working_folder):
            info(f"Would write {doc.path} ({doc.record_count} note(s), {len(doc.content)} chars)")
        return 0

    with timed("Import"):
        result = create_study_notes(
            read=vault.read,
            write=vault.write,
            report=lambda path: info(f"Created page: {path}"),
            source_location=settings.source_location,
            working_folder=settings.working_folder,
        )
    return 0 if not result.failed else 2


def cmd_summary(args: argparse.Namespace) -> int:
    """
    Print note/chapter counts per book.
    """
    settings = _settings(args)
    records = _load_records(FolderVault(settings.root), settings)

    counts = summarize(records)
    if not counts:
        warn("No notes found in the export.")
        return 0

    print()
    print(f"{'#':>2}  {'Book':<18} {'Notes':>6} {'Chapters':>9}")
    print("-" * 40)
    for book_num, (notes, chapters) in counts.items():
        print(f"{book_num:>2}  {book_name(book_num):<18} {notes:>6} {chapters:>9}")
    print("-" * 40)
    print(f"    {'Total':<18} {len(records):>6}")
    print()
    return 0


def cmd_export_index(args: argparse.Namespace) -> int:
    """
    Write the ordered note index to an Excel workbook.
    """
    settings = _settings(args)
    records = _load_records(FolderVault(settings.root), settings)
    export_index(records, Path(args.output), settings.working_folder)
    return 0


# ---------- Parser ----------


def _add_source_options(p: argparse.ArgumentParser) -> None:
    p.add_argument(
        "--folder",
        type=str,
        default=None,
        help=f"Working folder inside the vault (default: {config.DEFAULT_WORKING_FOLDER})",
    )
    p.add_argument(
        "--source",
        type=str,
        default=None,
        help=f"Exported text file inside the working folder (default: {config.DEFAULT_SOURCE_FILE})",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="study_notes",
        description="Bible Study Notes – one Markdown page per Bible book from a notes export",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {config.__version__}",
    )
    parser.add_argument(
        "--root",
        type=str,
        default=None,
        help="Vault root folder (default: $BSN_ROOT or current directory)",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    # import
    p_import = sub.add_parser(
        "import",
        help="Create one study-notes page per book from the export",
    )
    _add_source_options(p_import)
    p_import.add_argument(
        "--dry-run",
        action="store_true",
        help="Parse and render, but do not write any pages",
    )
    p_import.set_defaults(func=cmd_import)

    # summary
    p_summary = sub.add_parser(
        "summary",
        help="Show note and chapter counts per book",
    )
    _add_source_options(p_summary)
    p_summary.set_defaults(func=cmd_summary)

    # export-index
    p_index = sub.add_parser(
        "export-index",
        help="Write the ordered note index to an Excel workbook",
    )
    p_index.add_argument("output", type=str, help="Output .xlsx file")
    _add_source_options(p_index)
    p_index.set_defaults(func=cmd_export_index)

    return parser


# ---------- Main ----------


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        return args.func(args)
    except SourceUnreadableError as e:
        error(str(e))
        return 1


if __name__ == "__main__":
    sys.exit(main())
