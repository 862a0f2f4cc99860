"""
Canonical reference data: book names, the per-book info table and its labels.

Book numbers are 1-based in canonical order (1 = Genesis, 66 = Revelation).
Number 67 is the synthetic Appendix bucket for notes not tied to a verse.
"""

from __future__ import annotations

from typing import List, Tuple

APPENDIX_BOOK = 67

BOOK_NAMES: Tuple[str, ...] = (
    "Genesis",
    "Exodus",
    "Leviticus",
    "Numbers",
    "Deuteronomy",
    "Joshua",
    "Judges",
    "Ruth",
    "1 Samuel",
    "2 Samuel",
    "1 Kings",
    "2 Kings",
    "1 Chronicles",
    "2 Chronicles",
    "Ezra",
    "Nehemiah",
    "Esther",
    "Job",
    "Psalms",
    "Proverbs",
    "Ecclesiastes",
    "Song of Solomon",
    "Isaiah",
    "Jeremiah",
    "Lamentations",
    "Ezekiel",
    "Daniel",
    "Hosea",
    "Joel",
    "Amos",
    "Obadiah",
    "Jonah",
    "Micah",
    "Nahum",
    "Habakkuk",
    "Zephaniah",
    "Haggai",
    "Zechariah",
    "Malachi",
    "Matthew",
    "Mark",
    "Luke",
    "John",
    "Acts",
    "Romans",
    "1 Corinthians",
    "2 Corinthians",
    "Galatians",
    "Ephesians",
    "Philippians",
    "Colossians",
    "1 Thessalonians",
    "2 Thessalonians",
    "1 Timothy",
    "2 Timothy",
    "Titus",
    "Philemon",
    "Hebrews",
    "James",
    "1 Peter",
    "2 Peter",
    "1 John",
    "2 John",
    "3 John",
    "Jude",
    "Revelation",
    "Appendix",
)

INFO_LABELS: Tuple[str, ...] = (
    "ORDER",
    "NAME OF BOOK",
    "WRITER(S)",
    "PLACE WRITTEN",
    "COMPLETED (B.C.E.)",
    "TIME COVERED (B.C.E.)",
    "CHAPTERS",
    "VERSES",
    "VERSE/CHAPTER",
)

# order | name | writers | place written | completed | time covered | chapters | verses | verses/chapter
_INFO_ROWS: Tuple[str, ...] = (
    "1 | Genesis | Moses | Wilderness | 1513 | “In the beginning” to 1657 | 50 | 1533 | 31",
    "2 | Exodus | Moses | Wilderness | 1512 | 1657-1512 | 40 | 1213 | 30",
    "3 | Leviticus | Moses | Wilderness | 1512 | 1 month (1512) | 27 | 859 | 32",
    "4 | Numbers | Moses | Wilderness and Plains of Moab | 1473 | 1512-1473 | 36 | 1288 | 36",
    "5 | Deuteronomy | Moses | Plains of Moab | 1473 | 2 months (1473) | 34 | 959 | 28",
    "6 | Joshua | Joshua | Canaan | c. 1450 | 1473–c. 1450 | 24 | 658 | 27",
    "7 | Judges | Samuel | Israel | c. 1100 | c. 1450–c. 1120 | 21 | 618 | 29",
    "8 | Ruth | Samuel | Israel | c. 1090 | 11 years of Judges’ rule | 4 | 85 | 21",
    "9 | 1 Samuel | Samuel; Gad; Nathan | Israel | c. 1078 | c. 1180-1078 | 31 | 810 | 26",
    "10 | 2 Samuel | Gad; Nathan | Israel | c. 1040 | 1077–c. 1040 | 24 | 695 | 29",
    "11 | 1 Kings | Jeremiah | Judah | 580 | c. 1040-911 | 22 | 816 | 37",
    "12 | 2 Kings | Jeremiah | Judah and Egypt | 580 | c. 920-580 | 25 | 719 | 29",
    "13 | 1 Chronicles | Ezra | Jerusalem (?) | c. 460 | After 1 Chronicles 9:44: c. 1077-1037 | 29 | 942 | 32",
    "14 | 2 Chronicles | Ezra | Jerusalem (?) | c. 460 | c. 1037-537 | 36 | 822 | 23",
    "15 | Ezra | Ezra | Jerusalem | c. 460 | 537–c. 467 | 10 | 280 | 28",
    "16 | Nehemiah | Nehemiah | Jerusalem | a. 443 | 456–a. 443 | 13 | 406 | 31",
    "17 | Esther | Mordecai | Shushan, Elam | c. 475 | 493–c. 475 | 10 | 167 | 17",
    "18 | Job | Moses | Wilderness | c. 1473 | Over 140 years between 1657 and 1473 | 42 | 1070 | 25",
    "19 | Psalms | David (73), Sons of Korah (11), Asaph (12), Moses, Solomon, Ethan, Hezekiah?, and others (40) |   | c. 460 |   | 150 | 2461 | 16",
    "20 | Proverbs | Solomon; Agur; Lemuel | Jerusalem | c. 717 |   | 31 | 915 | 29",
    "21 | Ecclesiastes | Solomon | Jerusalem | b. 1000 |   | 12 | 222 | 18",
    "22 | Song of Solomon | Solomon | Jerusalem | c. 1020 |   | 8 | 117 | 15",
    "23 | Isaiah | Isaiah | Jerusalem | a. 732 | c. 778–a. 732 | 66 | 1292 | 20",
    "24 | Jeremiah | Jeremiah | Judah; Egypt | 580 | 647-580 | 52 | 1364 | 26",
    "25 | Lamentations | Jeremiah | Near Jerusalem | 607 |   | 5 | 154 | 31",
    "26 | Ezekiel | Ezekiel | Babylon | c. 591 | 613–c. 591 | 48 | 1273 | 26",
    "27 | Daniel | Daniel | Babylon | c. 536 | 618–c. 536 | 12 | 357 | 30",
    "28 | Hosea | Hosea | Samaria (District) | a. 745 | b. 804–a. 745 | 14 | 197 | 14",
    "29 | Joel | Joel | Judah | c. 820 (?) |   | 3 | 73 | 24",
    "30 | Amos | Amos | Judah | c. 804 |   | 9 | 146 | 16",
    "31 | Obadiah | Obadiah |   | c. 607 |   | 1 | 21 | 21",
    "32 | Jonah | Jonah |   | c. 844 |   | 4 | 48 | 12",
    "33 | Micah | Micah | Judah | b. 717 | c. 777-717 | 7 | 105 | 15",
    "34 | Nahum | Nahum | Judah | b. 632 |   | 3 | 47 | 16",
    "35 | Habakkuk | Habakkuk | Judah | c. 628 (?) |   | 3 | 56 | 19",
    "36 | Zephaniah | Zephaniah | Judah | b. 648 |   | 3 | 53 | 18",
    "37 | Haggai | Haggai | Jerusalem rebuilt | 520 | 112 days (520) | 2 | 38 | 19",
    "38 | Zechariah | Zechariah | Jerusalem rebuilt | 518 | 520-518 | 14 | 211 | 15",
    "39 | Malachi | Malachi | Jerusalem rebuilt | a. 443 |   | 4 | 55 | 14",
    "40 | Matthew | Matthew | Palestine | c. 41 | 2 B.C.E.–33 C.E. | 28 | 1071 | 38",
    "41 | Mark | Mark | Rome | c. 60-65 | 29-33 C.E. | 16 | 678 | 42",
    "42 | Luke | Luke | Caesarea | c. 56-58 | 3 B.C.E.–33 C.E. | 24 | 1151 | 48",
    "43 | John | Apostle John | Ephesus, or near | c. 98 | After prologue, 29-33 C.E. | 21 | 879 | 42",
    "44 | Acts | Luke | Rome | c. 61 | 33–c. 61 C.E. | 28 | 1007 | 36",
    "45 | Romans | Paul | Corinth | c. 56 |   | 16 | 433 | 27",
    "46 | 1 Corinthians | Paul | Ephesus | c. 55 |   | 16 | 437 | 27",
    "47 | 2 Corinthians | Paul | Macedonia | c. 55 |   | 13 | 257 | 20",
    "48 | Galatians | Paul | Corinth or Syrian Antioch | c. 50-52 |   | 6 | 149 | 25",
    "49 | Ephesians | Paul | Rome | c. 60-61 |   | 6 | 155 | 26",
    "50 | Philippians | Paul | Rome | c. 60-61 |   | 4 | 104 | 26",
    "51 | Colossians | Paul | Rome | c. 60-61 |   | 4 | 95 | 24",
    "52 | 1 Thessalonians | Paul | Corinth | c. 50 |   | 5 | 89 | 18",
    "53 | 2 Thessalonians | Paul | Corinth | c. 51 |   | 3 | 47 | 16",
    "54 | 1 Timothy | Paul | Macedonia | c. 61-64 |   | 6 | 113 | 19",
    "55 | 2 Timothy | Paul | Rome | c. 65 |   | 4 | 83 | 21",
    "56 | Titus | Paul | Macedonia (?) | c. 61-64 |   | 3 | 46 | 15",
    "57 | Philemon | Paul | Rome | c. 60-61 |   | 1 | 25 | 25",
    "58 | Hebrews | Paul | Rome | c. 61 |   | 13 | 303 | 23",
    "59 | James | James (Jesus’ brother) | Jerusalem | b. 62 |   | 5 | 108 | 22",
    "60 | 1 Peter | Peter | Babylon | c. 62-64 |   | 5 | 105 | 21",
    "61 | 2 Peter | Peter | Babylon (?) | c. 64 |   | 3 | 61 | 20",
    "62 | 1 John | Apostle John | Ephesus, or near | c. 98 |   | 5 | 105 | 21",
    "63 | 2 John | Apostle John | Ephesus, or near | c. 98 |   | 1 | 13 | 13",
    "64 | 3 John | Apostle John | Ephesus, or near | c. 98 |   | 1 | 14 | 14",
    "65 | Jude | Jude (Jesus’ brother) | Palestine (?) | c. 65 |   | 1 | 25 | 25",
    "66 | Revelation | Apostle John | Patmos | c. 96 |   | 22 | 404 | 18",
)


def is_scripture_book(book_num: int) -> bool:
    return 1 <= book_num <= len(_INFO_ROWS)


def book_name(book_num: int) -> str:
    """
    Canonical name for a book number (1..67).

    Raises
    ------
    KeyError
        If book_num is outside the table.
    """
    if not 1 <= book_num <= len(BOOK_NAMES):
        raise KeyError(f"No book with number {book_num}")
    return BOOK_NAMES[book_num - 1]


def book_info(book_num: int) -> List[Tuple[str, str]]:
    """
    Return the info row for a scripture book as (label, value) pairs,
    paired positionally with INFO_LABELS.
    """
    if not is_scripture_book(book_num):
        raise KeyError(f"No info row for book {book_num}")
    values = [v.strip() for v in _INFO_ROWS[book_num - 1].split(" | ")]
    return list(zip(INFO_LABELS, values))
