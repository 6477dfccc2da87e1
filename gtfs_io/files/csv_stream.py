"""Delimited text helpers shared by sources and targets"""

import csv
from typing import Callable, Iterable, Iterator, List, Optional

LinePreprocessor = Callable[[str], str]


def read_rows(
    lines: Iterable[str],
    separator: str = ",",
    preprocessor: Optional[LinePreprocessor] = None,
) -> Iterator[List[str]]:
    """Lazily split text lines into rows

    The preprocessor sees every raw line before it is split. Blank
    lines are skipped.
    """
    if preprocessor is not None:
        lines = (preprocessor(line) for line in lines)
    for row in csv.reader(lines, delimiter=separator):
        if row:
            yield row


def join_row(row: Iterable[str], separator: str = ",") -> str:
    """Join already-encoded cells; quoting is the field codecs' job"""
    return separator.join(row)
