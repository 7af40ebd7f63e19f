"""
Pattern-based header discovery.
"""

from __future__ import annotations

import re
from typing import Any, List, Pattern, Tuple, Union

from tabular.exceptions import NoMatchesError
from tabular.services.sparse_table import SparseTable


def _output(match: "re.Match[str]") -> Any:
    if match.re.groups == 0:
        return match.group(0)
    return (match.group(0),) + match.groups()


def cols_matching(
    table: SparseTable,
    pattern: Union[str, Pattern[str]],
    at_row: int = 0,
) -> List[Tuple[int, Any]]:
    """
    Columns in ``at_row`` whose text fully matches ``pattern``.

    Returns ``(col, output)`` pairs in ascending column order, where output is
    the matched text for a pattern without groups, else ``(whole, *groups)``.
    A malformed pattern raises ``re.error``.
    """
    regex = re.compile(pattern)
    matches: List[Tuple[int, Any]] = []
    for col_index, value in table.row(at_row).items():
        match = regex.fullmatch(value.as_text())
        if match is not None:
            matches.append((col_index, _output(match)))

    if not matches:
        raise NoMatchesError(at_row, regex.pattern)
    return matches
