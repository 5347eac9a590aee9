"""Tri-state column sorting for team tables."""

from dataclasses import dataclass, field

UNORDERED = 'UNORDERED'
DESCENDING = 'DESCENDING'
ASCENDING = 'ASCENDING'

COLUMNS = ('name', 'games', 'goals')

# Column -> position in a (player, games, goals) row
_COLUMN_INDEX = {'name': 0, 'games': 1, 'goals': 2}

# The first selection sorts descending, then the direction alternates
_NEXT_STATE = {
    UNORDERED: DESCENDING,
    DESCENDING: ASCENDING,
    ASCENDING: DESCENDING,
}


@dataclass
class SortState:
    """Sort cursors of one team table, one per column."""

    cursors: dict[str, str] = field(
        default_factory=lambda: {column: UNORDERED for column in COLUMNS}
    )

    def advance(self, column: str) -> str:
        """Move the cursor of a column forward and reset the other two.

        Returns:
            The new state of the selected column.

        Raises:
            ValueError: If the column is unknown.
        """
        if column not in _COLUMN_INDEX:
            raise ValueError(f"Unbekannte Spalte: {column!r}")
        state = _NEXT_STATE[self.cursors[column]]
        for other in COLUMNS:
            self.cursors[other] = UNORDERED
        self.cursors[column] = state
        return state


def order_rows(rows: list[tuple], column: str, state: str) -> list[tuple]:
    """Return rows ordered by a column in the given direction.

    Numeric columns use a stable sort, so ties keep the incoming order in
    both directions. Names are sorted ascending and reversed for
    descending order. UNORDERED returns the rows unchanged.
    """
    if column not in _COLUMN_INDEX:
        raise ValueError(f"Unbekannte Spalte: {column!r}")
    if state == UNORDERED:
        return list(rows)

    index = _COLUMN_INDEX[column]
    if column == 'name':
        ordered = sorted(rows, key=lambda row: row[index])
        if state == DESCENDING:
            ordered.reverse()
        return ordered
    return sorted(rows, key=lambda row: row[index], reverse=state == DESCENDING)


def sort_rows(rows: list[tuple], column: str, state: SortState) -> list[tuple]:
    """Advance the cursor of a column and return a freshly ordered copy of rows.

    Args:
        rows: (player, games, goals) rows in insertion order.
        column: One of 'name', 'games', 'goals'.
        state: Cursors of the table the rows belong to; updated in place.

    Returns:
        New list of rows; the input list is not modified.
    """
    direction = state.advance(column)
    return order_rows(rows, column, direction)
