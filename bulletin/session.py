"""Ingestion session owning the aggregated tables of one bulletin text."""

import logging

from bulletin import DroppedScorer, LineError
from bulletin.aggregate import StatsTables, ingest, referee_rows, team_rows
from bulletin.extract import TEAM_QUOTE, is_report_line
from bulletin.records import build_records
from bulletin.sorting import SortState, sort_rows

log = logging.getLogger(__name__)


class Session:
    """Statistics built from one bulletin text.

    Every call to ingest_text() starts from empty tables; results of
    different texts are never merged. Lines that cannot be parsed are
    collected in ``errors`` and left out of the tables.
    """

    def __init__(self, quote: str = TEAM_QUOTE) -> None:
        self.quote = quote
        self.tables = StatsTables()
        self.errors: list[LineError] = []
        self.record_count = 0
        self._sort_states: dict[str, SortState] = {}

    @property
    def errored(self) -> bool:
        return bool(self.errors)

    @property
    def dropped_scorers(self) -> list[DroppedScorer]:
        return self.tables.dropped_scorers

    def reset(self) -> None:
        """Discard all tables, errors and sort cursors."""
        self.tables = StatsTables()
        self.errors = []
        self.record_count = 0
        self._sort_states = {}

    def ingest_text(self, text: str) -> 'Session':
        """Parse a newline-delimited bulletin text into fresh tables.

        Args:
            text: Decoded bulletin text, one match report per line.

        Returns:
            The session itself.
        """
        self.reset()

        for line_number, raw_line in enumerate(text.split('\n'), start=1):
            raw_line = raw_line.removesuffix('\r')
            line = raw_line.strip()
            if not is_report_line(line):
                continue

            records, error = build_records(line, self.quote)
            if error:
                log.warning("Zeile %d uebersprungen (%s): %s", line_number, error, line[:60])
                self.errors.append(LineError(line_number, raw_line, error))
                continue

            ingest(records, self.tables, line_number)
            self.record_count += len(records)

        log.info(
            "%d Spielberichte verarbeitet: %d Mannschaften, %d Schiedsrichter, %d fehlerhafte Zeilen",
            self.record_count, len(self.tables.teams),
            len(self.tables.referees), len(self.errors),
        )
        return self

    def teams(self) -> list[str]:
        """Team names in order of first appearance."""
        return list(self.tables.teams)

    def team_table(self, team_name: str) -> list[tuple[str, int, int]]:
        """Return (player, games, goals) rows of a team in insertion order."""
        return team_rows(self.tables, team_name)

    def referee_table(self) -> list[tuple[str, int]]:
        """Return (referee, games) rows in insertion order."""
        return referee_rows(self.tables)

    def sort_state(self, team_name: str) -> SortState:
        return self._sort_states.setdefault(team_name, SortState())

    def sort(self, team_name: str, column: str) -> list[tuple[str, int, int]]:
        """Advance the sort cursor of a team column and return the reordered rows.

        Raises:
            KeyError: If the team never appeared.
            ValueError: If the column is unknown.
        """
        rows = self.team_table(team_name)
        return sort_rows(rows, column, self.sort_state(team_name))
