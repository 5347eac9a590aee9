"""Fold match records into player and referee tables."""

import logging
from dataclasses import dataclass, field

from bulletin import DroppedScorer, MatchRecord, PlayerStat, RefereeStat

log = logging.getLogger(__name__)


@dataclass
class StatsTables:
    """Aggregated statistics of one ingestion session.

    Dict insertion order is the first-appearance order of teams, players
    and referees and serves as the unsorted order of every table.
    """

    teams: dict[str, dict[str, PlayerStat]] = field(default_factory=dict)
    referees: dict[str, RefereeStat] = field(default_factory=dict)
    dropped_scorers: list[DroppedScorer] = field(default_factory=list)


def ingest(
    records: list[MatchRecord],
    tables: StatsTables | None = None,
    line_number: int = 0,
) -> StatsTables:
    """Add match records to the statistics tables.

    Counts are only ever incremented, so ingesting the same records twice
    counts them twice. Per record:

    1. The referee gains one game.
    2. Every roster token gains one game for its team. A name listed twice
       in one roster is counted twice.
    3. Every scorer token gains one goal, but only if the player already has
       a row in the same team. Other scorers are recorded in
       ``dropped_scorers`` and never create a row.

    Args:
        records: Match records in input order.
        tables: Tables to update; a fresh set is created if None.
        line_number: Source line of the records, kept with dropped scorers.

    Returns:
        The updated tables.
    """
    if tables is None:
        tables = StatsTables()

    for record in records:
        referee = tables.referees.get(record.referee)
        if referee:
            referee.games += 1
        else:
            tables.referees[record.referee] = RefereeStat()

        team = tables.teams.setdefault(record.team_name, {})
        for player in record.roster:
            stat = team.get(player)
            if stat:
                stat.games += 1
            else:
                team[player] = PlayerStat()

        for scorer in record.scorers:
            stat = team.get(scorer)
            if stat:
                stat.goals += 1
            else:
                log.debug("Torschuetze %s nicht im Aufgebot von %s", scorer, record.team_name)
                tables.dropped_scorers.append(
                    DroppedScorer(record.team_name, scorer, line_number)
                )

    return tables


def team_rows(tables: StatsTables, team_name: str) -> list[tuple[str, int, int]]:
    """Return (player, games, goals) rows of a team in insertion order.

    Raises:
        KeyError: If the team never appeared.
    """
    team = tables.teams[team_name]
    return [(name, stat.games, stat.goals) for name, stat in team.items()]


def referee_rows(tables: StatsTables) -> list[tuple[str, int]]:
    """Return (referee, games) rows in insertion order."""
    return [(name, stat.games) for name, stat in tables.referees.items()]
