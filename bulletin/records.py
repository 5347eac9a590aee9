"""Turn a report line into one or two match records."""

import logging

from bulletin import DIVIDER_NOT_FOUND, EMPTY_TEAM_NAME, MatchRecord
from bulletin.extract import (
    DIVIDER,
    TEAM_QUOTE,
    extract_match_label,
    extract_referee,
    extract_roster,
    extract_scorers,
    extract_team_names,
    is_blank_tokens,
)

log = logging.getLogger(__name__)


def _tokens(tokens: list[str]) -> list[str]:
    """Map the missing-keyword result to an empty list."""
    return [] if is_blank_tokens(tokens) else tokens


def _without_dividers(tokens: list[str]) -> list[str]:
    return [token for token in tokens if token != DIVIDER]


def split_roster(roster: list[str]) -> tuple[list[str], list[str]] | None:
    """Split a double-header roster on the first divider token.

    Later dashes (e.g. inside a substitution note) are dropped as well.

    Returns:
        Both halves without any divider, or None if there is no divider.
    """
    if DIVIDER not in roster:
        return None
    index = roster.index(DIVIDER)
    return _without_dividers(roster[:index]), _without_dividers(roster[index + 1:])


def assign_scorers(
    scorers: list[str],
    first_roster: list[str],
) -> tuple[list[str], list[str]]:
    """Assign each scorer to the first team if listed in its roster, else to the second.

    A surname present in both rosters is always credited to the first team.
    """
    first: list[str] = []
    second: list[str] = []
    for scorer in _without_dividers(scorers):
        if scorer in first_roster:
            first.append(scorer)
        else:
            second.append(scorer)
    return first, second


def build_records(
    line: str,
    quote: str = TEAM_QUOTE,
) -> tuple[list[MatchRecord], str | None]:
    """Build the match records of a single report line.

    A line naming more than one quoted team is a double-header: the roster
    lists both line-ups separated by a divider and the scorers are shared.
    Otherwise the team is the quoted name inside the match-up label.

    Args:
        line: A line accepted by is_report_line().
        quote: Marker opening and closing each team name.

    Returns:
        Tuple of the records (empty on error) and an error kind or None.
    """
    match_label, error = extract_match_label(line)
    if error:
        return [], error

    team_names, error = extract_team_names(line, quote)
    if error:
        return [], error

    referee, error = extract_referee(line)
    if error:
        return [], error

    roster = _tokens(extract_roster(line))
    scorers = _tokens(extract_scorers(line))

    if len(team_names) > 1:
        halves = split_roster(roster)
        if halves is None:
            return [], DIVIDER_NOT_FOUND
        first_names = team_names[:2]
        if not all(first_names):
            return [], EMPTY_TEAM_NAME

        first_roster, second_roster = halves
        first_scorers, second_scorers = assign_scorers(scorers, first_roster)
        log.debug(
            "Doppelbegegnung %s: %d/%d Spieler, %d/%d Tore",
            match_label, len(first_roster), len(second_roster),
            len(first_scorers), len(second_scorers),
        )
        return [
            MatchRecord(first_names[0], match_label, referee, first_roster, first_scorers),
            MatchRecord(first_names[1], match_label, referee, second_roster, second_scorers),
        ], None

    label_names, error = extract_team_names(match_label, quote)
    if error or not label_names or not label_names[0]:
        return [], EMPTY_TEAM_NAME

    return [MatchRecord(
        label_names[0], match_label, referee,
        _without_dividers(roster), _without_dividers(scorers),
    )], None
