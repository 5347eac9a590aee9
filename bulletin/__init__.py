"""Core module for ft-stats."""

from dataclasses import dataclass, field

# Parse error kinds reported through the per-line error channel
MISSING_SCORE_PATTERN = 'MISSING_SCORE_PATTERN'
UNBALANCED_TEAM_QUOTES = 'UNBALANCED_TEAM_QUOTES'
REFEREE_NOT_FOUND = 'REFEREE_NOT_FOUND'
DIVIDER_NOT_FOUND = 'DIVIDER_NOT_FOUND'
EMPTY_TEAM_NAME = 'EMPTY_TEAM_NAME'


@dataclass
class MatchRecord:
    """One team's participation in one fixture."""

    team_name: str
    match_label: str      # Raw text before the score, display only
    referee: str
    roster: list[str] = field(default_factory=list)
    scorers: list[str] = field(default_factory=list)


@dataclass
class PlayerStat:
    """Games and goals of one player within one team."""

    games: int = 1
    goals: int = 0


@dataclass
class RefereeStat:
    """Number of fixtures a referee officiated."""

    games: int = 1


@dataclass
class LineError:
    """A report line that could not be turned into match records."""

    line_number: int      # 1-based
    raw_line: str
    kind: str             # One of the error kinds above
    detail: str = ''


@dataclass
class DroppedScorer:
    """A scorer token that matched no roster entry of its team."""

    team_name: str
    player_name: str
    line_number: int = 0
