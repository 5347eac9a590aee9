"""Line classification and field extraction for match-report lines.

Extraction is anchored on keyword positions rather than on one grammar-wide
pattern: the reports mix fixed keywords with free-form segments (date,
stadium, attendance, substitutions with minutes) that a single regex cannot
bound reliably.
"""

import re

from bulletin import MISSING_SCORE_PATTERN, REFEREE_NOT_FOUND, UNBALANCED_TEAM_QUOTES

REFEREE_KEYWORD = 'Судья'
ROSTER_KEYWORD = 'Состав'
GOALS_KEYWORD = 'Голы:'
GOAL_KEYWORD = 'Гол:'

TEAM_QUOTE = '"'
DIVIDER = '–'

# Separator dash followed by the final score, e.g. "– 3-1"
_SCORE_RE = re.compile(r'– \d+-\d+')
# Minute numbers; digits glued to a name are left alone
_NUMBER_RE = re.compile(r'(?<!\w)\d+(?!\w)')
_PARENS_RE = re.compile(r'[()]')

# Leading separator of the referee segment and the ". " before the roster
_REFEREE_EDGES = ' \t–—-:'
_REFEREE_TAIL = ' \t.,'


def _quoted_re(quote: str) -> re.Pattern:
    q = re.escape(quote)
    return re.compile(f'{q}([^{q}]*){q}')


def is_report_line(line: str) -> bool:
    """Return True if the line carries both the referee and roster keywords."""
    return REFEREE_KEYWORD in line and ROSTER_KEYWORD in line


def is_blank_tokens(tokens: list[str]) -> bool:
    """Check for the single-blank-token result of a missing keyword."""
    return tokens == ['']


def extract_match_label(line: str) -> tuple[str, str | None]:
    """Extract the match-up label preceding the score.

    Args:
        line: Raw report line.

    Returns:
        Tuple of the stripped label and an error kind. The label is empty
        and the error is MISSING_SCORE_PATTERN if the line has no score.
    """
    match = _SCORE_RE.search(line)
    if match is None:
        return '', MISSING_SCORE_PATTERN
    return line[:match.start()].strip(), None


def extract_team_names(line: str, quote: str = TEAM_QUOTE) -> tuple[list[str], str | None]:
    """Extract every quoted team name in order of appearance.

    Args:
        line: Raw report line or match-up label.
        quote: Marker opening and closing each team name.

    Returns:
        Tuple of the quoted names and an error kind. An odd number of
        quote marks yields no names and UNBALANCED_TEAM_QUOTES.
    """
    if line.count(quote) % 2:
        return [], UNBALANCED_TEAM_QUOTES
    return [name.strip() for name in _quoted_re(quote).findall(line)], None


def extract_referee(line: str) -> tuple[str, str | None]:
    """Extract the referee name between the referee and roster keywords.

    Args:
        line: Raw report line.

    Returns:
        Tuple of the referee name and an error kind (REFEREE_NOT_FOUND if
        either keyword is missing, they are out of order or the name is empty).
    """
    start = line.find(REFEREE_KEYWORD)
    end = line.find(ROSTER_KEYWORD)
    if start == -1 or end == -1 or start >= end:
        return '', REFEREE_NOT_FOUND

    referee = line[start + len(REFEREE_KEYWORD):end]
    referee = referee.lstrip(_REFEREE_EDGES).rstrip(_REFEREE_TAIL)
    if not referee:
        return '', REFEREE_NOT_FOUND
    return referee, None


def _is_name_token(token: str) -> bool:
    return token == DIVIDER or any(ch.isalnum() for ch in token)


def _split_names(text: str) -> list[str]:
    """Split on commas, then on whitespace, flatten and drop stray punctuation."""
    tokens: list[str] = []
    for segment in text.split(','):
        tokens.extend(token.removesuffix('.') for token in segment.split())
    return [token for token in tokens if _is_name_token(token)]


def extract_roster(line: str) -> list[str]:
    """Extract the roster tokens of a report line.

    The roster runs from the roster keyword to the first scorer keyword
    ("Гол:" is looked up before "Голы:") or the end of the line.
    Substitution parentheses, minute numbers and semicolons are removed,
    the rest is split on commas and whitespace. Double-header rosters keep
    the divider as a token of its own.

    Args:
        line: Raw report line.

    Returns:
        List of player surnames, or [''] if the line has no roster.
    """
    start = line.find(ROSTER_KEYWORD)
    goal_index = line.find(GOAL_KEYWORD)
    if goal_index == -1:
        goal_index = line.find(GOALS_KEYWORD)
    end = len(line) if goal_index == -1 else goal_index

    if start == -1 or start >= end:
        return ['']

    text = line[start + len(ROSTER_KEYWORD):end].lstrip(':')
    text = _PARENS_RE.sub('', text)
    text = _NUMBER_RE.sub('', text)
    text = text.replace(';', '')

    return _split_names(text)


def extract_scorers(line: str) -> list[str]:
    """Extract the scorer tokens of a report line.

    One token per goal, so a player who scored twice appears twice.

    Args:
        line: Raw report line.

    Returns:
        List of scorer surnames, or [''] if the line has no scorer keyword.
    """
    keyword = GOALS_KEYWORD
    start = line.find(GOALS_KEYWORD)
    if start == -1:
        keyword = GOAL_KEYWORD
        start = line.find(GOAL_KEYWORD)
    if start == -1:
        return ['']

    text = _NUMBER_RE.sub('', line[start + len(keyword):]).strip()
    text = text.removesuffix('.')
    return _split_names(text)
