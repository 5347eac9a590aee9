"""Closest-roster suggestions for scorers that were not credited."""

from rapidfuzz.distance import JaroWinkler

from bulletin import DroppedScorer

# Default similarity threshold (0–1 scale)
DEFAULT_HINT_THRESHOLD = 0.85


def _normalize_key(value: str) -> str:
    """Normalize a surname for comparison."""
    return value.strip().upper().replace('Ё', 'Е')


def suggest_roster_name(
    name: str,
    roster: list[str],
    threshold: float = DEFAULT_HINT_THRESHOLD,
) -> str | None:
    """Find the roster entry most similar to a scorer name.

    Args:
        name: Scorer surname that matched no roster entry.
        roster: Player names of the scorer's team.
        threshold: Minimum Jaro-Winkler similarity (0–1).

    Returns:
        The best roster name at or above the threshold, or None.
    """
    key = _normalize_key(name)
    best_name: str | None = None
    best_sim = -1.0

    for candidate in roster:
        sim = JaroWinkler.similarity(key, _normalize_key(candidate))
        if sim >= threshold and sim > best_sim:
            best_sim = sim
            best_name = candidate

    return best_name


def scorer_hints(
    dropped: list[DroppedScorer],
    teams: dict[str, dict],
    threshold: float = DEFAULT_HINT_THRESHOLD,
) -> list[tuple[DroppedScorer, str | None]]:
    """Pair every dropped scorer with the closest player of the same team.

    Suggestions are informational only; the tables are not changed.

    Args:
        dropped: Scorers that were not credited.
        teams: Team name -> player table, as in StatsTables.teams.
        threshold: Minimum Jaro-Winkler similarity (0–1).

    Returns:
        List of (dropped scorer, suggestion or None).
    """
    return [
        (scorer, suggest_roster_name(
            scorer.player_name, list(teams.get(scorer.team_name, {})), threshold,
        ))
        for scorer in dropped
    ]
