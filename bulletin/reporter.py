"""Report generation for bulletin statistics (CSV, HTML, summary)."""

import csv
import logging
from pathlib import Path

from jinja2 import Environment, FileSystemLoader

from bulletin.hints import DEFAULT_HINT_THRESHOLD, scorer_hints
from bulletin.session import Session
from bulletin.sorting import DESCENDING, order_rows

log = logging.getLogger(__name__)

TEMPLATE_DIR = Path(__file__).resolve().parent.parent / 'templates'

PLAYER_COLUMNS = ['Team', 'Player', 'Games', 'Goals']
REFEREE_COLUMNS = ['Referee', 'Games']


def team_rows_for_report(
    session: Session,
    team_name: str,
    sort_column: str | None = None,
) -> list[tuple[str, int, int]]:
    """Rows of one team, optionally ordered descending by a column.

    Uses the first step of the sort cycle without touching the session's
    sort cursors.
    """
    rows = session.team_table(team_name)
    if sort_column:
        rows = order_rows(rows, sort_column, DESCENDING)
    return rows


def _player_rows(session: Session, sort_column: str | None) -> list[dict]:
    """Flatten all team tables into dicts for CSV/HTML output."""
    rows = []
    for team_name in session.teams():
        for player, games, goals in team_rows_for_report(session, team_name, sort_column):
            rows.append({
                'Team': team_name,
                'Player': player,
                'Games': games,
                'Goals': goals,
            })
    return rows


def write_csv_report(
    session: Session,
    output_path: Path,
    sort_column: str | None = None,
) -> None:
    """Write the player statistics of all teams as a CSV report.

    Uses UTF-8 with BOM (utf-8-sig) and semicolon delimiter for
    spreadsheet compatibility.

    Args:
        session: Session with ingested statistics.
        output_path: Path for the output CSV file.
        sort_column: Optional column to order each team by (descending).
    """
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    rows = _player_rows(session, sort_column)
    with open(output_path, 'w', newline='', encoding='utf-8-sig') as f:
        writer = csv.DictWriter(f, fieldnames=PLAYER_COLUMNS, delimiter=';')
        writer.writeheader()
        writer.writerows(rows)

    log.info("CSV-Report geschrieben: %s (%d Zeilen)", output_path, len(rows))


def write_referee_report(session: Session, output_path: Path) -> None:
    """Write the referee table as a CSV report."""
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    rows = session.referee_table()
    with open(output_path, 'w', newline='', encoding='utf-8-sig') as f:
        writer = csv.writer(f, delimiter=';')
        writer.writerow(REFEREE_COLUMNS)
        writer.writerows(rows)

    log.info("Schiedsrichter-Report geschrieben: %s (%d Zeilen)", output_path, len(rows))


def write_html_report(
    session: Session,
    output_path: Path,
    title: str = '',
    sort_column: str | None = None,
    hint_threshold: float = DEFAULT_HINT_THRESHOLD,
) -> None:
    """Write all tables, parse errors and dropped scorers as an HTML report.

    Args:
        session: Session with ingested statistics.
        output_path: Path for the output HTML file.
        title: Name of the bulletin (for the report title).
        sort_column: Optional column to order each team by (descending).
        hint_threshold: Similarity threshold for dropped-scorer suggestions.
    """
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    env = Environment(
        loader=FileSystemLoader(str(TEMPLATE_DIR)),
        autoescape=True,
    )
    template = env.get_template('report.html')

    teams = [
        (team_name, team_rows_for_report(session, team_name, sort_column))
        for team_name in session.teams()
    ]
    html = template.render(
        title=title,
        teams=teams,
        referees=session.referee_table(),
        errors=session.errors,
        hints=scorer_hints(session.dropped_scorers, session.tables.teams, hint_threshold),
        stats=_compute_stats(session),
    )

    output_path.write_text(html, encoding='utf-8')
    log.info("HTML-Report geschrieben: %s", output_path)


def _compute_stats(session: Session) -> dict:
    """Compute summary statistics of a session."""
    teams = session.tables.teams
    return {
        'records': session.record_count,
        'teams': len(teams),
        'players': sum(len(players) for players in teams.values()),
        'goals': sum(stat.goals for players in teams.values() for stat in players.values()),
        'referees': len(session.tables.referees),
        'errors': len(session.errors),
        'dropped_scorers': len(session.dropped_scorers),
    }


def print_summary(session: Session, name: str = '') -> None:
    """Print a summary of a session to stdout.

    Args:
        session: Session with ingested statistics.
        name: Name of the bulletin file.
    """
    stats = _compute_stats(session)

    print(f"\n=== Statistik: {name} ===")
    print(f"Spielberichte (Mannschaften): {stats['records']:>5}")
    print(f"Mannschaften:                 {stats['teams']:>5}")
    print(f"Spieler:                      {stats['players']:>5}")
    print(f"Tore gezaehlt:                {stats['goals']:>5}")
    print(f"Schiedsrichter:               {stats['referees']:>5}")
    print("---")
    print(f"Fehlerhafte Zeilen:           {stats['errors']:>5}")
    print(f"Nicht zugeordnete Tore:       {stats['dropped_scorers']:>5}")
    print()


def print_errors(session: Session) -> None:
    """Print every line that could not be parsed to stdout."""
    for error in session.errors:
        print(f"Zeile {error.line_number:>5}  {error.kind:<24} {error.raw_line.strip()}")
