"""ft-stats – CLI-Tool fuer Spieler- und Schiedsrichterstatistiken aus Spielberichten."""

import argparse
import logging
from pathlib import Path

from bulletin.extract import TEAM_QUOTE
from bulletin.hints import DEFAULT_HINT_THRESHOLD
from bulletin.reader import read_text
from bulletin.reporter import (
    print_errors,
    print_summary,
    write_csv_report,
    write_html_report,
    write_referee_report,
)
from bulletin.session import Session
from bulletin.sorting import COLUMNS


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        description='Spieler- und Schiedsrichterstatistiken aus Fussball-Spielberichten.',
        prog='ftstats.py',
    )
    parser.add_argument(
        '--input', required=True, type=Path,
        help='Pfad zur Textdatei mit Spielberichten (ein Bericht pro Zeile)',
    )
    parser.add_argument(
        '--output', type=Path,
        help='Pfad fuer den Spieler-Report (CSV)',
    )
    parser.add_argument(
        '--referee-output', type=Path,
        help='Pfad fuer den Schiedsrichter-Report (CSV)',
    )
    parser.add_argument(
        '--html', action='store_true',
        help='Zusaetzlich einen HTML-Report neben --output erzeugen',
    )
    parser.add_argument(
        '--summary', action='store_true',
        help='Zusammenfassung auf stdout ausgeben',
    )
    parser.add_argument(
        '--errors', action='store_true',
        help='Fehlerhafte Zeilen auf stdout ausgeben',
    )
    parser.add_argument(
        '--sort', choices=COLUMNS,
        help='Spielertabellen absteigend nach dieser Spalte sortieren',
    )
    parser.add_argument(
        '--quote', default=TEAM_QUOTE,
        help='Zeichen um Mannschaftsnamen (Standard: ")',
    )
    parser.add_argument(
        '--hint-threshold', type=float, default=DEFAULT_HINT_THRESHOLD,
        help='Schwellenwert fuer Namensvorschlaege bei nicht zugeordneten Toren (Standard: 0.85)',
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point.

    Returns:
        Exit code: 0 on success, 1 if any report line could not be parsed.
    """
    logging.basicConfig(
        level=logging.INFO,
        format='%(levelname)s: %(message)s',
    )

    parser = build_parser()
    args = parser.parse_args(argv)

    if args.html and not args.output:
        parser.error('--output ist erforderlich bei Verwendung von --html.')

    if len(args.quote) != 1 or args.quote.isalnum():
        parser.error('--quote muss ein einzelnes Satzzeichen sein.')

    session = Session(quote=args.quote).ingest_text(read_text(args.input))

    if args.output:
        write_csv_report(session, args.output, args.sort)

        if args.html:
            html_path = args.output.with_suffix('.html')
            write_html_report(
                session, html_path, args.input.stem, args.sort, args.hint_threshold,
            )

    if args.referee_output:
        write_referee_report(session, args.referee_output)

    if args.summary:
        print_summary(session, args.input.name)

    if args.errors:
        print_errors(session)

    if session.errored:
        logging.warning("%d Zeilen konnten nicht verarbeitet werden.", len(session.errors))
        return 1
    return 0


if __name__ == '__main__':
    raise SystemExit(main())
