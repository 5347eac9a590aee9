"""Bulletin file reader: encoding detection and line normalization."""

import logging
import re
from pathlib import Path

log = logging.getLogger(__name__)

# Runs of whitespace, including the non-breaking spaces of copied bulletins
_WHITESPACE_RE = re.compile(r'\s+')
# Em dash or a spaced hyphen used where the bulletin grammar expects "–"
_DASH_RE = re.compile(r'—| - ')

# Legacy encoding of Russian-language text files without BOM
FALLBACK_ENCODING = 'cp1251'


def detect_encoding(path: Path) -> str:
    """Pick the encoding of a bulletin file.

    UTF-16LE is recognised by its BOM. Anything that decodes as UTF-8 is
    read as UTF-8 (with optional BOM); everything else is assumed to be a
    Windows-1251 export.

    Args:
        path: Path to the bulletin file.

    Returns:
        Encoding string suitable for open().
    """
    data = Path(path).read_bytes()
    if data[:2] == b'\xff\xfe':
        return 'utf-16-le'
    try:
        data.decode('utf-8')
    except UnicodeDecodeError:
        return FALLBACK_ENCODING
    return 'utf-8-sig'


def normalize_line(value: str) -> str:
    """Normalize one bulletin line for the parser.

    Em dashes and spaced hyphens become the en dash separating teams, score
    and rosters; whitespace runs collapse into a single space. Hyphens
    inside words ("Ст-н") and scores ("3-1") are kept.

    Args:
        value: Raw line.

    Returns:
        Normalized line.
    """
    value = _WHITESPACE_RE.sub(' ', value).strip()
    return _DASH_RE.sub(lambda m: '–' if m.group() == '—' else ' – ', value)


def read_text(path: str | Path) -> str:
    """Read a bulletin file into a newline-delimited string.

    Handles UTF-16LE (with BOM), UTF-8 and Windows-1251 files automatically.
    Every line is normalized with normalize_line(); line numbers are preserved.

    Args:
        path: Path to the bulletin file.

    Returns:
        Decoded text, one report per line.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If the file cannot be decoded.
    """
    path = Path(path)
    encoding = detect_encoding(path)

    try:
        with open(path, 'r', encoding=encoding) as f:
            content = f.read()
    except UnicodeDecodeError as exc:
        raise ValueError(f"Datei {path} ist nicht als {encoding} lesbar: {exc}") from exc

    # Strip BOM if present
    content = content.lstrip('\ufeff')

    lines = [normalize_line(line) for line in content.split('\n')]
    log.info("%d Zeilen gelesen aus %s", len(lines), path)
    return '\n'.join(lines)
