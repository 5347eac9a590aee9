"""Shared test fixtures."""

from pathlib import Path

import pytest

from bulletin.reader import read_text
from bulletin.session import Session


DATA_DIR = Path(__file__).resolve().parent.parent / 'data'

SINGLE_LINE = (
    '"ЗАРЯ" – УРАЛМАШ – 3-1 (0-1). 31.03. Ст-н Авангард. 7000 зр. '
    'Судья – Лушин. Состав: Кубышкин, Найденко, Малыгин, Кузовлев, Рабочий, '
    'Оленев, Стульчин, Малышенко, Колесников, Куксов, Лукьянчук (Иванов, 46). '
    'Голы: Колесников 69, Малышенко 71, Куксов 74.'
)

DOUBLE_LINE = (
    '"МЕТАЛЛИСТ" – "СКА Од" – 2-1 (1-0). 08.05. Ст-н Металлист. 20000 зр. '
    'Судья – Ходеев. Состав: Двуреченский, Дегтярев, Поточняк, Крячко, Ледней, '
    'Шаленко (Улинец, 67), Ткаченко (Журавчак, 87), Сааков, Линке (Довбий, 88), '
    'Бачиашвили, Шеленков. – Макашвили, Николаенко, Николайшвили (Сафроненко, 46), '
    'Клыков, Умрихин, Марусин, Жарков, Смаровоз (Криштан, 46), Беланов, Корюков, '
    'Щербина (Попов, 65). Голы: Бачиашвили 15, Бачиашвили 62 – Марусин 66.'
)

# Compact double-header with '!' as the team-name marker
BANG_LINE = (
    '!A! – !B! – 2-1 (1-0). Судья – X. Состав: P1, P2 – P3, P4. '
    'Голы: P1 55, P3 60.'
)


@pytest.fixture(scope='session')
def data_dir() -> Path:
    """Path to the data directory."""
    return DATA_DIR


@pytest.fixture(scope='session')
def bulletin_text() -> str:
    """Decoded contents of bulletin.txt."""
    return read_text(DATA_DIR / 'bulletin.txt')


@pytest.fixture
def session(bulletin_text) -> Session:
    """A fresh session over bulletin.txt (sort cursors are per test)."""
    return Session().ingest_text(bulletin_text)
