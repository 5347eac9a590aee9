"""Tests for bulletin.records module."""

from bulletin import (
    DIVIDER_NOT_FOUND,
    EMPTY_TEAM_NAME,
    MISSING_SCORE_PATTERN,
    REFEREE_NOT_FOUND,
    UNBALANCED_TEAM_QUOTES,
    MatchRecord,
)
from bulletin.records import assign_scorers, build_records, split_roster

from conftest import BANG_LINE, DOUBLE_LINE, SINGLE_LINE


class TestSingleHeader:
    """Tests for lines with one quoted team."""

    def test_one_record(self):
        records, error = build_records(SINGLE_LINE)
        assert error is None
        assert len(records) == 1

    def test_record_fields(self):
        record = build_records(SINGLE_LINE)[0][0]
        assert record.team_name == 'ЗАРЯ'
        assert record.match_label == '"ЗАРЯ" – УРАЛМАШ'
        assert record.referee == 'Лушин'
        assert len(record.roster) == 12
        assert record.scorers == ['Колесников', 'Малышенко', 'Куксов']

    def test_team_taken_from_label(self):
        line = 'ЗАРЯ – "УРАЛМАШ" – 1-3. Судья – Лушин. Состав: Кубышкин.'
        record = build_records(line)[0][0]
        assert record.team_name == 'УРАЛМАШ'

    def test_no_scorers(self):
        line = '"ЗАРЯ" – УРАЛМАШ – 0-0. Судья – Лушин. Состав: Кубышкин, Найденко.'
        record = build_records(line)[0][0]
        assert record.roster == ['Кубышкин', 'Найденко']
        assert record.scorers == []

    def test_unquoted_label(self):
        line = 'ЗАРЯ – УРАЛМАШ – 0-0. Судья – Лушин. Состав: Кубышкин.'
        assert build_records(line) == ([], EMPTY_TEAM_NAME)

    def test_empty_quoted_name(self):
        line = '"" – УРАЛМАШ – 0-0. Судья – Лушин. Состав: Кубышкин.'
        assert build_records(line) == ([], EMPTY_TEAM_NAME)

    def test_dash_in_roster_not_a_player(self):
        line = (
            '"ЗАРЯ" – УРАЛМАШ – 1-0. Судья – Лушин. '
            'Состав: Кубышкин, Найденко – Малыгин. Гол: Малыгин 5.'
        )
        record = build_records(line)[0][0]
        assert record.roster == ['Кубышкин', 'Найденко', 'Малыгин']
        assert record.scorers == ['Малыгин']


class TestDoubleHeader:
    """Tests for lines with two quoted teams."""

    def test_two_records_in_quote_order(self):
        records, error = build_records(DOUBLE_LINE)
        assert error is None
        assert [r.team_name for r in records] == ['МЕТАЛЛИСТ', 'СКА Од']

    def test_roster_split_excludes_divider(self):
        first, second = build_records(DOUBLE_LINE)[0]
        assert len(first.roster) == 14
        assert len(second.roster) == 14
        assert '–' not in first.roster
        assert '–' not in second.roster
        assert first.roster[-1] == 'Шеленков'
        assert second.roster[0] == 'Макашвили'

    def test_scorers_assigned_by_roster_membership(self):
        first, second = build_records(DOUBLE_LINE)[0]
        assert first.scorers == ['Бачиашвили', 'Бачиашвили']
        assert second.scorers == ['Марусин']

    def test_shared_referee_and_label(self):
        first, second = build_records(DOUBLE_LINE)[0]
        assert first.referee == second.referee == 'Ходеев'
        assert first.match_label == second.match_label

    def test_custom_quote_marker(self):
        records, error = build_records(BANG_LINE, quote='!')
        assert error is None
        assert records == [
            MatchRecord('A', '!A! – !B!', 'X', ['P1', 'P2'], ['P1']),
            MatchRecord('B', '!A! – !B!', 'X', ['P3', 'P4'], ['P3']),
        ]

    def test_missing_divider(self):
        line = '"ТОРПЕДО" – "ДИНАМО" – 1-0. Судья – Петров. Состав: Иванов, Сидоров.'
        assert build_records(line) == ([], DIVIDER_NOT_FOUND)

    def test_empty_team_name(self):
        line = '"ТОРПЕДО" – "" – 1-0. Судья – Петров. Состав: Иванов – Сидоров.'
        assert build_records(line) == ([], EMPTY_TEAM_NAME)

    def test_shared_surname_credited_to_first_team(self):
        line = '"A" – "B" – 0-1. Судья – X. Состав: Ким, Ли – Ким, Пак. Гол: Ким 90.'
        first, second = build_records(line)[0]
        assert first.scorers == ['Ким']
        assert second.scorers == []

    def test_later_dashes_dropped_from_both_rosters(self):
        line = '"A" – "B" – 0-0. Судья – X. Состав: Ким (Пак – 46) – Ли – Цой.'
        first, second = build_records(line)[0]
        assert first.roster == ['Ким', 'Пак']
        assert second.roster == ['Ли', 'Цой']


class TestBuildErrors:
    """Tests for lines that yield no records."""

    def test_missing_score(self):
        line = '"РОТОР" – "КУБАНЬ" 2-0. Судья – Орлов. Состав: Зотов – Ли.'
        assert build_records(line) == ([], MISSING_SCORE_PATTERN)

    def test_unbalanced_quotes(self):
        line = '"КАЙРАТ – "ШАХТЕР" – 1-1. Судья – Орлов. Состав: Ким – Ли.'
        assert build_records(line) == ([], UNBALANCED_TEAM_QUOTES)

    def test_referee_missing(self):
        line = '"РОТОР" – "КУБАНЬ" – 2-0. Состав: Зотов – Ли. Судья – Орлов.'
        assert build_records(line) == ([], REFEREE_NOT_FOUND)


class TestSplitRoster:
    """Tests for the divider split helper."""

    def test_split_on_first_divider(self):
        assert split_roster(['a', 'b', '–', 'c', '–', 'd']) == (['a', 'b'], ['c', 'd'])

    def test_lengths(self):
        roster = ['a', 'b', 'c', '–', 'd']
        first, second = split_roster(roster)
        assert len(first) == 3
        assert len(second) == len(roster) - 3 - 1

    def test_no_divider(self):
        assert split_roster(['a', 'b']) is None


class TestAssignScorers:
    """Tests for scorer assignment in double-headers."""

    def test_unknown_scorer_goes_to_second_team(self):
        assert assign_scorers(['Z'], ['A']) == ([], ['Z'])

    def test_divider_skipped(self):
        assert assign_scorers(['A', '–', 'B'], ['A']) == (['A'], ['B'])

    def test_every_scorer_assigned_once(self):
        scorers = ['A', 'B', 'A', 'C']
        first, second = assign_scorers(scorers, ['A'])
        assert sorted(first + second) == sorted(scorers)
