import uuid
from datetime import datetime, timedelta, timezone
from types import SimpleNamespace

from pipeline.diff import diff_identifiers, identifier_set, newly_released, previous_upload, select_rows_by_identifier
from pipeline.shapes import AIR, OCEAN

BASE = datetime(2023, 3, 1, tzinfo=timezone.utc)


def upload(days, upload_id=None):
    return SimpleNamespace(id=upload_id or uuid.uuid4(), upload_date=BASE + timedelta(days=days))


def rows(*pairs):
    return [{'hb': hb, 'frl': frl} for hb, frl in pairs]


class TestPreviousUpload:
    """Chronological predecessor lookup."""

    def test_first_upload_has_no_previous(self):
        first = upload(0)
        assert previous_upload([first, upload(1)], first.id) is None

    def test_latest_earlier_upload_chosen(self):
        a, b, c = upload(0), upload(1), upload(2)
        assert previous_upload([c, a, b], c.id) is b
        assert previous_upload([a, b, c], b.id) is a

    def test_insertion_order_ignored(self):
        """An upload ingested late still compares against the one dated just before it."""
        late_but_older = upload(1)
        newest = upload(5)
        oldest = upload(0)
        uploads = [newest, oldest, late_but_older]
        assert previous_upload(uploads, newest.id) is late_but_older
        assert previous_upload(uploads, late_but_older.id) is oldest

    def test_same_timestamp_not_previous(self):
        a = upload(1)
        b = upload(1)
        assert previous_upload([a, b], b.id) is None

    def test_tie_broken_by_id(self):
        low = upload(0, uuid.UUID(int=1))
        high = upload(0, uuid.UUID(int=2))
        current = upload(1)
        assert previous_upload([high, low, current], current.id) is high

    def test_unknown_upload(self):
        assert previous_upload([upload(0)], uuid.uuid4()) is None

    def test_string_id_accepted(self):
        a, b = upload(0), upload(1)
        assert previous_upload([a, b], str(b.id)) is a


class TestIdentifierDiff:
    def test_new_and_removed(self):
        current = rows(('A', ''), ('B', ''), ('D', ''))
        previous = rows(('A', ''), ('B', ''), ('C', ''))
        diff = diff_identifiers(current, previous, OCEAN)
        assert diff.new_ids == {'D'}
        assert diff.removed_ids == {'C'}

    def test_no_previous_means_all_new(self):
        diff = diff_identifiers(rows(('A', ''), ('B', '')), None, OCEAN)
        assert diff.new_ids == {'A', 'B'}
        assert diff.removed_ids == frozenset()

    def test_blank_identifiers_ignored(self):
        assert identifier_set(rows(('', ''), ('  ', ''), ('A', '')), OCEAN) == {'A'}

    def test_scientific_and_plain_match(self):
        diff = diff_identifiers(rows(('617000000', '')), rows(('6.17E+08', '')), OCEAN)
        assert diff.new_ids == frozenset()
        assert diff.removed_ids == frozenset()

    def test_diff_is_disjoint(self):
        current = rows(('A', ''), ('B', ''), ('E', ''))
        previous = rows(('B', ''), ('C', ''))
        diff = diff_identifiers(current, previous, OCEAN)
        assert not diff.new_ids & diff.removed_ids
        assert diff.new_ids <= identifier_set(current)
        assert diff.removed_ids <= identifier_set(previous)

    def test_select_rows(self):
        current = rows(('A', '1'), ('B', ''), ('A', '2'))
        assert select_rows_by_identifier(current, frozenset({'A'}), OCEAN) == [
            {'hb': 'A', 'frl': '1'},
            {'hb': 'A', 'frl': '2'},
        ]


class TestNewlyReleased:
    def test_release_appeared(self):
        released = newly_released(rows(('A', '03/01/2023'), ('B', '')), rows(('A', ''), ('B', '')), OCEAN)
        assert released == {'A'}

    def test_new_identifier_with_release(self):
        released = newly_released(rows(('A', ''), ('N', '03/01/2023')), rows(('A', '')), OCEAN)
        assert released == {'N'}

    def test_already_released(self):
        assert newly_released(rows(('A', '03/02/2023')), rows(('A', '03/01/2023')), OCEAN) == frozenset()

    def test_serial_and_formatted_dates_equivalent(self):
        assert newly_released(rows(('A', '03/15/2023')), rows(('A', '45000')), OCEAN) == frozenset()

    def test_no_previous_upload(self):
        released = newly_released(rows(('A', '45000'), ('B', '')), None, OCEAN)
        assert released == {'A'}

    def test_subset_of_current(self):
        current = rows(('A', 'X'), ('B', 'Y'))
        released = newly_released(current, rows(('C', '')), OCEAN)
        assert released <= identifier_set(current)

    def test_duplicate_previous_rows_last_wins(self):
        previous = rows(('A', '01/01/2023'), ('A', ''))
        assert newly_released(rows(('A', '01/02/2023')), previous, OCEAN) == {'A'}

    def test_air_uses_log(self):
        current = [{'hawb': 'H1', 'log': '03/20/2023'}, {'hawb': 'H2', 'log': ''}]
        previous = [{'hawb': 'H1', 'log': ''}]
        assert newly_released(current, previous, AIR) == {'H1'}
