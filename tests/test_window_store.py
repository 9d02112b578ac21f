"""
Tests for WindowStore.

Covers:
- add(): ids, default geometry, random placement inside the viewport
- remove(): plain filter for free windows, zone reflow for snapped ones
- update_position(): free move, size reset, reflow of a vacated zone
- commit_snap(): zone assignment and arrangement
- No-op behaviour for unknown ids and zones
"""
import random

import pytest

from core.events import EventType
from core.snapping import (
    Point,
    Rect,
    Size,
    SnapPosition,
    WindowIdAllocator,
    WindowStore,
)


def _snap_all(store, count, zone):
    ids = [store.add().id for _ in range(count)]
    for window_id in ids:
        store.commit_snap(window_id, zone, 1000, 800)
    return ids


def _changes(store):
    calls = []
    store.windows_changed.connect(lambda: calls.append(1))
    return calls


# ---------------------------------------------------------------------------
# Construction and read access
# ---------------------------------------------------------------------------

class TestStoreBasics:
    """Construction and queries."""

    def test_starts_empty(self, store):
        assert len(store) == 0
        assert store.windows == ()
        assert store.viewport_size == (1000, 800)

    def test_default_size(self, store):
        assert store.default_size == Size(200, 150)

    @pytest.mark.parametrize("size", [Size(0, 150), Size(200, -1)])
    def test_invalid_default_size_rejected(self, qt_app, size):
        with pytest.raises(ValueError):
            WindowStore(default_size=size)

    def test_set_default_size(self, store):
        store.set_default_size(320, 240)

        assert store.default_size == Size(320, 240)
        assert store.add().size == Size(320, 240)
        with pytest.raises(ValueError):
            store.set_default_size(0, 240)
        assert store.default_size == Size(320, 240)

    def test_get_and_contains(self, store):
        win = store.add()

        assert store.get(win.id) == win
        assert win.id in store
        assert 999 not in store
        assert store.get(999) is None

    def test_index_of(self, store):
        first, second = store.add(), store.add()

        assert store.index_of(first.id) == 0
        assert store.index_of(second.id) == 1
        assert store.index_of(12345) == -1

    def test_window_at_returns_topmost(self, store):
        first, second = store.add(), store.add()
        store.update_position(first.id, 100, 100)
        store.update_position(second.id, 150, 150)

        assert store.window_at(160, 160).id == second.id
        assert store.window_at(110, 110).id == first.id
        assert store.window_at(900, 10) is None

    def test_occupants(self, store):
        left_ids = _snap_all(store, 2, SnapPosition.LEFT)
        store.add()

        assert [w.id for w in store.occupants("left")] == left_ids
        assert store.occupants(SnapPosition.NONE) == ()


# ---------------------------------------------------------------------------
# add()
# ---------------------------------------------------------------------------

class TestAdd:
    """Window creation."""

    def test_add_defaults(self, store):
        win = store.add()

        assert win.size == Size(200, 150)
        assert win.snap_position is SnapPosition.NONE
        assert store.windows == (win,)

    def test_add_position_within_bounds(self, store):
        for _ in range(200):
            win = store.add()
            assert 0 <= win.position.x < 1000 - 200
            assert 0 <= win.position.y < 800 - 150
            assert win.position.x == int(win.position.x)
            assert win.position.y == int(win.position.y)

    def test_add_color_is_hex(self, store):
        win = store.add()

        assert len(win.color) == 7
        assert win.color.startswith("#")
        int(win.color[1:], 16)

    def test_ids_unique_under_rapid_add(self, store):
        ids = [store.add().id for _ in range(1000)]

        assert len(set(ids)) == 1000
        assert ids == sorted(ids)

    def test_ids_never_reused_after_remove(self, store):
        first = store.add()
        store.remove(first.id)

        assert store.add().id != first.id

    def test_seeded_rng_is_deterministic(self, qt_app):
        a = WindowStore(1000, 800, rng=random.Random(7))
        b = WindowStore(1000, 800, rng=random.Random(7))

        assert a.add() == b.add()

    def test_viewport_smaller_than_window(self, qt_app):
        store = WindowStore(150, 100, rng=random.Random(3))

        win = store.add()

        assert win.position == Point(0, 0)

    def test_shared_allocator(self, qt_app):
        allocator = WindowIdAllocator(start=10)
        a = WindowStore(id_allocator=allocator)
        b = WindowStore(id_allocator=allocator)

        assert [a.add().id, b.add().id, a.add().id] == [10, 11, 12]

    def test_add_emits_and_publishes(self, store, event_system):
        calls = _changes(store)
        seen = []
        event_system.subscribe(EventType.WINDOW_ADDED, seen.append)

        win = store.add()

        assert calls == [1]
        assert seen[0].data == {"id": win.id}

    def test_add_uses_viewport_update(self, store):
        store.set_viewport_size(400, 300)

        for _ in range(50):
            win = store.add()
            assert win.position.x < 200
            assert win.position.y < 150


# ---------------------------------------------------------------------------
# remove()
# ---------------------------------------------------------------------------

class TestRemove:
    """Window removal and reflow."""

    def test_remove_free_window(self, store):
        a, b, c = store.add(), store.add(), store.add()

        assert store.remove(b.id) is True

        assert store.windows == (a, c)

    def test_remove_unknown_is_noop(self, store):
        store.add()
        before = store.windows
        calls = _changes(store)

        assert store.remove(4242) is False

        assert store.windows == before
        assert calls == []

    def test_remove_middle_of_three_right(self, store):
        first, middle, last = _snap_all(store, 3, SnapPosition.RIGHT)
        for win in store.occupants("right"):
            assert win.size.height == pytest.approx(800 / 3)

        store.remove(middle)

        assert store.get(first).rect == Rect(500, 0, 500, 400)
        assert store.get(last).rect == Rect(500, 400, 500, 400)

    def test_remove_last_occupant_leaves_others(self, store):
        (left_id,) = _snap_all(store, 1, SnapPosition.LEFT)
        (top_id,) = _snap_all(store, 1, SnapPosition.TOP)
        top_before = store.get(top_id)

        store.remove(left_id)

        assert store.get(top_id) == top_before

    def test_remove_from_corner_keeps_full_rect(self, store):
        a, b = _snap_all(store, 2, SnapPosition.TOP_RIGHT)

        store.remove(a)

        assert store.get(b).rect == Rect(500, 0, 500, 400)

    def test_remove_publishes_zone(self, store, event_system):
        (window_id,) = _snap_all(store, 1, SnapPosition.BOTTOM)
        seen = []
        event_system.subscribe(EventType.WINDOW_REMOVED, seen.append)

        store.remove(window_id)

        assert seen[0].data == {"id": window_id, "zone": "bottom"}


# ---------------------------------------------------------------------------
# update_position()
# ---------------------------------------------------------------------------

class TestUpdatePosition:
    """Free moves."""

    def test_free_move(self, store):
        win = store.add()

        assert store.update_position(win.id, 280, 240) is True

        moved = store.get(win.id)
        assert moved.position == Point(280, 240)
        assert moved.size == Size(200, 150)
        assert moved.snap_position is SnapPosition.NONE

    def test_move_allows_positions_outside_viewport(self, store):
        win = store.add()

        store.update_position(win.id, -50, 2000)

        assert store.get(win.id).position == Point(-50, 2000)

    def test_unsnaps_and_resets_size(self, store):
        (window_id,) = _snap_all(store, 1, SnapPosition.LEFT)

        store.update_position(window_id, 300, 300)

        moved = store.get(window_id)
        assert moved.snap_position is SnapPosition.NONE
        assert moved.size == Size(200, 150)
        assert moved.position == Point(300, 300)

    def test_vacated_zone_reflows(self, store):
        a, b = _snap_all(store, 2, SnapPosition.LEFT)

        store.update_position(a, 300, 300)

        assert store.get(b).rect == Rect(0, 0, 500, 800)

    def test_unknown_id_is_noop(self, store):
        store.add()
        before = store.windows
        calls = _changes(store)

        assert store.update_position(777, 1, 1) is False

        assert store.windows == before
        assert calls == []

    def test_order_unchanged(self, store):
        a, b, c = store.add(), store.add(), store.add()

        store.update_position(a.id, 5, 5)

        assert [w.id for w in store.windows] == [a.id, b.id, c.id]


# ---------------------------------------------------------------------------
# commit_snap()
# ---------------------------------------------------------------------------

class TestCommitSnap:
    """Snapping into zones."""

    def test_two_windows_left(self, store):
        a, b = _snap_all(store, 2, SnapPosition.LEFT)

        assert store.get(a).rect == Rect(0, 0, 500, 400)
        assert store.get(b).rect == Rect(0, 400, 500, 400)

    def test_topleft_on_wide_viewport(self, store):
        win = store.add()

        store.commit_snap(win.id, "topleft", 1200, 800)

        snapped = store.get(win.id)
        assert snapped.rect == Rect(0, 0, 600, 400)
        assert snapped.snap_position is SnapPosition.TOP_LEFT

    def test_uses_store_viewport_when_omitted(self, store):
        win = store.add()
        store.set_viewport_size(600, 400)

        store.commit_snap(win.id, SnapPosition.RIGHT)

        assert store.get(win.id).rect == Rect(300, 0, 300, 400)

    def test_order_follows_collection_not_snap_time(self, store):
        a, b = store.add(), store.add()

        store.commit_snap(b.id, "top", 1000, 800)
        store.commit_snap(a.id, "top", 1000, 800)

        assert store.get(a.id).position.x == 0
        assert store.get(b.id).position.x == 500

    def test_moving_between_zones_reflows_previous(self, store):
        a, b = _snap_all(store, 2, SnapPosition.LEFT)

        store.commit_snap(a, SnapPosition.BOTTOM, 1000, 800)

        assert store.get(a).rect == Rect(0, 400, 1000, 400)
        assert store.get(b).rect == Rect(0, 0, 500, 800)

    def test_resnap_same_zone_is_stable(self, store):
        a, b = _snap_all(store, 2, SnapPosition.RIGHT)
        before = store.windows

        store.commit_snap(a, SnapPosition.RIGHT, 1000, 800)

        assert store.windows == before

    def test_unknown_id_is_noop(self, store):
        store.add()
        before = store.windows

        assert store.commit_snap(999, "left", 1000, 800) is False
        assert store.windows == before

    @pytest.mark.parametrize("zone", ["middle", None, SnapPosition.NONE])
    def test_unknown_zone_is_noop(self, store, zone):
        win = store.add()
        calls = _changes(store)

        assert store.commit_snap(win.id, zone, 1000, 800) is False

        assert store.get(win.id) == win
        assert calls == []

    def test_publishes_snap_event(self, store, event_system):
        win = store.add()
        seen = []
        event_system.subscribe(EventType.WINDOW_SNAPPED, seen.append)

        store.commit_snap(win.id, "bottomright", 1000, 800)

        assert seen[0].data == {"id": win.id, "zone": "bottomright", "previous": "none"}

    def test_free_windows_untouched_by_snap(self, store):
        free = store.add()
        other = store.add()

        store.commit_snap(other.id, "left", 1000, 800)

        assert store.get(free.id) == free
