import pytest

from microui.geometry import Rect, Vec2
from microui.layout import LayoutEngine, LayoutStyle, expand_rect, expand_rect_xy

STYLE = LayoutStyle(size=Vec2(68, 10), padding=Vec2(5, 5), spacing=4)


@pytest.fixture
def engine():
    eng = LayoutEngine(STYLE)
    eng.push(Rect(0, 0, 400, 300))
    return eng


def test_layout_row_sets_items_and_widths(engine):
    engine.row(2, [100, -1], 30)
    layout = engine.current
    assert layout.items == 2
    assert layout.widths == [100, -1]
    assert layout.size.y == 30
    assert layout.item_index == 0


def test_row_pads_missing_widths(engine):
    engine.row(3, [50], 10)
    assert engine.current.widths == [50, 0, 0]


def test_layout_next(engine):
    engine.row(2, [100, 200], 30)
    rect1 = engine.next()
    rect2 = engine.next()
    assert rect2.x > rect1.x
    assert rect2.y == rect1.y
    assert rect1.w == 100
    assert rect2.w == 200


def test_layout_row_wrapping(engine):
    engine.row(2, [100, 100], 30)
    rect1 = engine.next()
    engine.next()
    rect3 = engine.next()
    assert rect3.y > rect1.y
    assert rect3.x == rect1.x
    assert rect3.y == 34


def test_layout_fill_width(engine):
    engine.row(2, [100, -1], 30)
    rect1 = engine.next()
    rect2 = engine.next()
    assert rect1 == Rect(0, 0, 100, 30)
    assert rect2 == Rect(104, 0, 296, 30)
    assert rect2.w > 0


def test_default_size_uses_style(engine):
    rect = engine.next()
    assert rect == Rect(0, 0, 78, 20)


def test_last_rect_tracks_next(engine):
    engine.row(1, [50], 10)
    rect = engine.next()
    assert engine.last_rect == rect


def test_push_applies_body_offset_and_scroll():
    eng = LayoutEngine(STYLE)
    eng.push(Rect(10, 20, 200, 100), Vec2(0, 15))
    eng.row(1, [50], 10)
    assert eng.next() == Rect(10, 5, 50, 10)


def test_max_tracks_extent(engine):
    engine.row(2, [100, 50], 30)
    engine.next()
    engine.next()
    assert engine.current.max == Vec2(154, 30)


def test_size_overrides_apply_once(engine):
    engine.row(3, [100, 100, 100], 30)
    engine.set_width(40)
    engine.set_height(12)
    first = engine.next()
    second = engine.next()
    assert (first.w, first.h) == (40, 12)
    assert (second.w, second.h) == (100, 30)


def test_set_next_absolute(engine):
    engine.row(1, [100], 30)
    engine.set_next(Rect(5, 6, 7, 8), relative=False)
    assert engine.next() == Rect(5, 6, 7, 8)
    assert engine.next() == Rect(0, 0, 100, 30)


def test_set_next_relative_offsets_body():
    eng = LayoutEngine(STYLE)
    eng.push(Rect(50, 60, 200, 200))
    eng.set_next(Rect(5, 6, 7, 8), relative=True)
    assert eng.next() == Rect(55, 66, 7, 8)


def test_default_body_used_without_push():
    eng = LayoutEngine(STYLE)
    assert eng.current.body == Rect(0, 0, 800, 600)
    eng2 = LayoutEngine(STYLE, default_body=Rect(1, 2, 30, 40))
    assert eng2.current.body == Rect(1, 2, 30, 40)


def test_pop_returns_layout_or_none():
    eng = LayoutEngine(STYLE)
    assert eng.pop() is None
    eng.push(Rect(0, 0, 10, 10))
    popped = eng.pop()
    assert popped.body == Rect(0, 0, 10, 10)
    assert len(eng) == 0


def test_columns_merge_into_parent(engine):
    engine.row(2, [100, 100], 50)
    engine.begin_column()
    assert engine.column_depth == 1
    engine.row(1, [-1], 20)
    assert engine.next() == Rect(0, 0, 100, 20)
    assert engine.next() == Rect(0, 24, 100, 20)
    engine.end_column()
    assert engine.column_depth == 0
    assert engine.current.next_row == 54
    second = engine.next()
    assert second == Rect(104, 0, 100, 50)


def test_column_height_extends_parent_row(engine):
    engine.row(1, [100], 10)
    engine.begin_column()
    engine.row(1, [50], 30)
    engine.next()
    engine.next()
    engine.end_column()
    assert engine.current.next_row == 68
    assert engine.current.max.y == 64


def test_end_column_without_begin_is_noop(engine):
    engine.end_column()
    assert len(engine) == 1


def test_expand_rect():
    assert expand_rect(Rect(10, 10, 20, 20), 2) == Rect(8, 8, 24, 24)


def test_expand_rect_xy():
    assert expand_rect_xy(Rect(10, 10, 20, 20), 1, 3) == Rect(9, 7, 22, 26)