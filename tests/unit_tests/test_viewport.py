import pytest

from infinite_klondike.viewport import Camera


@pytest.mark.parametrize(
    "px, expected",
    [
        (51, None),
        (52, 0),
        (99, 0),
        (100, 1),
        (147, 1),
        (148, 2),
    ],
)
def test_column_under(px, expected) -> None:
    assert Camera(x=100, y=2).column_under(px) == expected


def test_column_positions_match_hit_testing() -> None:
    cam = Camera(x=-250, y=2)
    for index in range(20):
        left = cam.column_x(index)
        assert cam.column_under(left) == index
        assert cam.column_under(left + cam.column_pitch - 1) == index


@pytest.mark.parametrize("py, slot", [(70, 0), (85, 0), (86, 1), (70 + 16 * 9, 9), (60, -1)])
def test_slot_under(py, slot) -> None:
    cam = Camera(x=0, y=2)
    assert cam.slot_under(py) == slot
    if slot >= 0:
        assert cam.slot_y(slot) <= py < cam.slot_y(slot) + cam.slot_pitch


def test_foundation_row_is_above_the_tableau() -> None:
    cam = Camera(x=0, y=2)
    assert cam.on_foundation_row(0)
    assert cam.on_foundation_row(69)
    assert not cam.on_foundation_row(70)
    cam.pan(0, 100)
    assert cam.on_foundation_row(169)
    assert cam.foundation_y() == 102


def test_foundations_start_three_columns_right() -> None:
    cam = Camera(x=10, y=2)
    assert cam.foundation_x(0) == cam.column_x(3)
    assert cam.foundation_x(4) == cam.column_x(7)


def test_visible_range() -> None:
    cam = Camera(x=100, y=2)
    assert cam.visible_column_count(800) == 16
    assert cam.first_visible_column() == 0
    cam.pan(-1000, 0)
    assert cam.first_visible_column() == 18
    assert cam.visible_column_count(800) == 37


def test_visible_count_never_negative() -> None:
    assert Camera(x=5000, y=0).visible_column_count(800) == 0


def test_initial_camera_shows_columns_on_the_right() -> None:
    cam = Camera.initial(800, shown_columns=7)
    assert (cam.x, cam.y) == (512, 2)
    assert cam.column_under(799) == 6


def test_scale_multiplies_layout() -> None:
    cam = Camera.initial(1280, shown_columns=7, scale=2)
    assert cam.column_pitch == 96
    assert cam.slot_pitch == 32
    assert cam.card_size == (88, 128)
    assert cam.y == 4
    assert cam.column_under(1279) == 6
