import math

import pytest

from quadkit.geometry import (
    Circle,
    Rect,
    RectOffset,
    Vec2,
    cartesian_to_polar,
    clamp,
    polar_to_cartesian,
)


def test_vec2_add_sub_round_trip():
    a = Vec2(1.5, -2.0)
    b = Vec2(0.25, 7.0)
    assert (a + b) - b == a


def test_vec2_scalar_mul_div_round_trip():
    a = Vec2(3.0, -6.0)
    assert (a * 4.0) / 4.0 == a
    assert 2.0 * a == a * 2.0
    assert -(-a) == a


def test_vec2_length_and_distance():
    assert Vec2(3.0, 4.0).length() == 5.0
    a = Vec2(1.0, 2.0)
    b = Vec2(-4.0, 6.0)
    assert a.distance(b) == b.distance(a)
    assert a.distance(a) == 0.0


def test_rect_edges_follow_fields():
    rect = Rect(2.0, 3.0, 10.0, 6.0)
    assert rect.left() == rect.x
    assert rect.top() == rect.y
    assert rect.right() - rect.left() == rect.w
    assert rect.bottom() - rect.top() == rect.h
    assert rect.point() == Vec2(2.0, 3.0)
    assert rect.size() == Vec2(10.0, 6.0)


def test_rect_center_is_contained():
    rect = Rect(2.0, 3.0, 10.0, 6.0)
    assert rect.contains(rect.center())
    assert rect.combine_with(Rect(*rect.center().__dict__.values(), 0.0, 0.0)) == rect


def test_rect_contains_is_half_open():
    rect = Rect(0.0, 0.0, 4.0, 4.0)
    assert rect.contains(rect.point())
    assert not rect.contains(Vec2(rect.right(), rect.top()))
    assert not rect.contains(Vec2(rect.left(), rect.bottom()))


def test_rect_overlaps():
    a = Rect(0.0, 0.0, 4.0, 4.0)
    b = Rect(2.0, 2.0, 4.0, 4.0)
    far = Rect(100.0, 100.0, 1.0, 1.0)
    assert a.overlaps(a)
    assert a.overlaps(b) and b.overlaps(a)
    assert not a.overlaps(far)
    touching = Rect(a.right(), 0.0, 1.0, 1.0)
    assert a.overlaps(touching)


def test_rect_combine_contains_both():
    a = Rect(0.0, 0.0, 4.0, 4.0)
    b = Rect(10.0, -3.0, 2.0, 2.0)
    combined = a.combine_with(b)
    assert combined.intersect(a) == a
    assert combined.intersect(b) == b
    assert combined == b.combine_with(a)


def test_rect_intersect():
    a = Rect(0.0, 0.0, 4.0, 4.0)
    assert a.intersect(a) == a
    assert a.intersect(Rect(10.0, 10.0, 1.0, 1.0)) is None
    b = Rect(2.0, 2.0, 4.0, 4.0)
    assert a.intersect(b) == b.intersect(a)


def test_rect_offset_round_trip():
    rect = Rect(1.0, 2.0, 3.0, 4.0)
    shift = Vec2(5.0, -7.0)
    assert rect.offset(shift).offset(-shift) == rect
    assert rect.offset(shift).size() == rect.size()


def test_rect_move_to_and_scale():
    rect = Rect(1.0, 2.0, 3.0, 4.0)
    rect.move_to(Vec2(9.0, 8.0))
    assert rect.point() == Vec2(9.0, 8.0)
    rect.scale(2.0, 4.0)
    rect.scale(0.5, 0.25)
    assert rect == Rect(9.0, 8.0, 3.0, 4.0)


def test_rect_offset_field_order():
    offset = RectOffset(1.0, 2.0, 3.0, 4.0)
    assert (offset.left, offset.right, offset.top, offset.bottom) == (1.0, 2.0, 3.0, 4.0)


def test_circle_basics():
    circle = Circle(1.0, 2.0, 3.0)
    assert circle.point() == Vec2(1.0, 2.0)
    assert circle.radius() == 3.0
    circle.move_to(Vec2(5.0, 6.0))
    assert circle.point() == Vec2(5.0, 6.0)
    circle.scale(2.0)
    circle.scale(0.5)
    assert circle.radius() == 3.0


def test_circle_contains_excludes_boundary():
    circle = Circle(1.0, 2.0, 3.0)
    assert circle.contains(circle.point())
    assert not circle.contains(Vec2(circle.x + circle.r, circle.y))


def test_circle_overlaps():
    a = Circle(0.0, 0.0, 2.0)
    touching = Circle(a.r + 1.0, 0.0, 1.0)
    assert not a.overlaps(touching)
    assert a.overlaps(Circle(1.0, 0.0, 1.0))
    assert a.overlaps(a)


def test_circle_overlaps_rect():
    rect = Rect(0.0, 0.0, 10.0, 10.0)
    assert Circle(*rect.center().__dict__.values(), 1.0).overlaps_rect(rect)
    assert not Circle(50.0, 50.0, 1.0).overlaps_rect(rect)
    assert not Circle(rect.right() + 1.0, rect.bottom() + 1.0, 1.0).overlaps_rect(rect)
    assert Circle(rect.right() + 1.0, rect.bottom() + 1.0, 2.0).overlaps_rect(rect)


def test_circle_offset_round_trip():
    circle = Circle(1.0, 2.0, 3.0)
    shift = Vec2(4.0, -1.0)
    assert circle.offset(shift).offset(-shift) == circle


@pytest.mark.parametrize("rho,theta", [(1.0, 0.0), (2.5, 1.2), (3.0, -2.0)])
def test_polar_round_trip(rho, theta):
    polar = cartesian_to_polar(polar_to_cartesian(rho, theta))
    assert polar.x == pytest.approx(rho)
    assert polar.y == pytest.approx(theta)


def test_polar_to_cartesian_length_is_rho():
    assert polar_to_cartesian(2.0, math.pi / 3).length() == pytest.approx(2.0)


def test_clamp():
    assert clamp(5, 0, 3) == 3
    assert clamp(-1, 0, 3) == 0
    assert clamp(2, 0, 3) == 2
    assert clamp(0.5, 0.0, 1.0) == 0.5