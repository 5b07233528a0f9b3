import pytest

from fpsengine.colliders import (
    BoxCollider,
    ColliderPurpose,
    ColliderType,
    SphereCollider,
    Vec3,
)


def test_default_box_bounds():
    box = BoxCollider()
    assert box.bounds() == (Vec3(-0.5, -0.5, -0.5), Vec3(0.5, 0.5, 0.5))


def test_box_bounds_follow_center_and_size():
    box = BoxCollider(Vec3(1, 2, 3), Vec3(2, 2, 2))
    lo, hi = box.bounds()
    assert (lo + hi) * 0.5 == Vec3(1, 2, 3)
    assert hi - lo == Vec3(2, 2, 2)


def test_moving_center_moves_bounds():
    box = BoxCollider()
    box.center = Vec3(5, 0, 0)
    assert box.contains(Vec3(5, 0, 0))
    assert not box.contains(Vec3(0, 0, 0))


def test_changing_size_changes_extent():
    box = BoxCollider()
    box.size = Vec3(4, 4, 4)
    lo, hi = box.bounds()
    assert hi - lo == Vec3(4, 4, 4)


def test_set_transform_scales_extent_and_stores_rotation():
    box = BoxCollider(size=Vec3(1, 1, 1))
    box.set_transform(Vec3(0, 0, 0), Vec3(0.7, 0, 0), Vec3(2, 3, 4))
    lo, hi = box.bounds()
    assert hi - lo == Vec3(2, 3, 4)
    assert box.rotation == Vec3(0.7, 0, 0)


def test_rotation_does_not_affect_bounds():
    rotated = BoxCollider()
    rotated.set_transform(Vec3(1, 1, 1), Vec3(1.2, 0.3, 0.1), Vec3(1, 1, 1))
    plain = BoxCollider(Vec3(1, 1, 1))
    assert rotated.bounds() == plain.bounds()


@pytest.mark.parametrize(
    "other_center, expected",
    [
        (Vec3(0.5, 0, 0), True),
        (Vec3(1, 0, 0), True),
        (Vec3(1.01, 0, 0), False),
        (Vec3(0, 0, 2), False),
    ],
)
def test_box_box_intersection(other_center, expected):
    a = BoxCollider()
    b = BoxCollider(other_center)
    assert a.intersects(b) is expected
    assert b.intersects(a) is expected


def test_intersects_none_is_false():
    assert BoxCollider().intersects(None) is False
    assert SphereCollider().intersects(None) is False


@pytest.mark.parametrize(
    "point, expected",
    [
        (Vec3(0, 0, 0), True),
        (Vec3(0.5, 0.5, 0.5), True),
        (Vec3(-0.5, 0.2, -0.5), True),
        (Vec3(0.6, 0, 0), False),
        (Vec3(0, -0.51, 0), False),
    ],
)
def test_contains(point, expected):
    assert BoxCollider().contains(point) is expected


def test_penetration_none_when_separated():
    assert BoxCollider().compute_penetration(BoxCollider(Vec3(3, 0, 0))) is None


def test_penetration_pushes_left_box_out_along_x():
    box = BoxCollider()
    other = BoxCollider(Vec3(0.75, 0, 0))
    pen = box.compute_penetration(other)
    assert pen.x < 0
    assert pen.y == 0 and pen.z == 0
    moved = BoxCollider(box.center + pen, box.size)
    assert moved.max_corner.x == pytest.approx(other.min_corner.x)


def test_penetration_pushes_upper_box_up_along_y():
    box = BoxCollider(Vec3(0, 0.75, 0))
    other = BoxCollider()
    pen = box.compute_penetration(other)
    assert pen.y > 0
    assert pen.x == 0 and pen.z == 0
    moved = BoxCollider(box.center + pen, box.size)
    assert moved.min_corner.y == pytest.approx(other.max_corner.y)


def test_penetration_along_z_when_smallest():
    box = BoxCollider(Vec3(0, 0, 0.8))
    other = BoxCollider()
    pen = box.compute_penetration(other)
    assert pen.x == 0 and pen.y == 0
    assert pen.z > 0


def test_penetration_tie_prefers_x_and_positive_sign():
    box = BoxCollider()
    pen = box.compute_penetration(BoxCollider())
    assert pen == Vec3(box.size.x, 0, 0)


def test_sphere_defaults():
    sphere = SphereCollider()
    assert sphere.radius == 1.0
    assert sphere.world_radius == sphere.radius
    assert sphere.center == Vec3()


def test_sphere_bounds():
    sphere = SphereCollider(Vec3(1, 2, 3), 1.5)
    lo, hi = sphere.bounds()
    assert (lo + hi) * 0.5 == Vec3(1, 2, 3)
    assert hi - lo == Vec3(3, 3, 3)


@pytest.mark.parametrize(
    "center, radius, expected",
    [
        (Vec3(2, 0, 0), 1.0, True),
        (Vec3(2.01, 0, 0), 1.0, False),
        (Vec3(0, 0.5, 0), 0.1, True),
    ],
)
def test_sphere_sphere_intersection(center, radius, expected):
    a = SphereCollider(Vec3(), 1.0)
    b = SphereCollider(center, radius)
    assert a.intersects(b) is expected
    assert b.intersects(a) is expected


@pytest.mark.parametrize(
    "center, radius, expected",
    [
        (Vec3(1.4, 0, 0), 1.0, True),
        (Vec3(2, 0, 0), 1.0, False),
        (Vec3(0, 0, 0), 0.1, True),
        (Vec3(1.1, 1.1, 0), 0.8, False),
    ],
)
def test_sphere_box_intersection_is_symmetric(center, radius, expected):
    box = BoxCollider()
    sphere = SphereCollider(center, radius)
    assert box.intersects(sphere) is expected
    assert sphere.intersects(box) is expected


def test_collider_types_and_purpose():
    box = BoxCollider()
    sphere = SphereCollider()
    assert box.collider_type is ColliderType.BOX
    assert sphere.collider_type is ColliderType.SPHERE
    assert box.purpose is ColliderPurpose.BODY
    box.purpose = ColliderPurpose.ATTACK
    assert box.purpose is ColliderPurpose.ATTACK