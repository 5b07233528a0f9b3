import pytest

from fpsengine.colliders import BoxCollider, Vec3
from fpsengine.collision_system import CollisionLayer
from fpsengine.map_collision import CollisionManager, MapCollision


def test_nearby_blocks_finds_registered_block():
    grid = MapCollision()
    block = BoxCollider()
    grid.register_block(block)
    assert grid.nearby_blocks(Vec3(), 1.0) == [block]
    assert len(grid) == 1


def test_nearby_blocks_ignores_far_block():
    grid = MapCollision()
    grid.register_block(BoxCollider())
    assert grid.nearby_blocks(Vec3(100, 0, 0), 1.0) == []


def test_nearby_blocks_with_negative_coordinates():
    grid = MapCollision()
    block = BoxCollider(Vec3(-5, -5, -5))
    grid.register_block(block)
    assert grid.nearby_blocks(Vec3(-5, -5, -5), 0.0) == [block]


def test_search_reaches_one_extra_cell():
    grid = MapCollision(cell_size=2.0)
    near = BoxCollider(Vec3(3, 0, 0))
    far = BoxCollider(Vec3(5, 0, 0))
    grid.register_block(near)
    grid.register_block(far)
    assert grid.nearby_blocks(Vec3(), 0.0) == [near]


def test_clear_removes_blocks():
    grid = MapCollision()
    grid.register_block(BoxCollider())
    grid.clear()
    assert grid.nearby_blocks(Vec3(), 1.0) == []
    assert len(grid) == 0


def test_initialize_sets_cell_size_and_clears():
    grid = MapCollision()
    grid.register_block(BoxCollider())
    grid.initialize(cell_size=10.0)
    assert grid.cell_size == 10.0
    assert grid.nearby_blocks(Vec3(), 1.0) == []


@pytest.mark.parametrize("bad", [0.0, -1.0])
def test_non_positive_cell_size_rejected(bad):
    with pytest.raises(ValueError):
        MapCollision(bad)
    with pytest.raises(ValueError):
        MapCollision().initialize(bad)


def test_check_collision_returns_penetration():
    grid = MapCollision()
    block = BoxCollider()
    grid.register_block(block)
    moving = BoxCollider(Vec3(0.75, 0, 0))
    assert grid.check_collision(moving) == moving.compute_penetration(block)


def test_check_collision_none_without_overlap():
    grid = MapCollision()
    grid.register_block(BoxCollider())
    assert grid.check_collision(BoxCollider(Vec3(1.5, 0, 0))) is None
    assert grid.check_collision(None) is None


def test_check_collision_all_reports_every_overlap():
    grid = MapCollision()
    left = BoxCollider(Vec3(-0.9, 0, 0))
    right = BoxCollider(Vec3(0.9, 0, 0))
    grid.register_block(left)
    grid.register_block(right)
    moving = BoxCollider()
    pens = grid.check_collision_all(moving)
    assert sorted(p.x for p in pens) == sorted(
        [moving.compute_penetration(left).x, moving.compute_penetration(right).x]
    )
    assert len(pens) == 2
    assert grid.check_collision_all(None) == []


def test_resolve_landing_on_floor():
    manager = CollisionManager()
    floor = BoxCollider(Vec3(0, 0, 0), Vec3(10, 1, 10))
    manager.register_map_block(floor)
    player = BoxCollider(Vec3(0, 0.9, 0), Vec3(1, 1, 1))
    result = manager.resolve_map_collision(player, player.center, Vec3(1, -3, 2))
    assert result.collided
    assert result.grounded
    assert result.velocity == Vec3(1, 0, 2)
    assert result.position.y > player.center.y
    resolved = BoxCollider(result.position, player.size)
    assert resolved.min_corner.y == pytest.approx(floor.max_corner.y)


def test_resolve_hitting_wall():
    manager = CollisionManager()
    wall = BoxCollider(Vec3(0, 0, 0), Vec3(1, 10, 10))
    manager.register_map_block(wall)
    player = BoxCollider(Vec3(0.9, 0, 0), Vec3(1, 1, 1))
    result = manager.resolve_map_collision(player, player.center, Vec3(-2, 1, 0))
    assert result.collided
    assert not result.grounded
    assert result.velocity == Vec3(0, 1, 0)
    resolved = BoxCollider(result.position, player.size)
    assert resolved.min_corner.x == pytest.approx(wall.max_corner.x)


def test_resolve_without_blocks_changes_nothing():
    manager = CollisionManager()
    player = BoxCollider(Vec3(0, 5, 0))
    result = manager.resolve_map_collision(player, player.center, Vec3(1, 2, 3))
    assert not result.collided
    assert not result.grounded
    assert result.position == player.center
    assert result.velocity == Vec3(1, 2, 3)


def test_manager_map_queries_delegate():
    manager = CollisionManager()
    block = BoxCollider()
    manager.register_map_block(block)
    moving = BoxCollider(Vec3(0, 0.75, 0))
    assert manager.check_map_collision(moving) == moving.compute_penetration(block)
    assert manager.check_map_collision_all(moving, 3.0) == [moving.compute_penetration(block)]


def test_manager_dynamic_collision():
    manager = CollisionManager()
    hits = []
    manager.set_callback(hits.append)
    first = manager.register_dynamic(BoxCollider(), CollisionLayer.PLAYER, CollisionLayer.ALL, "p")
    manager.register_dynamic(BoxCollider(), CollisionLayer.ENEMY, CollisionLayer.ALL, "e")
    manager.update()
    assert len(hits) == 1
    manager.set_enabled(first, False)
    manager.update()
    assert len(hits) == 1
    manager.set_enabled(first, True)
    manager.unregister_dynamic(first)
    manager.update()
    assert len(hits) == 1


def test_manager_shutdown_clears_map_and_callback():
    manager = CollisionManager()
    hits = []
    manager.set_callback(hits.append)
    manager.register_map_block(BoxCollider())
    manager.shutdown()
    assert manager.check_map_collision(BoxCollider()) is None
    manager.register_dynamic(BoxCollider(), CollisionLayer.PLAYER)
    manager.register_dynamic(BoxCollider(), CollisionLayer.PLAYER)
    manager.update()
    assert hits == []


def test_manager_initialize_resets_everything():
    manager = CollisionManager()
    manager.register_dynamic(BoxCollider(), CollisionLayer.PLAYER)
    manager.register_map_block(BoxCollider())
    manager.initialize(cell_size=4.0)
    assert manager.map.cell_size == 4.0
    assert len(manager.map) == 0
    assert manager.register_dynamic(BoxCollider(), CollisionLayer.PLAYER) == 1