"""Engine core for first-person games: collision, meshes, materials, input and timing."""

__version__ = "0.1.0"

__all__ = [
    "colliders",
    "collision_system",
    "map_collision",
    "mesh",
    "mesh_factory",
    "material",
    "keyboard",
    "gamepad",
    "timer",
    "input_manager",
]