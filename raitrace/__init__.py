"""Scene geometry, OBJ loading, camera and render settings for a path-traced renderer."""

__version__ = "0.1.0"

__all__ = ["camera", "geometry", "mesh_loader", "scene", "scenes", "settings"]