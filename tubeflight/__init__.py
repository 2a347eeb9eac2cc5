"""Scene math for a tube fly-through: vectors, splines, cameras, frusta, lights, input state, meshes and text layout."""

__version__ = "0.1.0"