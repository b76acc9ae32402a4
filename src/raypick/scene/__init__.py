"""Scene algebra: composable, immutable models evaluated per ray."""

from .model import And, Clip, Model, Object, Or, Primitive, Scene, Transformed

__all__ = [
    "Model",
    "Primitive",
    "Object",
    "Scene",
    "Transformed",
    "Clip",
    "And",
    "Or",
]
