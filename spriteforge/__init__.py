"""Component-based 2D game engine core: scenes, transforms, colliders, animation, input and timing."""

__version__ = "0.1.0"