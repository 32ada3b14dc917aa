"""An OpenGL scene with a free-flying camera, a textured lit cube and an orbiting light."""

__version__ = "0.1.0"