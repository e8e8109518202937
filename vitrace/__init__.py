"""A small ray tracer: cameras, geometry, lights, shaders, renderers and PPM output."""

__version__ = "0.1.0"