"""Pure-Python path and Whitted ray tracers for a Cornell box scene, with PPM output."""

__version__ = "0.1.0"