"""Three models of a 3x3 Rubik's Cube sharing one interface, with flat-layout helpers."""

__version__ = "0.1.0"