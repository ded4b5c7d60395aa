"""Interactive wireframe viewer for .fdf height-map files: parsing, projection, rendering and controls."""

__version__ = "0.1.0"