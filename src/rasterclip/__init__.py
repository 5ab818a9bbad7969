"""Rasterclip - integer rasterization and parametric clipping for 2D graphics.

Rasterclip is a small computational-geometry kernel with a CLI front end. It
rasterizes lines (Bresenham), filled disks (midpoint circle with span fill) and
thick lines built from the two, and clips line segments against axis-aligned
windows with the Liang-Barsky algorithm.

Example:
    $ rasterclip thick 50 50 700 500 --width 7 -o line.pbm

This will write a 900x600 PBM bitmap containing a 7 pixel wide line.
"""

__version__ = "0.1.0"

__all__ = ["__version__"]
