"""Rendering subpackage.

Turns a generated pixel matrix into an image:

* :mod:`pixel_pattern.renderer.raster` expands the RGB matrix into an opaque
  RGBA byte buffer using NumPy.
* :mod:`pixel_pattern.renderer.codec` hands that buffer to Pillow and wraps
  the result in a :class:`~pixel_pattern.renderer.codec.PatternImage` handle
  for metadata inspection, PNG export and further transforms.
"""
