"""Rendering subpackage.

Display collaborators for a finished (or in-progress) grid. Both renderers
consume only the read-only 8x8 grid of move numbers (``0`` = empty,
``1..64`` = visit order) and never touch the search engine:

* :mod:`knight_tour.renderer.text` draws the labelled ASCII board used by
  the CLI and the terminal animator.
* :mod:`knight_tour.renderer.texture` draws a Pillow image with move
  numbers and the knight's path, used by ``--image`` and the Streamlit app.
"""

from .text import render_text
from .texture import TextureRenderer, render_image

__all__ = ["render_text", "render_image", "TextureRenderer"]
