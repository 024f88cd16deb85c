"""Presentation layer — content descriptions and the surface that shows them.

Route handlers return ``Template`` descriptions (or plain markup); the
navigator hands them to a ``RenderSurface``, which is the only thing
that mutates what is displayed.
"""

from wren.rendering.integration import create_environment
from wren.rendering.returns import InlineTemplate, Template
from wren.rendering.surface import RenderSurface, TemplateSurface

__all__ = [
    "InlineTemplate",
    "RenderSurface",
    "Template",
    "TemplateSurface",
    "create_environment",
]
