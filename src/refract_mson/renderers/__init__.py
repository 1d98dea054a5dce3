"""refract-mson renderers.

Renderers convert typed element trees into output formats.

Available Renderers:
- MsonRenderer: Renders element trees to MSON text

Thread Safety:
Renderers keep no per-render state on the instance.
Safe for concurrent use from multiple threads.

"""

from refract_mson.renderers.mson import MsonRenderer, render_mson, type_attributes

__all__ = ["MsonRenderer", "render_mson", "type_attributes"]
