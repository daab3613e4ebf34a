"""
Color value classes.

- :class:`RGB`: three channels of any component type
- :class:`RGBA`: four channels of any component type
- :class:`Canonical`: RGBA over 8-bit unsigned channels, the type every
  codec reads and writes

All instances are immutable and compare component-wise.

>>> from chromacodec.colors import RGB, Canonical
>>> rgb = RGB((255, 0, 0))
>>> rgb.into_rgba(128)
RGBA(r=255, g=0, b=0, a=128)
>>> Canonical.from_rgb(rgb).to_hex()
'#ff0000'
"""

from .color_base import ColorBase
from .rgb import RGB, RGBA
from .canonical import Canonical

__all__ = ['ColorBase', 'RGB', 'RGBA', 'Canonical']
