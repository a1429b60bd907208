"""
Core package for hex grid addressing and editing.

This package implements the grid engine: the layout arithmetic shared by all
panes, the mapping between caret offsets and byte/nibble positions, full and
single-byte rendering, nibble editing, and the Session and HexController
classes that tie them to one edited file.
"""

from .session import Session
from .layout import GridLayout, LayoutConstants, DEFAULT_LAYOUT
from .addressing import AddressingModel, GridPosition, Nibble
from .renderer import GridRenderer, GridText, RenderSpan, ByteUpdate, Pane
from .editor import EditEngine
from .controller import HexController

__all__ = [
    'Session',
    'GridLayout',
    'LayoutConstants',
    'DEFAULT_LAYOUT',
    'AddressingModel',
    'GridPosition',
    'Nibble',
    'GridRenderer',
    'GridText',
    'RenderSpan',
    'ByteUpdate',
    'Pane',
    'EditEngine',
    'HexController'
]
