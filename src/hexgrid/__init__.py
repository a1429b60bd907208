"""
HexGrid - hex grid addressing and nibble edit engine.
"""

from .errors import HexFormatError, MalformedLength, InvalidDigit, OutOfRange
from .core import (
    Session,
    GridLayout,
    LayoutConstants,
    AddressingModel,
    GridPosition,
    Nibble,
    GridRenderer,
    GridText,
    RenderSpan,
    ByteUpdate,
    Pane,
    EditEngine,
    HexController
)

__version__ = "0.1.0"

__all__ = [
    'HexFormatError',
    'MalformedLength',
    'InvalidDigit',
    'OutOfRange',
    'Session',
    'GridLayout',
    'LayoutConstants',
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
