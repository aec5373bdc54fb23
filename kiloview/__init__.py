"""Kiloview - a minimal raw-mode terminal text viewer."""

from .editor import Editor
from .errors import CursorReportError, KiloviewError, NotATerminal, OpenError
from .keyboard import KeyDecoder, KeyEvent, KeyType, SpecialKey
from .model import CursorPosition, LineStore, ViewportModel
from .terminal import ScreenSize, TerminalSession
from .view import Renderer

__all__ = [
    'Editor',
    'CursorReportError',
    'KiloviewError',
    'NotATerminal',
    'OpenError',
    'KeyDecoder',
    'KeyEvent',
    'KeyType',
    'SpecialKey',
    'CursorPosition',
    'LineStore',
    'ViewportModel',
    'ScreenSize',
    'TerminalSession',
    'Renderer',
]
