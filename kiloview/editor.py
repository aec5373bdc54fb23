"""Main viewer controller."""

import logging
from typing import Optional

from .commands import CommandRegistry
from .keyboard import KeyDecoder, KeyEvent
from .model import LineStore, ViewportModel
from .terminal import TerminalSession
from .view import Renderer

logger = logging.getLogger(__name__)


class Editor:
    """Render a frame, decode one key, apply it, repeat until quit."""

    def __init__(self, session: Optional[TerminalSession] = None,
                 banner: Optional[str] = None):
        """Initialize the viewer components.

        The viewport and renderer need the screen size, so they are built
        in run() once the terminal is in raw mode.
        """
        self.session = session or TerminalSession()
        self.keyboard = KeyDecoder(self.session)
        self.store = LineStore()
        self.command_registry = CommandRegistry()
        self.banner = banner
        self.viewport: Optional[ViewportModel] = None
        self.view: Optional[Renderer] = None
        self.running = False

    def run(self, path: Optional[str] = None) -> None:
        """Run the main loop on ``path`` (or an empty buffer).

        Raises NotATerminal before touching the terminal mode. Every other
        error propagates after the original mode has been restored.
        """
        with self.session:
            size = self.session.query_size()
            self.store.load(path)
            self.viewport = ViewportModel(self.store, size)
            self.view = Renderer(self.store, self.viewport, banner=self.banner)
            self.running = True
            while self.running:
                self.view.refresh(self.session)
                self.process_keypress()
        logger.debug("viewer exited cleanly")

    def process_keypress(self) -> None:
        key_event = self.keyboard.read_key()
        if key_event is not None:
            self._handle_key_event(key_event)

    def _handle_key_event(self, key_event: KeyEvent) -> None:
        self.command_registry.execute(self, key_event)
