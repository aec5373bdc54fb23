"""Command pattern implementation for viewer actions."""

from abc import ABC, abstractmethod
from typing import Dict, Optional, TYPE_CHECKING, Union

from .constants import EditorConstants
from .keyboard import KeyType, SpecialKey

if TYPE_CHECKING:
    from .editor import Editor
    from .keyboard import KeyEvent


class EditorCommand(ABC):
    """Base class for viewer commands."""

    @abstractmethod
    def execute(self, editor: 'Editor', key_event: 'KeyEvent') -> None:
        """Execute the command.

        Args:
            editor: Editor instance
            key_event: The key event that triggered this command
        """
        pass


class MoveCursorCommand(EditorCommand):
    """Single-step cursor movement (arrow keys)."""

    def execute(self, editor, key_event):
        editor.viewport.move_cursor(key_event.value)


class PageCommand(EditorCommand):
    def execute(self, editor, key_event):
        editor.viewport.page(key_event.value)


class HomeCommand(EditorCommand):
    def execute(self, editor, key_event):
        editor.viewport.home()


class EndCommand(EditorCommand):
    def execute(self, editor, key_event):
        editor.viewport.end()


class QuitCommand(EditorCommand):
    def execute(self, editor, key_event):
        editor.running = False


class CommandRegistry:
    """Registry for mapping keys to commands."""

    def __init__(self):
        self._commands: Dict[Union[int, SpecialKey], EditorCommand] = {}
        self._setup_default_commands()

    def _setup_default_commands(self):
        """Set up the default command mappings."""
        move = MoveCursorCommand()
        for key in (SpecialKey.UP, SpecialKey.DOWN, SpecialKey.LEFT, SpecialKey.RIGHT):
            self.register(key, move)

        page = PageCommand()
        self.register(SpecialKey.PAGE_UP, page)
        self.register(SpecialKey.PAGE_DOWN, page)

        self.register(SpecialKey.HOME, HomeCommand())
        self.register(SpecialKey.END, EndCommand())

        self.register(EditorConstants.QUIT_KEY, QuitCommand())

    def register(self, key: Union[int, SpecialKey], command: EditorCommand):
        """Register a command for a literal byte or a special key."""
        self._commands[key] = command

    def get_command(self, key_event: 'KeyEvent') -> Optional[EditorCommand]:
        if key_event.key_type == KeyType.LITERAL and key_event.is_neutral:
            return None
        return self._commands.get(key_event.value)

    def execute(self, editor: 'Editor', key_event: 'KeyEvent') -> bool:
        """Execute the command for the given key event.

        Returns:
            True if a command was found and run
        """
        command = self.get_command(key_event)
        if command is None:
            return False
        command.execute(editor, key_event)
        return True
