"""Keyboard input decoding from raw terminal bytes."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from .constants import EditorConstants


class KeyType(Enum):
    """Types of key events."""
    LITERAL = "literal"
    SPECIAL = "special"


class SpecialKey(Enum):
    """Logical keys assembled from escape sequences."""
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    HOME = "home"
    END = "end"
    DELETE = "delete"
    PAGE_UP = "page_up"
    PAGE_DOWN = "page_down"


@dataclass(frozen=True)
class KeyEvent:
    """A decoded key: a literal byte or a SpecialKey."""
    key_type: KeyType
    value: Union[int, SpecialKey]

    @classmethod
    def literal(cls, byte: int) -> "KeyEvent":
        return cls(KeyType.LITERAL, byte)

    @classmethod
    def special(cls, key: SpecialKey) -> "KeyEvent":
        return cls(KeyType.SPECIAL, key)

    @property
    def is_neutral(self) -> bool:
        return self.key_type == KeyType.LITERAL and self.value == EditorConstants.NEUTRAL_KEY


NEUTRAL = KeyEvent.literal(EditorConstants.NEUTRAL_KEY)
ESCAPE = KeyEvent.literal(EditorConstants.ESCAPE)


class DecoderState(Enum):
    IDLE = "idle"
    SAW_ESCAPE = "saw_escape"
    SAW_BRACKET = "saw_bracket"
    SAW_BRACKET_DIGIT = "saw_bracket_digit"
    SAW_O = "saw_o"
    SAW_OTHER = "saw_other"


# ESC [ <letter>
BRACKET_LETTERS = {
    ord('A'): SpecialKey.UP,
    ord('B'): SpecialKey.DOWN,
    ord('C'): SpecialKey.RIGHT,
    ord('D'): SpecialKey.LEFT,
    ord('H'): SpecialKey.HOME,
    ord('F'): SpecialKey.END,
}

# ESC [ <digit> ~
BRACKET_DIGITS = {
    ord('1'): SpecialKey.HOME,
    ord('3'): SpecialKey.DELETE,
    ord('4'): SpecialKey.END,
    ord('5'): SpecialKey.PAGE_UP,
    ord('6'): SpecialKey.PAGE_DOWN,
    ord('7'): SpecialKey.HOME,
    ord('8'): SpecialKey.END,
}

# ESC O <letter>
O_LETTERS = {
    ord('H'): SpecialKey.HOME,
    ord('F'): SpecialKey.END,
}


class KeyDecoder:
    """Turns a byte stream into one logical key per read_key() call.

    A finite-state machine: feed() consumes one byte (or None for a read
    timeout) and reports whether the current sequence is finished. Once a
    sequence has started, a timeout ends it with a bare ESC so a truncated
    sequence never blocks for more than one read timeout.
    """

    def __init__(self, source):
        """Initialize with anything that has read_byte() -> Optional[int]."""
        self.source = source
        self.state = DecoderState.IDLE
        self._digit: Optional[int] = None

    def reset(self) -> None:
        self.state = DecoderState.IDLE
        self._digit = None

    def read_key(self) -> Optional[KeyEvent]:
        """Decode the next key.

        Returns:
            NEUTRAL if nothing arrived within the read timeout, a KeyEvent,
            or None when an unrecognized escape sequence was swallowed.
        """
        self.reset()
        while True:
            done, event = self.feed(self.source.read_byte())
            if done:
                return event

    def feed(self, byte: Optional[int]) -> tuple[bool, Optional[KeyEvent]]:
        """Advance the state machine by one input byte."""
        state = self.state
        if state == DecoderState.IDLE:
            if byte is None:
                return self._finish(NEUTRAL)
            if byte != EditorConstants.ESCAPE:
                return self._finish(KeyEvent.literal(byte))
            self.state = DecoderState.SAW_ESCAPE
            return False, None

        if byte is None:
            # Timed out mid-sequence: it was a lone Escape press
            return self._finish(ESCAPE)

        if state == DecoderState.SAW_ESCAPE:
            if byte == ord('['):
                self.state = DecoderState.SAW_BRACKET
            elif byte == ord('O'):
                self.state = DecoderState.SAW_O
            else:
                self.state = DecoderState.SAW_OTHER
            return False, None

        if state == DecoderState.SAW_BRACKET:
            if ord('0') <= byte <= ord('9'):
                self._digit = byte
                self.state = DecoderState.SAW_BRACKET_DIGIT
                return False, None
            return self._finish_special(BRACKET_LETTERS.get(byte))

        if state == DecoderState.SAW_BRACKET_DIGIT:
            if byte != ord('~'):
                return self._finish(None)
            return self._finish_special(BRACKET_DIGITS.get(self._digit))

        if state == DecoderState.SAW_O:
            return self._finish_special(O_LETTERS.get(byte))

        # SAW_OTHER: second byte of an unknown sequence
        return self._finish(None)

    def _finish_special(self, key: Optional[SpecialKey]) -> tuple[bool, Optional[KeyEvent]]:
        if key is None:
            return self._finish(None)
        return self._finish(KeyEvent.special(key))

    def _finish(self, event: Optional[KeyEvent]) -> tuple[bool, Optional[KeyEvent]]:
        self.reset()
        return True, event
