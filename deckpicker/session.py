"""Interactive class (and rune) selection.

The session walks ``ASK_CLASS -> ASK_RUNES* -> DONE``. A class that is not
known, or an empty rune answer, ends it in ``INVALID`` with a
:class:`SessionError` unless ``reprompt`` is enabled, in which case the same
question is asked again.
"""

from enum import Enum
from typing import Optional, Protocol, Sequence

from cardsource.utils import get_logger

from .models import RUNE_CLASSES, RUNE_COUNT, RUNE_LETTERS, RUNE_NAMES, Selection, upper_rune

LOGGER = get_logger(__name__)


class Terminal(Protocol):
    def ask(self, prompt: str) -> str:
        ...


class SessionState(str, Enum):
    ASK_CLASS = "ask_class"
    ASK_RUNES = "ask_runes"
    DONE = "done"
    INVALID = "invalid"


class SessionErrorKind(str, Enum):
    UNKNOWN_CLASS = "unknown_class"
    EMPTY_RUNE_INPUT = "empty_rune_input"
    INVALID_RUNE = "invalid_rune"


class SessionError(RuntimeError):
    """The user gave an answer the session cannot continue with."""

    def __init__(self, kind: SessionErrorKind, message: str) -> None:
        super().__init__(message)
        self.kind = kind


def capitalize_words(text: str) -> str:
    """``"death KNIGHT"`` -> ``"Death Knight"``."""
    return " ".join(word[:1].upper() + word[1:].lower() for word in text.split(" "))


class SelectionSession:
    def __init__(
        self,
        classes: Sequence[str],
        terminal: Terminal,
        *,
        reprompt: bool = False,
        strict_runes: bool = False,
    ) -> None:
        self.classes = [name for name in classes if name.strip()]
        self.terminal = terminal
        self.reprompt = reprompt
        self.strict_runes = strict_runes
        self.state = SessionState.ASK_CLASS
        self.player_class: Optional[str] = None
        self.runes = ""

    def class_prompt(self) -> str:
        return f"What class do you want to choose?\n{', '.join(self.classes)}\n"

    def rune_prompt(self) -> str:
        remaining = RUNE_COUNT - len(self.runes)
        return f"What runes do you want to add ({remaining} more)\n{', '.join(RUNE_NAMES)}\n"

    def run(self) -> Selection:
        """Drive the session until a selection is made or an answer is rejected."""
        while self.state not in (SessionState.DONE, SessionState.INVALID):
            try:
                if self.state is SessionState.ASK_CLASS:
                    self._ask_class()
                else:
                    self._ask_rune()
            except SessionError:
                if not self.reprompt:
                    self.state = SessionState.INVALID
                    raise

        return Selection(player_class=self.player_class or "", runes=self.runes)

    # ------------------------------------------------------------------
    def _ask_class(self) -> None:
        answer = capitalize_words(self.terminal.ask(self.class_prompt()).strip())

        matched = next((cls for cls in self.classes if cls.lower() == answer.lower()), None)
        if matched is None:
            raise SessionError(SessionErrorKind.UNKNOWN_CLASS, f"'{answer}' is not a known class.")

        self.player_class = matched
        if matched.lower() in RUNE_CLASSES:
            self.runes = ""
            self.state = SessionState.ASK_RUNES
        else:
            self.state = SessionState.DONE

    # ------------------------------------------------------------------
    def _ask_rune(self) -> None:
        answer = self.terminal.ask(self.rune_prompt()).rstrip("\r\n")
        if not answer:
            raise SessionError(SessionErrorKind.EMPTY_RUNE_INPUT, "No rune was entered.")

        rune = answer[0]
        if upper_rune(rune) not in RUNE_LETTERS:
            if self.strict_runes:
                raise SessionError(
                    SessionErrorKind.INVALID_RUNE,
                    f"'{rune}' is not one of {', '.join(RUNE_NAMES)}.",
                )
            LOGGER.warning("Rune '%s' is not one of %s; keeping it", rune, ", ".join(RUNE_NAMES))

        self.runes += rune
        if len(self.runes) >= RUNE_COUNT:
            self.runes = "".join(upper_rune(r) for r in self.runes)
            self.state = SessionState.DONE


def pick_class(classes: Sequence[str], terminal: Terminal, **options: bool) -> Selection:
    """Run a :class:`SelectionSession` over ``classes`` and return the selection."""
    return SelectionSession(classes, terminal, **options).run()
