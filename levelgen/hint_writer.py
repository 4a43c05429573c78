import logging as log
from typing import List


class HintWriter:
    """Collects the player-facing hints written while a deck is populated.

    Hints are free text in placement order. A later stage may rewrite a hint
    when it moves the thing the hint talks about (e.g. hiding a keycard in
    furniture).
    """

    def __init__(self) -> None:
        self.hints: List[str] = []

    def AddHint(self, text: str) -> None:
        if not text:
            raise ValueError("Hints must be non-empty")
        log.debug(f"Hint: {text}")
        self.hints.append(text)

    def ReplaceHint(self, old_text: str, new_text: str) -> bool:
        """Replace the first hint equal to old_text. Returns False if none matched."""
        if not new_text:
            raise ValueError("Hints must be non-empty")
        for index, hint in enumerate(self.hints):
            if hint == old_text:
                self.hints[index] = new_text
                return True
        log.debug(f"No hint '{old_text}' to replace")
        return False

    def GetHints(self) -> List[str]:
        return list(self.hints)
