from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional


class RevealState(Enum):
    HIDDEN = "hidden"
    QUESTION = "question"
    ANSWER = "answer"


@dataclass
class Clue:
    question: str
    answer: str
    state: RevealState = RevealState.HIDDEN

    def reveal(self) -> Optional[str]:
        """Advance one step: hidden -> question -> answer.

        Returns the newly displayed text, or None when the clue already
        shows its answer (the click is a no-op).
        """
        if self.state is RevealState.HIDDEN:
            self.state = RevealState.QUESTION
            return self.question
        if self.state is RevealState.QUESTION:
            self.state = RevealState.ANSWER
            return self.answer
        return None

    @property
    def displayed_text(self) -> Optional[str]:
        if self.state is RevealState.QUESTION:
            return self.question
        if self.state is RevealState.ANSWER:
            return self.answer
        return None


@dataclass
class Category:
    title: str
    clues: List[Clue] = field(default_factory=list)


@dataclass
class Board:
    # column order on screen
    categories: List[Category] = field(default_factory=list)

    def clue_at(self, category_index: int, clue_index: int) -> Clue:
        """Return the clue at a board coordinate.

        Negative indexes are rejected rather than wrapped; any coordinate the
        board never rendered raises IndexError.
        """
        if not 0 <= category_index < len(self.categories):
            raise IndexError(f"category index {category_index} out of range")
        clues = self.categories[category_index].clues
        if not 0 <= clue_index < len(clues):
            raise IndexError(f"clue index {clue_index} out of range")
        return clues[clue_index]

    @property
    def clue_count(self) -> int:
        return max((len(c.clues) for c in self.categories), default=0)
