"""Custom exception hierarchy for fill-in solving."""


class FillInError(Exception):
    """Base exception for solver failures."""


class PuzzleParseError(FillInError):
    """Raised when the board text cannot be turned into a grid."""


class DuplicateWordError(FillInError):
    """Raised when the word list repeats a token."""

    def __init__(self, word: str) -> None:
        super().__init__(f"Word '{word}' appears more than once")
        self.word = word


class SlotCountMismatchError(FillInError):
    """Raised before searching when slots and words cannot pair up one-to-one."""

    def __init__(self, slot_count: int, word_count: int) -> None:
        super().__init__(f"Found {slot_count} slots and {word_count} words")
        self.slot_count = slot_count
        self.word_count = word_count


class SearchTimeoutError(FillInError):
    """Raised when a time-limited search stops before proving it found every solution."""

    def __init__(self, timeout: float, found: int) -> None:
        super().__init__(
            f"Search hit the {timeout:g}s time limit after {found} solution(s); "
            "the solution list would be incomplete"
        )
        self.timeout = timeout
        self.found = found
