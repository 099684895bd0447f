from typing import Optional


class ContractViolation(Exception):
    pass


class TokenMismatch(ContractViolation):
    """Two tagged sentences that should annotate the same tokens disagree
    on the surface text at some position.
    """

    def __init__(
        self,
        position: Optional[int],
        left,
        right,
        sentence_index: Optional[int] = None,
    ):
        self.position = position
        self.left = left
        self.right = right
        self.sentence_index = sentence_index
        super().__init__(self._message())

    def _message(self) -> str:
        where = f"position {self.position}" if self.position is not None else "unit"
        if self.sentence_index is not None:
            where = f"sentence {self.sentence_index}, {where}"
        return f"Text does not match at {where}: {self.left!r} != {self.right!r}"

    def in_sentence(self, sentence_index: int) -> "TokenMismatch":
        return TokenMismatch(self.position, self.left, self.right, sentence_index)


class LengthMismatch(ContractViolation, ValueError):
    def __init__(self, left_length: int, right_length: int, what: str = "sequences"):
        self.left_length = left_length
        self.right_length = right_length
        self.what = what
        super().__init__(
            f"Cannot align {what} of different lengths: {left_length} != {right_length}"
        )
