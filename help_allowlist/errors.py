from typing import List, Optional, Sequence, Tuple


class AllowlistError(Exception):
    """Base class for allowlist errors."""


class InvalidAddress(AllowlistError, ValueError):
    """One or more values are not 20-byte hex account addresses."""

    def __init__(self, invalid: Sequence[Tuple[Optional[int], object]]):
        self.invalid: List[Tuple[Optional[int], object]] = list(invalid)
        super().__init__(self._describe())

    def _describe(self) -> str:
        if len(self.invalid) == 1 and self.invalid[0][0] is None:
            return f"Invalid address: {self.invalid[0][1]!r}"
        shown = ", ".join(f"#{pos}: {value!r}" for pos, value in self.invalid[:5])
        more = len(self.invalid) - 5
        if more > 0:
            shown += f" (+{more} more)"
        return f"{len(self.invalid)} invalid address(es): {shown}"


class IndexOutOfRange(AllowlistError, IndexError):
    def __init__(self, index: int, size: int):
        self.index = index
        self.size = size
        super().__init__(f"Leaf index {index} out of range for {size} leaves")


class AllowlistTooLarge(AllowlistError):
    def __init__(self, size: int, limit: int):
        self.size = size
        self.limit = limit
        super().__init__(f"Allowlist has {size} addresses, limit is {limit}")
