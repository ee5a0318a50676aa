"""Collects advisory errors during one extraction."""


class ErrorAccumulator:
    """Ordered, append-only list of diagnostic messages.

    Errors never abort an extraction; the caller decides what to do with them.
    """

    def __init__(self):
        self._errors: list[str] = []

    def clear(self) -> None:
        self._errors = []

    def add(self, message: str) -> None:
        self._errors.append(message)

    def get_errors(self) -> list[str]:
        """Copy of the messages collected so far."""
        return list(self._errors)

    def __len__(self) -> int:
        return len(self._errors)

    def __bool__(self) -> bool:
        return bool(self._errors)
