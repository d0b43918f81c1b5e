"""Account number sequence."""

DEFAULT_SEED = 1234567890


class AccountNumberSequence:
    """Monotonically increasing source of account numbers.

    Owned by whatever opens accounts (see ``AccountRegistry``) rather than
    held as global state, so tests can seed and reset it.

    Parameters
    ----------
    start : int
        First number handed out (default ``1234567890``).
    """

    def __init__(self, start: int = DEFAULT_SEED) -> None:
        if start < 0:
            raise ValueError("start must be non-negative")
        self._start = start
        self._next = start

    @property
    def start(self) -> int:
        return self._start

    def peek(self) -> str:
        """Return the number the next call to :meth:`next` will hand out."""
        return str(self._next)

    def next(self) -> str:
        """Hand out the current number and advance the sequence."""
        number = self._next
        self._next += 1
        return str(number)

    def reset(self, start: int | None = None) -> None:
        """Rewind to ``start`` (default: the starting seed)."""
        if start is not None:
            if start < 0:
                raise ValueError("start must be non-negative")
            self._start = start
        self._next = self._start

    def __repr__(self) -> str:
        return f"AccountNumberSequence(start={self._start}, next={self._next})"
