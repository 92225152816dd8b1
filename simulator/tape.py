"""
Unbounded tape for a Turing-style machine.

Cells live in an arena: three parallel lists holding each cell's symbol and
the indices of its left and right neighbours. A Cursor is a (tape, index)
handle, so cloning one yields a second handle onto the same physical cell and
writes through either are visible through both. The chain grows one blank
cell at a time when a cursor walks past either end.
"""

from enum import Enum
from itertools import islice

_NO_CELL = -1


class Movement(Enum):
    LEFT = "L"
    RIGHT = "R"
    STAY = "S"


class Cursor:
    """A movable handle onto one cell of a Tape."""

    __slots__ = ("tape", "index")

    def __init__(self, tape, index):
        self.tape = tape
        self.index = index

    @property
    def position(self):
        """Offset of the current cell from the tape's origin."""
        return self.tape._positions[self.index]

    def read(self):
        return self.tape.read(self)

    def write(self, value):
        return self.tape.write(self, value)

    def move_left(self):
        return self.tape.move_left(self)

    def move_right(self):
        return self.tape.move_right(self)

    def move(self, movement):
        return self.tape.move(self, movement)

    def clone(self):
        return self.tape.clone(self)

    def window(self, left_extent, right_extent):
        return self.tape.window(self, left_extent, right_extent)

    def __eq__(self, other):
        if not isinstance(other, Cursor):
            return NotImplemented
        return self.tape is other.tape and self.index == other.index

    # Cursors move, so they compare by cell but are not hashable.
    __hash__ = None

    def __repr__(self):
        return f"Cursor(position={self.position}, symbol={self.read()!r})"


class Tape:
    def __init__(self):
        # Cell 0 is the origin.
        self._symbols = [None]
        self._left = [_NO_CELL]
        self._right = [_NO_CELL]
        self._positions = [0]

    def __len__(self):
        """Number of materialized cells."""
        return len(self._symbols)

    def origin(self):
        """Return a new cursor on the origin cell."""
        return Cursor(self, 0)

    def _check(self, cursor):
        if cursor.tape is not self:
            raise ValueError("Cursor belongs to a different tape")

    def _materialize(self, position, left, right):
        index = len(self._symbols)
        self._symbols.append(None)
        self._left.append(left)
        self._right.append(right)
        self._positions.append(position)
        return index

    # === Cell access ===
    def read(self, cursor):
        """Symbol under the cursor, or None for blank."""
        self._check(cursor)
        return self._symbols[cursor.index]

    def write(self, cursor, value):
        """Set the symbol under the cursor (None clears it). Returns the previous symbol."""
        self._check(cursor)
        previous = self._symbols[cursor.index]
        self._symbols[cursor.index] = value
        return previous

    # === Movement ===
    def move_left(self, cursor):
        """Move one cell left, growing the chain if needed. Returns the departed symbol."""
        self._check(cursor)
        here = cursor.index
        left = self._left[here]
        if left == _NO_CELL:
            left = self._materialize(self._positions[here] - 1, _NO_CELL, here)
            self._left[here] = left
        cursor.index = left
        return self._symbols[here]

    def move_right(self, cursor):
        """Move one cell right, growing the chain if needed. Returns the departed symbol."""
        self._check(cursor)
        here = cursor.index
        right = self._right[here]
        if right == _NO_CELL:
            right = self._materialize(self._positions[here] + 1, here, _NO_CELL)
            self._right[here] = right
        cursor.index = right
        return self._symbols[here]

    def move(self, cursor, movement):
        """Apply a Movement. Stay leaves the cursor in place and returns the current symbol."""
        if movement is Movement.LEFT:
            return self.move_left(cursor)
        if movement is Movement.RIGHT:
            return self.move_right(cursor)
        if movement is Movement.STAY:
            return self.read(cursor)
        raise ValueError(f"Unknown movement: {movement!r}")

    def clone(self, cursor):
        """Second handle onto the same cell."""
        self._check(cursor)
        return Cursor(self, cursor.index)

    # === Inspection ===
    def iter_from(self, cursor, reverse=False):
        """
        Yield symbols starting at the cursor and walking right (or left when
        reverse=True), forever. Cells past the end of the chain are reported
        blank without being materialized.
        """
        self._check(cursor)
        links = self._left if reverse else self._right
        index = cursor.index
        while index != _NO_CELL:
            yield self._symbols[index]
            index = links[index]
        while True:
            yield None

    def window(self, cursor, left_extent, right_extent):
        """
        Left-to-right snapshot of `left_extent` cells before the cursor and
        `right_extent` cells at and after it.
        """
        if left_extent < 0 or right_extent < 0:
            raise ValueError("Window extents must be non-negative")
        before = list(islice(self.iter_from(cursor, reverse=True), left_extent + 1))[1:]
        before.reverse()
        after = list(islice(self.iter_from(cursor), right_extent))
        return before + after

    def contents(self):
        """Mapping of position -> symbol for every non-blank cell."""
        return {
            position: symbol
            for position, symbol in sorted(zip(self._positions, self._symbols), key=lambda cell: cell[0])
            if symbol is not None
        }
