"""Cursor - a logical (row, column) position in the tracked output region."""

from dataclasses import dataclass


@dataclass(slots=True, order=True)
class Cursor:
    """
    A mutable terminal coordinate.
    
    Rows are counted upward from the bottom-most tracked line, so row 0 is
    the bottom and a greater row is visually higher. Columns are counted
    from the start of the line.
    """
    row: int = 0
    col: int = 0
    
    @classmethod
    def at(cls, row: int, col: int) -> "Cursor":
        """Create a cursor at the given row and column."""
        return cls(row=row, col=col)
    
    @classmethod
    def origin(cls) -> "Cursor":
        """Create a cursor at the start of the bottom row."""
        return cls(0, 0)
    
    def copy(self) -> "Cursor":
        """Create a copy of this cursor."""
        return Cursor(self.row, self.col)
    
    def copy_from(self, other: "Cursor") -> None:
        """Overwrite both coordinates from another cursor."""
        self.row, self.col = other.row, other.col
    