"""Exploration report schemas."""

from typing import Literal

from pydantic import BaseModel, Field, computed_field


class MazePosition(BaseModel):
    """Schema for a position in the maze."""

    x: int = Field(..., ge=0)
    y: int = Field(..., ge=0)


class HistoryEntry(BaseModel):
    """One recorded step of an exploration run."""

    move: int = Field(..., ge=0, description="Number of moves made so far")
    x: int = Field(..., ge=0)
    y: int = Field(..., ge=0)
    direction: Literal["north", "east", "south", "west"]
    action: Literal["depart", "move", "rotation"]


class ExplorationReport(BaseModel):
    """Outcome and statistics of an exploration run."""

    found_exit: bool
    moves: int = Field(..., ge=0, description="Position changes")
    direction_changes: int = Field(..., ge=0)
    final_position: MazePosition
    history: list[HistoryEntry] = Field(default_factory=list)

    @computed_field
    @property
    def total_actions(self) -> int:
        return self.moves + self.direction_changes
