# Schemas module
from .exploration import ExplorationReport, HistoryEntry, MazePosition

__all__ = ["ExplorationReport", "HistoryEntry", "MazePosition"]
