"""
Exploration history recording and statistics.

The recorder listens to an explorer's notifications and keeps the ordered
list of what happened, which is turned into an ExplorationReport at the end
of a run.
"""

import logging

from labyrinth.core import CrawlingEvent, Direction, Explorer
from labyrinth.schemas.exploration import ExplorationReport, HistoryEntry, MazePosition

logger = logging.getLogger(__name__)


class ExplorationRecorder:
    """Records moves and rotations reported by an Explorer."""

    def __init__(self, explorer: Explorer):
        self._explorer = explorer
        self.moves = 0
        self.direction_changes = 0

        crawler = explorer.crawler
        self._history: list[HistoryEntry] = [
            HistoryEntry(
                move=0,
                x=crawler.x,
                y=crawler.y,
                direction=crawler.direction.value,
                action="depart",
            )
        ]

        explorer.position_changed.subscribe(self._on_position_changed)
        explorer.direction_changed.subscribe(self._on_direction_changed)

    @property
    def history(self) -> list[HistoryEntry]:
        return list(self._history)

    def _on_position_changed(self, event: CrawlingEvent) -> None:
        self.moves += 1
        self._record(event, "move")

    def _on_direction_changed(self, event: CrawlingEvent) -> None:
        self.direction_changes += 1
        self._record(event, "rotation")

    def _record(self, event: CrawlingEvent, action: str) -> None:
        self._history.append(
            HistoryEntry(
                move=self.moves,
                x=event.x,
                y=event.y,
                direction=event.direction.value,
                action=action,
            )
        )

    def detach(self) -> None:
        """Stop listening to the explorer."""
        self._explorer.position_changed.unsubscribe(self._on_position_changed)
        self._explorer.direction_changed.unsubscribe(self._on_direction_changed)

    def build_report(self, found_exit: bool) -> ExplorationReport:
        """Summarize the run recorded so far."""
        crawler = self._explorer.crawler
        report = ExplorationReport(
            found_exit=found_exit,
            moves=self.moves,
            direction_changes=self.direction_changes,
            final_position=MazePosition(x=crawler.x, y=crawler.y),
            history=self._history,
        )
        logger.debug(
            f"Report built: {report.moves} move(s), "
            f"{report.direction_changes} direction change(s)"
        )
        return report


def format_statistics(report: ExplorationReport) -> str:
    """Render the summary lines of a report."""
    outcome = "Exit found!" if report.found_exit else "Exit not found"
    return "\n".join(
        [
            outcome,
            "Statistics:",
            f"  - Moves: {report.moves}",
            f"  - Direction changes: {report.direction_changes}",
            f"  - Total actions: {report.total_actions}",
        ]
    )


def format_history(report: ExplorationReport) -> str:
    """Render the full history, one line per entry."""
    lines = [
        "Format: [move#] action -> (x,y) direction",
        "-" * 60,
    ]
    for entry in report.history:
        symbol = Direction(entry.direction).symbol
        lines.append(
            f"[{entry.move:4}] {entry.action:<12} -> ({entry.x:2},{entry.y:2}) "
            f"{symbol} {entry.direction}"
        )
    lines.append("-" * 60)
    lines.append(f"Total: {len(report.history)} entries in history")
    return "\n".join(lines)
