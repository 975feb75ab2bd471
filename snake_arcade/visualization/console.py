"""
Console presenter - rich-based terminal report of each run.

Does not draw the board; it prints a line when a run starts, when it ends,
and when the high score improves.
"""

from typing import Optional

from rich.console import Console
from rich.text import Text

from ..core.presenter_interface import PresenterInterface, RenderFrame, format_score


class ConsolePresenter(PresenterInterface):
    """Prints run summaries to a rich console."""

    def __init__(self, console: Optional[Console] = None):
        """
        Args:
            console: Console to print to (a new one when omitted)
        """
        self.console = console or Console()
        self.runs = 0
        self.last_score = 0
        self._new_high_score: Optional[int] = None

    def render(self, frame: RenderFrame) -> None:
        # The reset frame shows the fresh snake, so remember the score
        # from the frames before it
        if not frame.just_reset:
            self.last_score = frame.score
            return

        self.runs += 1
        text = Text()
        text.append(f"Run {self.runs} over", style="bold red")
        text.append(f"  score {format_score(self.last_score)}")
        text.append(f"  best {format_score(frame.high_score)}", style="dim")
        if self._new_high_score is not None:
            text.append("  NEW HIGH SCORE!", style="bold green")
            self._new_high_score = None
        self.console.print(text)
        self.last_score = 0

    def update_high_score(self, high_score: int) -> None:
        self._new_high_score = high_score

    def set_instructions_visible(self, visible: bool) -> None:
        if visible:
            self.console.print(Text("Press SPACE to start", style="dim"))
        else:
            self.console.print(Text(f"Run {self.runs + 1} started", style="cyan"))
