"""
Presenter fan-out.
"""

from typing import List

from ..core.presenter_interface import PresenterInterface, RenderFrame


class PresenterGroup(PresenterInterface):
    """Forwards every notification to each member, in order."""

    def __init__(self, presenters: List[PresenterInterface]):
        self.presenters = list(presenters)

    def render(self, frame: RenderFrame) -> None:
        for presenter in self.presenters:
            presenter.render(frame)

    def update_high_score(self, high_score: int) -> None:
        for presenter in self.presenters:
            presenter.update_high_score(high_score)

    def set_instructions_visible(self, visible: bool) -> None:
        for presenter in self.presenters:
            presenter.set_instructions_visible(visible)
