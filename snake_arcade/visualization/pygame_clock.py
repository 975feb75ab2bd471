"""
Pygame-backed game clock.
"""
import pygame
from typing import Optional

from ..game.clock import ClockToken, GameClock


class PygameClock(GameClock):
    """
    GameClock that ticks through ``pygame.time.set_timer``.

    Each timer event carries the generation of the token that scheduled it.
    Pygame replaces the timer for an event type when it is set again, and
    events already sitting in the queue from an older chain are dropped by
    ``handle_event`` because their generation no longer matches.
    """

    def __init__(self, event_type: Optional[int] = None):
        """
        Args:
            event_type: Pygame event id for ticks (``USEREVENT + 1`` by default)
        """
        super().__init__()
        self.event_type = event_type if event_type is not None else pygame.USEREVENT + 1

    def _schedule(self, token: ClockToken) -> None:
        event = pygame.event.Event(self.event_type, generation=token.generation)
        pygame.time.set_timer(event, token.interval_ms)

    def _unschedule(self, token: ClockToken) -> None:
        # An interval of 0 disables the timer
        pygame.time.set_timer(self.event_type, 0)

    def handle_event(self, event: pygame.event.Event) -> bool:
        """
        Feed an event from the pygame loop.

        Returns:
            True if the event was a tick event (live or stale), False otherwise
        """
        if event.type != self.event_type:
            return False

        token = self._token
        if token is not None and getattr(event, "generation", None) == token.generation:
            self._fire(token)
        return True
