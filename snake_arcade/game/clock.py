"""
Game clock - periodic tick scheduling.

A clock has at most one live tick chain. Every ``start()`` issues a new
ClockToken and ``stop()`` cancels it; ticks carrying any other token are
dropped, so restarting at a new interval can never leave two chains running.
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Callable, Optional


TickCallback = Callable[[], object]


@dataclass
class ClockToken:
    """Identifies one tick chain."""
    generation: int
    interval_ms: int
    on_tick: TickCallback
    cancelled: bool = False

    def cancel(self) -> None:
        self.cancelled = True


class GameClock(ABC):
    """
    Abstract periodic clock.

    Subclasses only decide how a token gets scheduled and unscheduled, and
    call ``_fire(token)`` whenever their backend says a tick is due.
    """

    def __init__(self):
        self._token: Optional[ClockToken] = None
        self._generation = 0

    @property
    def is_running(self) -> bool:
        return self._token is not None and not self._token.cancelled

    @property
    def interval_ms(self) -> Optional[int]:
        """Interval of the live chain, or None when stopped."""
        return self._token.interval_ms if self.is_running else None

    @property
    def token(self) -> Optional[ClockToken]:
        return self._token

    def start(self, interval_ms: int, on_tick: TickCallback) -> ClockToken:
        """
        Begin calling ``on_tick`` every ``interval_ms`` milliseconds.

        A chain that is already running is cancelled first.

        Args:
            interval_ms: Tick interval, must be positive
            on_tick: Callback invoked once per tick

        Returns:
            The token of the new chain
        """
        if interval_ms <= 0:
            raise ValueError(f"Clock interval must be positive, got {interval_ms}")

        self.stop()

        self._generation += 1
        token = ClockToken(self._generation, interval_ms, on_tick)
        self._token = token
        self._schedule(token)
        return token

    def stop(self) -> None:
        """Cancel the live chain, if any."""
        token = self._token
        if token is None:
            return
        token.cancel()
        self._token = None
        self._unschedule(token)

    def restart(self, interval_ms: int, on_tick: TickCallback) -> ClockToken:
        """Stop the live chain and start a new one at ``interval_ms``."""
        self.stop()
        return self.start(interval_ms, on_tick)

    def _fire(self, token: ClockToken) -> bool:
        """Run the tick for ``token`` unless it is stale. Returns True if it ran."""
        if token is not self._token or token.cancelled:
            return False
        token.on_tick()
        return True

    @abstractmethod
    def _schedule(self, token: ClockToken) -> None:
        """Arrange for ``token`` to tick every ``token.interval_ms``."""
        pass

    @abstractmethod
    def _unschedule(self, token: ClockToken) -> None:
        """Undo ``_schedule`` for ``token``."""
        pass


class SimulatedClock(GameClock):
    """
    Clock driven by explicit ``advance()`` calls.

    Fires at a fixed rate relative to when the chain started. Used for tests
    and for any driver that wants deterministic game time.
    """

    def __init__(self):
        super().__init__()
        self.now_ms = 0
        self._next_due: Optional[int] = None

    def _schedule(self, token: ClockToken) -> None:
        self._next_due = self.now_ms + token.interval_ms

    def _unschedule(self, token: ClockToken) -> None:
        self._next_due = None

    def advance(self, ms: int) -> int:
        """
        Move game time forward, firing every tick that falls due.

        A tick that restarts or stops the clock takes effect immediately:
        the remaining time is measured against the new chain.

        Args:
            ms: Milliseconds to advance

        Returns:
            Number of ticks fired
        """
        target = self.now_ms + ms
        fired = 0

        while self._token is not None and self._next_due is not None and self._next_due <= target:
            token = self._token
            self.now_ms = self._next_due
            self._next_due += token.interval_ms
            if self._fire(token):
                fired += 1

        self.now_ms = target
        return fired
