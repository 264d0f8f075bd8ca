"""
Settlement waiting.

A room settles asynchronously: once it is full (or started) the contract asks
the VRF coordinator for randomness, and the winner is written by the VRF
callback some blocks later. ResolutionWaiter polls the room until that
happens, the room is cancelled, or the time budget runs out.

Example:
    waiter = ResolutionWaiter(client, GameKind.COINFLIP, room_id,
                              observer=client.address,
                              on_progress=print)
    result = waiter.run()
"""

import logging
import threading
import time
from typing import Callable, Optional, Union

from .constants import GameKind, RoomState
from .exceptions import (
    RoomCancelledError,
    ResolutionTimeoutError,
    WaitCancelledError,
)
from .models import (
    Address,
    CoinFlipRoom,
    CoinFlipResult,
    DiceRoom,
    DiceResult,
    SettlementConfig,
)
from .outcome import check_settled, derive_coinflip_outcome, derive_dice_outcome

log = logging.getLogger(__name__)

ProgressCallback = Callable[[str], None]


class WaiterState:
    """Waiter lifecycle"""
    POLLING = "polling"
    DONE = "done"
    FAILED = "failed"


def derive_dice_from_ledger(
    ledger,
    room: DiceRoom,
    observer: Optional[Address],
    config: SettlementConfig
) -> DiceResult:
    """
    Read the Dice player list (and the observer's pick, if they played) and
    derive the outcome of ``room``
    """
    check_settled(room)

    players = [Address(p) for p in ledger.get_room_participants(room.id)]
    choice = None
    if observer is not None and observer in players:
        choice = ledger.get_participant_choice(room.id, observer)
    return derive_dice_outcome(room, players, choice, observer, config)


def describe_progress(room: Union[CoinFlipRoom, DiceRoom]) -> str:
    """Human-readable status of a room that has not settled yet"""
    if isinstance(room, CoinFlipRoom):
        if room.player_b is None:
            return "Waiting for opponent to join..."
        return "Opponent joined! Waiting for VRF result..."
    if not room.has_started:
        return f"Waiting for players ({room.current_players}/{room.max_players})..."
    return "Game started! Waiting for VRF result..."


class ResolutionWaiter:
    """
    Poll a room until it reaches a terminal state.

    Each call to step() performs at most one room read. The timeout is checked
    before every read, so a wait may end up to one poll interval after the
    budget is exhausted. Read errors are not retried.

    Args:
        ledger: Gateway exposing get_room, get_room_participants and
            get_participant_choice
        game_kind: GameKind.COINFLIP or GameKind.DICE
        room_id: Room to watch
        observer: Address whose win/loss is reported (optional)
        config: Timeout and poll interval
        on_progress: Called with a status string on every non-terminal poll
        clock: Monotonic clock in seconds
        sleep: Sleep function taking seconds
        cancel_event: Set it to stop the wait at the next tick
    """

    def __init__(
        self,
        ledger,
        game_kind: str,
        room_id: int,
        observer: Union[str, Address, None] = None,
        config: Optional[SettlementConfig] = None,
        on_progress: Optional[ProgressCallback] = None,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], None] = time.sleep,
        cancel_event: Optional[threading.Event] = None
    ):
        if game_kind not in GameKind.all():
            raise ValueError(f"Unknown game kind: {game_kind}")

        self.ledger = ledger
        self.game_kind = game_kind
        self.room_id = room_id
        self.observer = Address.optional(observer)
        self.config = config or SettlementConfig()
        self.on_progress = on_progress
        self.cancel_event = cancel_event
        self._clock = clock
        self._sleep = sleep

        self.state = WaiterState.POLLING
        self.result: Optional[Union[CoinFlipResult, DiceResult]] = None
        self.error: Optional[Exception] = None
        self.ticks = 0
        self._started_at: Optional[float] = None

    @property
    def elapsed_ms(self) -> float:
        if self._started_at is None:
            return 0.0
        return (self._clock() - self._started_at) * 1000

    def step(self) -> str:
        """
        Run one poll tick

        Returns:
            The waiter state after the tick
        """
        if self.state != WaiterState.POLLING:
            return self.state

        if self._started_at is None:
            self._started_at = self._clock()

        if self.cancel_event is not None and self.cancel_event.is_set():
            return self._fail(WaitCancelledError(self.room_id, self.game_kind))

        if self.elapsed_ms >= self.config.timeout_ms:
            return self._fail(
                ResolutionTimeoutError(self.room_id, self.game_kind, self.config.timeout_ms)
            )

        try:
            room = self.ledger.get_room(self.game_kind, self.room_id)
            self.ticks += 1
            room_state = room.state

            log.debug(
                "%s room %s tick %d: %s",
                self.game_kind, self.room_id, self.ticks, RoomState.get_name(room_state)
            )

            if room_state == RoomState.SETTLED:
                self.result = self._derive(room)
                self.state = WaiterState.DONE
                log.info(
                    "%s room %s settled after %d polls, winner %s",
                    self.game_kind, self.room_id, self.ticks, room.winner
                )
                return self.state
        except Exception as exc:
            self.state = WaiterState.FAILED
            self.error = exc
            raise

        if room_state == RoomState.CANCELLED:
            return self._fail(RoomCancelledError(self.room_id, self.game_kind))

        self._report(describe_progress(room))
        return self.state

    def run(self) -> Union[CoinFlipResult, DiceResult]:
        """
        Poll until the room settles

        Returns:
            CoinFlipResult or DiceResult, depending on the game kind

        Raises:
            RoomCancelledError: room closed without a winner
            ResolutionTimeoutError: budget exhausted
            WaitCancelledError: cancel_event was set
        """
        interval = self.config.poll_interval_ms / 1000
        while self.step() == WaiterState.POLLING:
            self._pause(interval)

        if self.state == WaiterState.FAILED:
            raise self.error
        return self.result

    def _derive(self, room):
        if self.game_kind == GameKind.COINFLIP:
            return derive_coinflip_outcome(room, self.observer, self.config)
        return derive_dice_from_ledger(self.ledger, room, self.observer, self.config)

    def _pause(self, seconds: float):
        # A set cancel_event wakes the real-time wait early
        if self.cancel_event is not None and self._sleep is time.sleep:
            self.cancel_event.wait(seconds)
        else:
            self._sleep(seconds)

    def _fail(self, error: Exception) -> str:
        self.state = WaiterState.FAILED
        self.error = error
        log.info("%s room %s wait failed: %s", self.game_kind, self.room_id, error)
        return self.state

    def _report(self, status: str):
        if self.on_progress is None:
            return
        try:
            self.on_progress(status)
        except Exception:
            log.warning("progress callback raised for room %s", self.room_id, exc_info=True)


def wait_for_settlement(
    ledger,
    game_kind: str,
    room_id: int,
    observer: Union[str, Address, None] = None,
    config: Optional[SettlementConfig] = None,
    on_progress: Optional[ProgressCallback] = None,
    cancel_event: Optional[threading.Event] = None,
    clock: Callable[[], float] = time.monotonic,
    sleep: Callable[[float], None] = time.sleep
) -> Union[CoinFlipResult, DiceResult]:
    """Wait for a room to settle and return its derived outcome"""
    waiter = ResolutionWaiter(
        ledger,
        game_kind,
        room_id,
        observer=observer,
        config=config,
        on_progress=on_progress,
        clock=clock,
        sleep=sleep,
        cancel_event=cancel_event
    )
    return waiter.run()
