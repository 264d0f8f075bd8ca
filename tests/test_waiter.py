import threading
import time

import pytest

from peetbet_sdk import (
    Address,
    GameKind,
    ResolutionTimeoutError,
    ResolutionWaiter,
    RoomCancelledError,
    SettlementConfig,
    WaitCancelledError,
    WaiterState,
    derive_coinflip_outcome,
    derive_dice_outcome,
    wait_for_settlement,
)

ALICE = "0x" + "a1" * 20
BOB = "0x" + "b2" * 20
CAROL = "0x" + "c3" * 20


def make_waiter(ledger, clock, game_kind=GameKind.COINFLIP, **kwargs):
    return ResolutionWaiter(ledger, game_kind, 7, clock=clock, sleep=clock.sleep, **kwargs)


def test_coinflip_waiting_then_settled(coinflip_room, scripted_ledger, clock) -> None:
    settled = coinflip_room()
    ledger = scripted_ledger([
        coinflip_room(is_active=True, player_b=None, winner=None, random_word=0),
        coinflip_room(is_active=True, winner=None, random_word=0),
        settled,
    ])
    progress = []

    result = make_waiter(ledger, clock, observer=BOB, on_progress=progress.append).run()

    assert result == derive_coinflip_outcome(settled, BOB)
    assert progress == [
        "Waiting for opponent to join...",
        "Opponent joined! Waiting for VRF result...",
    ]
    assert ledger.reads == 3
    assert clock.sleeps == [2.0, 2.0]
    assert clock.now * 1000 < SettlementConfig().timeout_ms


def test_timeout_after_full_budget(coinflip_room, scripted_ledger, clock) -> None:
    ledger = scripted_ledger([coinflip_room(is_active=True, player_b=None, winner=None)])
    config = SettlementConfig(timeout_ms=10_000, poll_interval_ms=2_000)
    waiter = make_waiter(ledger, clock, config=config)

    with pytest.raises(ResolutionTimeoutError) as excinfo:
        waiter.run()

    assert ledger.reads == 5
    assert excinfo.value.room_id == 7
    assert excinfo.value.timeout_ms == 10_000
    assert waiter.state == WaiterState.FAILED


def test_zero_timeout_fails_without_reading(coinflip_room, scripted_ledger, clock) -> None:
    ledger = scripted_ledger([coinflip_room()])
    with pytest.raises(ResolutionTimeoutError):
        make_waiter(ledger, clock, config=SettlementConfig(timeout_ms=0)).run()
    assert ledger.reads == 0


def test_cancelled_coinflip_room(coinflip_room, scripted_ledger, clock) -> None:
    ledger = scripted_ledger([coinflip_room(player_b=None, winner=None)])
    waiter = make_waiter(ledger, clock)

    with pytest.raises(RoomCancelledError) as excinfo:
        waiter.run()

    assert excinfo.value.game_kind == GameKind.COINFLIP
    assert ledger.reads == 1
    assert waiter.state == WaiterState.FAILED


def test_inactive_joined_room_keeps_waiting_for_callback(coinflip_room, scripted_ledger, clock) -> None:
    ledger = scripted_ledger([coinflip_room(winner=None), coinflip_room()])
    progress = []

    result = make_waiter(ledger, clock, on_progress=progress.append).run()

    assert progress == ["Opponent joined! Waiting for VRF result..."]
    assert result.winner == Address(ALICE)


def test_dice_waiting_started_settled(dice_room, scripted_ledger, clock) -> None:
    settled = dice_room(current_players=3)
    ledger = scripted_ledger(
        [
            dice_room(is_active=True, has_started=False, current_players=2, winner=None),
            dice_room(is_active=True, current_players=3, winner=None),
            settled,
        ],
        participants=[ALICE, BOB, CAROL],
        choices={BOB: 2},
    )
    progress = []

    result = make_waiter(
        ledger, clock, game_kind=GameKind.DICE, observer=BOB, on_progress=progress.append
    ).run()

    assert result == derive_dice_outcome(settled, [ALICE, BOB, CAROL], 2, BOB)
    assert result.my_number == 2
    assert progress == [
        "Waiting for players (2/4)...",
        "Game started! Waiting for VRF result...",
    ]
    assert ledger.choice_reads == [Address(BOB)]


def test_dice_observer_outside_room_skips_choice_read(dice_room, scripted_ledger, clock) -> None:
    ledger = scripted_ledger([dice_room(current_players=2)], participants=[ALICE, BOB])

    result = make_waiter(ledger, clock, game_kind=GameKind.DICE, observer=CAROL).run()

    assert ledger.choice_reads == []
    assert result.my_number == 0
    assert result.net_change == 0


def test_cancelled_dice_room(dice_room, scripted_ledger, clock) -> None:
    ledger = scripted_ledger([dice_room(has_started=False, winner=None, current_players=1)])
    with pytest.raises(RoomCancelledError):
        make_waiter(ledger, clock, game_kind=GameKind.DICE).run()


def test_read_error_propagates(coinflip_room, scripted_ledger, clock) -> None:
    ledger = scripted_ledger([
        coinflip_room(is_active=True, player_b=None, winner=None),
        ConnectionError("rpc down"),
    ])
    waiter = make_waiter(ledger, clock)

    with pytest.raises(ConnectionError):
        waiter.run()

    assert ledger.reads == 2
    assert waiter.state == WaiterState.FAILED


def test_raising_progress_callback_is_ignored(coinflip_room, scripted_ledger, clock) -> None:
    ledger = scripted_ledger([coinflip_room(is_active=True, winner=None), coinflip_room()])

    def explode(status):
        raise RuntimeError("bad callback")

    result = make_waiter(ledger, clock, on_progress=explode).run()
    assert result.room_id == 7


def test_cancel_event_before_start(coinflip_room, scripted_ledger, clock) -> None:
    ledger = scripted_ledger([coinflip_room()])
    cancel = threading.Event()
    cancel.set()

    with pytest.raises(WaitCancelledError):
        make_waiter(ledger, clock, cancel_event=cancel).run()
    assert ledger.reads == 0


def test_cancel_event_during_wait(coinflip_room, scripted_ledger, clock) -> None:
    ledger = scripted_ledger([coinflip_room(is_active=True, player_b=None, winner=None)])
    cancel = threading.Event()

    with pytest.raises(WaitCancelledError):
        make_waiter(ledger, clock, cancel_event=cancel, on_progress=lambda s: cancel.set()).run()
    assert ledger.reads == 1


def test_step_drives_state_machine(coinflip_room, scripted_ledger, clock) -> None:
    ledger = scripted_ledger([coinflip_room(is_active=True, winner=None), coinflip_room()])
    waiter = make_waiter(ledger, clock)

    assert waiter.state == WaiterState.POLLING
    assert waiter.step() == WaiterState.POLLING
    assert waiter.step() == WaiterState.DONE
    assert waiter.step() == WaiterState.DONE
    assert ledger.reads == 2
    assert waiter.result.winner == Address(ALICE)


def test_unknown_game_kind(scripted_ledger, clock) -> None:
    with pytest.raises(ValueError):
        ResolutionWaiter(scripted_ledger([]), "roulette", 1, clock=clock, sleep=clock.sleep)


def test_wait_for_settlement(coinflip_room, scripted_ledger, clock) -> None:
    ledger = scripted_ledger([coinflip_room()])
    result = wait_for_settlement(
        ledger, GameKind.COINFLIP, 7, observer=ALICE, clock=clock, sleep=clock.sleep
    )
    assert result.did_i_win
    assert clock.sleeps == []


def test_cancel_event_interrupts_real_sleep(coinflip_room, scripted_ledger) -> None:
    ledger = scripted_ledger([coinflip_room(is_active=True, player_b=None, winner=None)])
    cancel = threading.Event()
    config = SettlementConfig(timeout_ms=600_000, poll_interval_ms=60_000)
    waiter = ResolutionWaiter(
        ledger, GameKind.COINFLIP, 7, config=config,
        cancel_event=cancel, on_progress=lambda s: cancel.set()
    )

    started = time.monotonic()
    with pytest.raises(WaitCancelledError):
        waiter.run()

    assert time.monotonic() - started < 5
    assert ledger.reads == 1
