"""
Outcome derivation for settled rooms.

Both derivations are pure: they read nothing from the chain and return equal
results for equal inputs. Callers fetch the room (and, for Dice, the player
list and the observer's pick) and hand them in.
"""

from decimal import Decimal, ROUND_HALF_EVEN
from typing import Optional, Sequence, Tuple, Union

from .constants import BPS_DENOMINATOR, TOKEN_DECIMALS, CoinFace
from .exceptions import UnsettledRoomError, RoomCancelledError
from .models import (
    Address,
    CoinFlipRoom,
    CoinFlipResult,
    DiceRoom,
    DiceResult,
    SettlementConfig,
)

AddressLike = Union[str, Address, None]


def format_tokens(amount: int, decimals: int = TOKEN_DECIMALS) -> str:
    """
    Format a raw token amount for display

    Args:
        amount: Amount in raw units
        decimals: Token decimals (default: 6 for USDC)

    Returns:
        Decimal string without trailing zeros, e.g. 1500000 -> "1.5"
    """
    sign = "-" if amount < 0 else ""
    whole, frac = divmod(abs(amount), 10 ** decimals)
    if not frac:
        return f"{sign}{whole}"
    digits = str(frac).rjust(decimals, "0").rstrip("0")
    return f"{sign}{whole}.{digits}"


def parse_tokens(amount: Union[str, Decimal, int], decimals: int = TOKEN_DECIMALS) -> int:
    """
    Parse a human-readable token amount into raw units

    Args:
        amount: Amount such as "1.5"
        decimals: Token decimals (default: 6 for USDC)

    Returns:
        Amount in raw units, e.g. "1.5" -> 1500000
    """
    scaled = Decimal(str(amount)).scaleb(decimals)
    return int(scaled.to_integral_value(rounding=ROUND_HALF_EVEN))


def split_pot(pot: int, fee_bps: int) -> Tuple[int, int]:
    """Return (payout, fee) for a pot; the fee is floored"""
    fee = pot * fee_bps // BPS_DENOMINATOR
    return pot - fee, fee


def net_change_for(
    observer: Optional[Address],
    winner: Address,
    participants: Sequence[Address],
    payout: int,
    bet_amount: int
) -> int:
    if observer is None or observer not in participants:
        return 0
    if observer == winner:
        return payout - bet_amount
    return -bet_amount


def check_settled(room: Union[CoinFlipRoom, DiceRoom]) -> Address:
    if room.is_active:
        raise UnsettledRoomError(room.id, room.game_kind)
    if room.winner is None:
        raise RoomCancelledError(room.id, room.game_kind)
    return room.winner


def derive_coinflip_outcome(
    room: CoinFlipRoom,
    observer: AddressLike = None,
    config: Optional[SettlementConfig] = None
) -> CoinFlipResult:
    """
    Build the result of a settled CoinFlip room

    Args:
        room: Room record read from the contract
        observer: Address whose win/loss is reported (optional)
        config: Settlement config for token formatting

    Returns:
        CoinFlipResult

    Raises:
        UnsettledRoomError: room is still active
        RoomCancelledError: room closed without a winner
    """
    config = config or SettlementConfig()
    winner = check_settled(room)
    me = Address.optional(observer)

    loser = room.player_b if winner == room.player_a else room.player_a
    payout, fee = split_pot(room.bet_amount * 2, room.house_edge_bps)

    did_i_win = me is not None and me == winner
    in_game = me is not None and me in room.participants
    net_change = net_change_for(me, winner, room.participants, payout, room.bet_amount)
    coin_result = CoinFace.from_random_word(room.random_word)

    symbol = config.token_symbol
    payout_text = format_tokens(payout, config.token_decimals)
    net_text = format_tokens(abs(net_change), config.token_decimals)

    if did_i_win:
        summary = (
            f"You WON! Coin was {coin_result}. "
            f"You won {payout_text} {symbol} (profit: +{net_text} {symbol})"
        )
    elif in_game:
        summary = (
            f"You LOST. Coin was {coin_result}. "
            f"Lost {net_text} {symbol} to {winner.short()}"
        )
    else:
        summary = (
            f"Coin landed {coin_result}. "
            f"Winner: {winner.short()} won {payout_text} {symbol}"
        )

    return CoinFlipResult(
        room_id=room.id,
        did_i_win=did_i_win,
        winner=winner,
        loser=loser,
        player_a=room.player_a,
        player_b=room.player_b,
        bet_amount=room.bet_amount,
        payout=payout,
        fee=fee,
        net_change=net_change,
        random_word=room.random_word,
        coin_result=coin_result,
        summary=summary,
        completed_at=room.completed_at,
        is_house_game=room.is_house_game
    )


def derive_dice_outcome(
    room: DiceRoom,
    participants: Sequence[AddressLike],
    observer_choice: Optional[int] = None,
    observer: AddressLike = None,
    config: Optional[SettlementConfig] = None
) -> DiceResult:
    """
    Build the result of a settled Dice room

    The pot is split with the platform Dice fee from ``config.dice_fee_bps``.
    ``observer_choice`` is only reported when the observer is one of the
    participants.

    Raises:
        UnsettledRoomError: room is still active
        RoomCancelledError: room closed without a winner
    """
    config = config or SettlementConfig()
    winner = check_settled(room)
    me = Address.optional(observer)
    players = tuple(Address(p) for p in participants)

    payout, fee = split_pot(room.bet_amount * room.current_players, config.dice_fee_bps)

    did_i_win = me is not None and me == winner
    in_game = me is not None and me in players
    my_number = (observer_choice or 0) if in_game else 0
    net_change = net_change_for(me, winner, players, payout, room.bet_amount)

    payout_text = format_tokens(payout, config.token_decimals)
    symbol = config.token_symbol
    number = room.winning_number

    if did_i_win:
        summary = f"Number {number} won! You WON {payout_text} {symbol}!"
    elif in_game:
        summary = f"Number {number} won. You LOST (picked {my_number})"
    else:
        summary = f"Number {number} won! Winner: {winner.short()} won {payout_text} {symbol}"

    return DiceResult(
        room_id=room.id,
        did_i_win=did_i_win,
        winner=winner,
        winning_number=number,
        my_number=my_number,
        player_count=room.current_players,
        players=players,
        bet_amount=room.bet_amount,
        payout=payout,
        fee=fee,
        net_change=net_change,
        # Dice rooms do not keep the VRF word on-chain
        random_word=0,
        summary=summary,
        completed_at=room.completed_at
    )
