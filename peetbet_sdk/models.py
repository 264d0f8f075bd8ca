"""
PeetBet data records

Room records mirror the on-chain structs; result records are the structured
outcome handed to agent code.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple, Union

from eth_typing import ChecksumAddress
from eth_utils import to_checksum_address

from .constants import (
    ZERO_ADDRESS,
    TOKEN_DECIMALS,
    GameKind,
    RoomState,
)


@dataclass(frozen=True)
class Address:
    """
    Canonical EVM address.

    Any hex spelling is normalized to its checksum form on construction, so
    two addresses compare equal regardless of the case they were given in.
    """
    value: ChecksumAddress

    def __post_init__(self):
        raw = self.value.value if isinstance(self.value, Address) else self.value
        object.__setattr__(self, "value", to_checksum_address(raw))

    @classmethod
    def optional(cls, raw: Union[str, "Address", None]) -> Optional["Address"]:
        """Parse an address, mapping None and the zero address to None"""
        if raw is None or raw == "":
            return None
        address = cls(raw)
        if address.value == ZERO_ADDRESS:
            return None
        return address

    def short(self) -> str:
        return f"{self.value[:10]}..."

    def __str__(self) -> str:
        return self.value


def _hex(address: Optional[Address]) -> str:
    return address.value if address else ZERO_ADDRESS


@dataclass(frozen=True)
class SettlementConfig:
    """
    Tunables for waiting on and pricing settlement.

    Attributes:
        timeout_ms: Maximum time to wait for a room to settle
        poll_interval_ms: Delay between room reads while waiting
        fee_buffer_percent: Upward buffer applied to the VRF gas price
        dice_fee_bps: Platform fee on Dice pots (provisional until the
            contract exposes it)
        token_symbol: Symbol used in summaries
        token_decimals: Fixed-point decimals of bet amounts
    """
    timeout_ms: int = 120_000
    poll_interval_ms: int = 2_000
    fee_buffer_percent: int = 40
    dice_fee_bps: int = 500
    token_symbol: str = "USDC"
    token_decimals: int = TOKEN_DECIMALS


@dataclass(frozen=True)
class CoinFlipRoom:
    """CoinFlip room as stored by the contract"""
    id: int
    room_number: int
    created_at: int
    player_a: Address
    player_b: Optional[Address]
    bet_amount: int
    is_active: bool
    winner: Optional[Address]
    is_house_game: bool
    is_challenge: bool
    completed_at: int
    random_word: int
    vrf_request_id: int
    house_edge_bps: int

    game_kind = GameKind.COINFLIP

    @property
    def participants(self) -> Tuple[Address, ...]:
        if self.player_b is None:
            return (self.player_a,)
        return (self.player_a, self.player_b)

    @property
    def state(self) -> int:
        if not self.is_active and self.winner is not None:
            return RoomState.SETTLED
        if self.player_b is None:
            return RoomState.WAITING if self.is_active else RoomState.CANCELLED
        return RoomState.SETTLING


@dataclass(frozen=True)
class DiceRoom:
    """Dice room as stored by the contract"""
    id: int
    room_number: int
    creator: Address
    bet_amount: int
    max_players: int
    current_players: int
    is_active: bool
    has_started: bool
    winning_number: int
    winner: Optional[Address]
    created_at: int
    completed_at: int
    is_private: bool

    game_kind = GameKind.DICE

    @property
    def state(self) -> int:
        if not self.is_active and self.winner is not None:
            return RoomState.SETTLED
        if self.has_started:
            return RoomState.SETTLING
        return RoomState.WAITING if self.is_active else RoomState.CANCELLED


@dataclass(frozen=True)
class CoinFlipResult:
    """Structured outcome of a settled CoinFlip room"""
    room_id: int
    did_i_win: bool
    winner: Address
    loser: Optional[Address]
    player_a: Address
    player_b: Optional[Address]
    bet_amount: int
    payout: int
    fee: int
    net_change: int
    random_word: int
    coin_result: str
    summary: str
    completed_at: int
    is_house_game: bool

    def to_dict(self) -> Dict[str, Any]:
        return {
            "roomId": self.room_id,
            "didIWin": self.did_i_win,
            "winner": self.winner.value,
            "loser": _hex(self.loser),
            "playerA": self.player_a.value,
            "playerB": _hex(self.player_b),
            "betAmount": self.bet_amount,
            "payout": self.payout,
            "fee": self.fee,
            "netChange": self.net_change,
            "randomWord": self.random_word,
            "coinResult": self.coin_result,
            "summary": self.summary,
            "completedAt": self.completed_at,
            "isHouseGame": self.is_house_game,
        }


@dataclass(frozen=True)
class DiceResult:
    """Structured outcome of a settled Dice room"""
    room_id: int
    did_i_win: bool
    winner: Address
    winning_number: int
    my_number: int
    player_count: int
    players: Tuple[Address, ...]
    bet_amount: int
    payout: int
    fee: int
    net_change: int
    random_word: int
    summary: str
    completed_at: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "roomId": self.room_id,
            "didIWin": self.did_i_win,
            "winner": self.winner.value,
            "winningNumber": self.winning_number,
            "myNumber": self.my_number,
            "playerCount": self.player_count,
            "players": [p.value for p in self.players],
            "betAmount": self.bet_amount,
            "payout": self.payout,
            "fee": self.fee,
            "netChange": self.net_change,
            "randomWord": self.random_word,
            "summary": self.summary,
            "completedAt": self.completed_at,
        }


@dataclass(frozen=True)
class VrfCostEstimate:
    """Native payment and fee caps to attach to a VRF-triggering call"""
    cost: int
    max_fee_per_gas: int
    max_priority_fee_per_gas: int


@dataclass
class TransactionResult:
    """Confirmed transaction"""
    tx_hash: str
    block_number: int
    status: int
    gas_used: Optional[int] = None


@dataclass
class PaginatedResult:
    """One page of room ids plus the total count"""
    items: List[int] = field(default_factory=list)
    total: int = 0


@dataclass
class SecurityStatus:
    """Platform operational flags"""
    casino_enabled: bool
    house_gambling_enabled: bool
    auto_cleanup_enabled: bool
    casino_shutdown: bool


@dataclass
class PlayerStats:
    """Deposited balance and lifetime deposits of a player"""
    balance: int
    deposit_basis: int


@dataclass
class GameCompletedEvent:
    """GameCompleted log emitted by a game contract"""
    game_kind: str
    room_id: int
    winner: Address
    payout: int
    fee: int
    timestamp: int
    block_number: int
    tx_hash: str


@dataclass
class DepositEvent:
    """Deposit log emitted by the core contract"""
    user: Address
    amount: int
    block_number: int
    tx_hash: str
