"""
PeetBet Python SDK
Peer-to-peer CoinFlip and Dice betting for agents

Usage:
    from peetbet_sdk import PeetBetClient, ChainName

    client = PeetBetClient(
        chain=ChainName.BASE_SEPOLIA,
        private_key="YOUR_PRIVATE_KEY"
    )

    # Join a waiting room and wait for the VRF result
    rooms = client.get_coinflip_waiting_rooms()
    client.join_coinflip_room(rooms.items[0])
    result = client.wait_for_coinflip_result(rooms.items[0])
    print(result.summary)
"""

from .client import PeetBetClient
from .chains import (
    CHAIN_CONFIGS,
    ChainConfig,
    ContractAddresses,
    get_chain_config,
    get_chain_config_by_id,
    get_supported_chains,
    get_testnet_chains,
    get_mainnet_chains,
    is_valid_chain
)
from .constants import ChainName, GameKind, CoinFace, RoomState
from .exceptions import (
    PeetBetError,
    UnsettledRoomError,
    RoomCancelledError,
    ResolutionTimeoutError,
    WaitCancelledError,
    EstimationUnavailableError,
    NoAddressProvidedError,
    WalletNotConfiguredError,
    TransactionFailedError,
    UnsupportedChainError
)
from .models import (
    Address,
    CoinFlipRoom,
    DiceRoom,
    CoinFlipResult,
    DiceResult,
    SettlementConfig,
    VrfCostEstimate,
    TransactionResult,
    GameCompletedEvent,
    DepositEvent
)
from .outcome import (
    derive_coinflip_outcome,
    derive_dice_outcome,
    format_tokens,
    parse_tokens
)
from .vrf import estimate_settlement_cost
from .waiter import ResolutionWaiter, WaiterState, wait_for_settlement

__version__ = "1.0.0"
__author__ = "PeetBet Team"
__all__ = [
    "PeetBetClient",
    "CHAIN_CONFIGS",
    "ChainConfig",
    "ContractAddresses",
    "get_chain_config",
    "get_chain_config_by_id",
    "get_supported_chains",
    "get_testnet_chains",
    "get_mainnet_chains",
    "is_valid_chain",
    "ChainName",
    "GameKind",
    "CoinFace",
    "RoomState",
    "PeetBetError",
    "UnsettledRoomError",
    "RoomCancelledError",
    "ResolutionTimeoutError",
    "WaitCancelledError",
    "EstimationUnavailableError",
    "NoAddressProvidedError",
    "WalletNotConfiguredError",
    "TransactionFailedError",
    "UnsupportedChainError",
    "Address",
    "CoinFlipRoom",
    "DiceRoom",
    "CoinFlipResult",
    "DiceResult",
    "SettlementConfig",
    "VrfCostEstimate",
    "TransactionResult",
    "GameCompletedEvent",
    "DepositEvent",
    "derive_coinflip_outcome",
    "derive_dice_outcome",
    "format_tokens",
    "parse_tokens",
    "estimate_settlement_cost",
    "ResolutionWaiter",
    "WaiterState",
    "wait_for_settlement"
]
