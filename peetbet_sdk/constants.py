"""
PeetBet Protocol Constants
"""

ZERO_ADDRESS = "0x0000000000000000000000000000000000000000"

# USDC-style fixed point used for every bet amount
TOKEN_DECIMALS = 6

BPS_DENOMINATOR = 10000

# 1.5 gwei, used when the node cannot suggest a priority fee
DEFAULT_PRIORITY_FEE_WEI = 1_500_000_000

# Base fee multiplier (x10) applied when building max fee from the latest block
BASE_FEE_MULTIPLIER_X10 = 12

VRF_NUM_WORDS = 1

VRF_CALL_GAS = 1_200_000
DICE_JOIN_GAS = 300_000
DEFAULT_TX_GAS = 500_000

MIN_DICE_PLAYERS = 2
MAX_DICE_PLAYERS = 1000

MAX_PAGE_SIZE = 100
MAX_UINT256 = 2**256 - 1


class ChainName:
    """Supported chain names"""
    BASE_SEPOLIA = "base_sepolia"
    SEPOLIA = "sepolia"
    BSC_TESTNET = "bsc_testnet"
    BASE = "base"

    @classmethod
    def all(cls) -> list:
        """Get all chain names"""
        return [
            cls.BASE_SEPOLIA,
            cls.SEPOLIA,
            cls.BSC_TESTNET,
            cls.BASE
        ]


class GameKind:
    """Game contracts served by the platform"""
    COINFLIP = "coinflip"
    DICE = "dice"

    @classmethod
    def all(cls) -> list:
        """Get all game kinds"""
        return [cls.COINFLIP, cls.DICE]


class CoinFace:
    """
    CoinFlip face labels.

    The face is read off the parity of the VRF random word: even is heads
    (creator side), odd is tails (joiner side). The label is cosmetic; the
    winner is always read from the room record.
    """
    HEADS = "heads"
    TAILS = "tails"

    @classmethod
    def from_random_word(cls, random_word: int) -> str:
        """Get coin face for a random word"""
        return cls.HEADS if random_word % 2 == 0 else cls.TAILS


class RoomState:
    """Observed room lifecycle state"""
    WAITING = 0
    SETTLING = 1
    SETTLED = 2
    CANCELLED = 3

    @classmethod
    def get_name(cls, state: int) -> str:
        """Get state name from value"""
        names = {
            0: "WAITING",
            1: "SETTLING",
            2: "SETTLED",
            3: "CANCELLED"
        }
        return names.get(state, "UNKNOWN")
