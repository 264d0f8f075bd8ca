"""
PeetBet SDK Exceptions
"""

from typing import Optional


class PeetBetError(Exception):
    """Base exception for PeetBet SDK"""
    pass


class RoomError(PeetBetError):
    """Base for errors tied to a single room"""

    def __init__(self, message: str, room_id: int, game_kind: str):
        self.room_id = room_id
        self.game_kind = game_kind
        super().__init__(message)


class UnsettledRoomError(RoomError):
    """Raised when a result is requested before the room has settled"""

    def __init__(self, room_id: int, game_kind: str):
        super().__init__(
            f"{game_kind} room {room_id} is not completed yet; wait for settlement first",
            room_id,
            game_kind
        )


class RoomCancelledError(RoomError):
    """Raised when a room ended without a winner"""

    def __init__(self, room_id: int, game_kind: str):
        super().__init__(
            f"{game_kind} room {room_id} was cancelled or has no winner",
            room_id,
            game_kind
        )


class ResolutionTimeoutError(RoomError):
    """Raised when a room did not settle within the wait budget"""

    def __init__(self, room_id: int, game_kind: str, timeout_ms: int):
        self.timeout_ms = timeout_ms
        super().__init__(
            f"Timeout waiting for {game_kind} room {room_id} after {timeout_ms / 1000:g} seconds",
            room_id,
            game_kind
        )


class WaitCancelledError(RoomError):
    """Raised when the caller cancels a wait in progress"""

    def __init__(self, room_id: int, game_kind: str):
        super().__init__(
            f"Wait for {game_kind} room {room_id} was cancelled by the caller",
            room_id,
            game_kind
        )


class EstimationUnavailableError(PeetBetError):
    """Raised when the VRF cost cannot be estimated"""
    pass


class NoAddressProvidedError(PeetBetError):
    """Raised when a read needs an address and none is available"""

    def __init__(self):
        super().__init__("No address provided and no wallet configured")


class WalletNotConfiguredError(PeetBetError):
    """Raised when a write is attempted on a read-only client"""

    def __init__(self):
        super().__init__("Wallet not configured. Provide private_key to the client.")


class TransactionFailedError(PeetBetError):
    """Raised when a transaction fails"""

    def __init__(self, message: str, tx_hash: Optional[str] = None):
        self.tx_hash = tx_hash
        super().__init__(message)


class UnsupportedChainError(PeetBetError):
    """Raised when a chain name is not supported"""

    def __init__(self, chain: str):
        self.chain = chain
        super().__init__(f"Unsupported chain: {chain}")
