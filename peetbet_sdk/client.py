"""
PeetBet Python Client
Main SDK client for interacting with PeetBet smart contracts
"""

import logging
import os
import threading
from dataclasses import replace
from typing import Optional, List, Dict, Tuple, Union

from web3 import Web3
from web3.middleware import ExtraDataToPOAMiddleware
from eth_account import Account

from .abis import (
    ERC20_ABI,
    PEER_BET_CORE_ABI,
    COINFLIP_GAME_ABI,
    DICE_GAME_ABI,
    VRF_WRAPPER_ABI
)
from .chains import ChainConfig, ContractAddresses, get_chain_config
from .constants import (
    BASE_FEE_MULTIPLIER_X10,
    ChainName,
    DEFAULT_TX_GAS,
    DICE_JOIN_GAS,
    GameKind,
    MAX_DICE_PLAYERS,
    MAX_PAGE_SIZE,
    MAX_UINT256,
    MIN_DICE_PLAYERS,
    VRF_CALL_GAS,
)
from .exceptions import (
    NoAddressProvidedError,
    TransactionFailedError,
    WalletNotConfiguredError
)
from .models import (
    Address,
    CoinFlipResult,
    CoinFlipRoom,
    DiceResult,
    DepositEvent,
    DiceRoom,
    GameCompletedEvent,
    PaginatedResult,
    PlayerStats,
    SecurityStatus,
    SettlementConfig,
    TransactionResult,
    VrfCostEstimate,
)
from .outcome import derive_coinflip_outcome, format_tokens, parse_tokens
from .vrf import estimate_settlement_cost
from .waiter import ProgressCallback, derive_dice_from_ledger, wait_for_settlement

log = logging.getLogger(__name__)

AddressLike = Union[str, Address]


class PeetBetClient:
    """
    Main client for PeetBet

    Without a private key the client is read-only; write methods raise
    WalletNotConfiguredError.

    Example:
        client = PeetBetClient(
            chain=ChainName.BASE_SEPOLIA,
            private_key="0x..."
        )

        rooms = client.get_coinflip_waiting_rooms()
        if rooms.items:
            client.join_coinflip_room(rooms.items[0])
            result = client.wait_for_coinflip_result(rooms.items[0], on_progress=print)
            print(result.summary)
    """

    def __init__(
        self,
        chain: str = ChainName.BASE_SEPOLIA,
        private_key: Optional[str] = None,
        rpc_url: Optional[str] = None,
        config: Optional[SettlementConfig] = None
    ):
        """
        Initialize PeetBet client

        Args:
            chain: Chain name, see ChainName
            private_key: Private key for signing transactions (optional)
            rpc_url: JSON-RPC endpoint URL (default: chain's public RPC)
            config: Settlement tunables (timeouts, fee buffer, Dice fee)
        """
        self.chain_config = get_chain_config(chain)
        self.config = config or SettlementConfig()

        self.w3 = Web3(Web3.HTTPProvider(rpc_url or self.chain_config.rpc_url))
        self.w3.middleware_onion.inject(ExtraDataToPOAMiddleware, layer=0)

        self.account = None
        if private_key:
            self.account = Account.from_key(private_key)

        self._init_contracts()

    @classmethod
    def from_env(cls, config: Optional[SettlementConfig] = None) -> "PeetBetClient":
        """
        Build a client from PEETBET_CHAIN, PEETBET_PRIVATE_KEY and
        PEETBET_RPC_URL
        """
        return cls(
            chain=os.environ.get("PEETBET_CHAIN", ChainName.BASE_SEPOLIA),
            private_key=os.environ.get("PEETBET_PRIVATE_KEY") or None,
            rpc_url=os.environ.get("PEETBET_RPC_URL") or None,
            config=config
        )

    def _init_contracts(self):
        """Initialize contract instances"""
        contracts = self.chain_config.contracts

        self.token = self.w3.eth.contract(
            address=Web3.to_checksum_address(contracts.token),
            abi=ERC20_ABI
        )
        self.peer_bet_core = self.w3.eth.contract(
            address=Web3.to_checksum_address(contracts.peer_bet_core),
            abi=PEER_BET_CORE_ABI
        )
        self.coinflip_game = self.w3.eth.contract(
            address=Web3.to_checksum_address(contracts.coinflip_game),
            abi=COINFLIP_GAME_ABI
        )
        self.dice_game = self.w3.eth.contract(
            address=Web3.to_checksum_address(contracts.dice_game),
            abi=DICE_GAME_ABI
        )
        self.vrf_wrapper = self.w3.eth.contract(
            address=Web3.to_checksum_address(self.chain_config.vrf_wrapper),
            abi=VRF_WRAPPER_ABI
        )

    @property
    def address(self) -> Optional[str]:
        """Get current account address, None for a read-only client"""
        if not self.account:
            return None
        return self.account.address

    @property
    def chain(self) -> ChainConfig:
        """Get the active chain configuration"""
        return self.chain_config

    @property
    def contracts(self) -> ContractAddresses:
        """Get the contract address book of the active chain"""
        return self.chain_config.contracts

    def _target(self, address: Optional[AddressLike]) -> str:
        """Resolve an explicit address or fall back to the wallet"""
        target = address or self.address
        if not target:
            raise NoAddressProvidedError()
        return Address(target).value

    def _game_contract(self, game_kind: str):
        if game_kind == GameKind.COINFLIP:
            return self.coinflip_game
        if game_kind == GameKind.DICE:
            return self.dice_game
        raise ValueError(f"Unknown game kind: {game_kind}")

    def _require_wallet(self):
        if not self.account:
            raise WalletNotConfiguredError()

    def _build_tx(
        self,
        func,
        value: int = 0,
        gas: int = DEFAULT_TX_GAS,
        fees: Optional[VrfCostEstimate] = None
    ) -> Dict:
        """Build transaction dictionary"""
        params = {
            'from': self.account.address,
            'nonce': self.w3.eth.get_transaction_count(self.account.address),
            'chainId': self.chain_config.chain_id,
            'gas': gas,
            'value': value
        }
        if fees is not None:
            params['maxFeePerGas'] = fees.max_fee_per_gas
            params['maxPriorityFeePerGas'] = fees.max_priority_fee_per_gas
        else:
            params['gasPrice'] = self.w3.eth.gas_price
        return func.build_transaction(params)

    def _send_tx(self, tx: Dict) -> TransactionResult:
        """Sign and send transaction"""
        signed = self.account.sign_transaction(tx)
        tx_hash = self.w3.eth.send_raw_transaction(signed.raw_transaction)
        receipt = self.w3.eth.wait_for_transaction_receipt(tx_hash)
        hex_hash = Web3.to_hex(tx_hash)

        if receipt['status'] != 1:
            raise TransactionFailedError(f"Transaction failed: {hex_hash}", tx_hash=hex_hash)

        log.info("transaction %s confirmed in block %s", hex_hash, receipt['blockNumber'])
        return TransactionResult(
            tx_hash=hex_hash,
            block_number=receipt['blockNumber'],
            status=receipt['status'],
            gas_used=receipt.get('gasUsed')
        )

    def _write(self, func, **kwargs) -> TransactionResult:
        self._require_wallet()
        tx = self._build_tx(func, **kwargs)
        return self._send_tx(tx)

    def _vrf_write(self, func) -> TransactionResult:
        """Send a call that triggers a VRF request, paying for it"""
        self._require_wallet()
        estimate = self.estimate_vrf_cost()
        tx = self._build_tx(func, value=estimate.cost, gas=VRF_CALL_GAS, fees=estimate)
        return self._send_tx(tx)

    @staticmethod
    def _page(result) -> PaginatedResult:
        return PaginatedResult(items=list(result[0]), total=result[1])

    # ==================== Balance Functions ====================

    def get_balance(self, address: Optional[AddressLike] = None) -> int:
        """
        Get deposited PeetBet balance, available for betting

        Args:
            address: Address to check (default: current account)

        Returns:
            Balance in token units (6 decimals)
        """
        return self.peer_bet_core.functions.balances(self._target(address)).call()

    def get_token_balance(self, address: Optional[AddressLike] = None) -> int:
        """Get token balance held in the wallet (not deposited)"""
        return self.token.functions.balanceOf(self._target(address)).call()

    def get_token_allowance(self, address: Optional[AddressLike] = None) -> int:
        """Get token allowance granted to the PeetBet core contract"""
        return self.token.functions.allowance(
            self._target(address),
            self.peer_bet_core.address
        ).call()

    def approve_tokens(self, amount: int) -> TransactionResult:
        """
        Approve tokens for depositing

        Args:
            amount: Amount in token units

        Returns:
            TransactionResult
        """
        func = self.token.functions.approve(self.peer_bet_core.address, amount)
        return self._write(func)

    def approve_max_tokens(self) -> TransactionResult:
        """Approve unlimited tokens for depositing"""
        return self.approve_tokens(MAX_UINT256)

    def deposit(self, amount: int) -> TransactionResult:
        """
        Deposit tokens into PeetBet; requires prior approval

        Args:
            amount: Amount in token units
        """
        return self._write(self.peer_bet_core.functions.deposit(amount))

    def withdraw(self) -> TransactionResult:
        """Withdraw the whole deposited balance back to the wallet"""
        return self._write(self.peer_bet_core.functions.withdraw())

    def get_player_stats(self, address: Optional[AddressLike] = None) -> PlayerStats:
        """Get deposited balance and lifetime deposits of a player"""
        target = self._target(address)
        return PlayerStats(
            balance=self.get_balance(target),
            deposit_basis=self.peer_bet_core.functions.depositBasis(target).call()
        )

    # ==================== Platform Functions ====================

    def get_allowed_bet_sizes(self) -> List[int]:
        """Get the bet amounts accepted by the platform"""
        return list(self.peer_bet_core.functions.getAllowedBetSizes().call())

    def get_house_bet_sizes(self) -> List[int]:
        """Get the bet amounts accepted for games against the house"""
        return list(self.peer_bet_core.functions.getHouseBetSizes().call())

    def get_security_status(self) -> SecurityStatus:
        """
        Get platform operational status

        Returns:
            SecurityStatus dataclass
        """
        status = self.peer_bet_core.functions.getSecurityStatus().call()
        return SecurityStatus(
            casino_enabled=status[0],
            house_gambling_enabled=status[1],
            auto_cleanup_enabled=status[2],
            casino_shutdown=status[3]
        )

    # ==================== Ledger Reads ====================

    def get_room(self, game_kind: str, room_id: int) -> Union[CoinFlipRoom, DiceRoom]:
        """Get a room of either game"""
        if game_kind == GameKind.COINFLIP:
            return self.get_coinflip_room(room_id)
        if game_kind == GameKind.DICE:
            return self.get_dice_room(room_id)
        raise ValueError(f"Unknown game kind: {game_kind}")

    def get_room_participants(self, room_id: int) -> List[str]:
        """Get the players seated in a Dice room"""
        return self.get_dice_room_players(room_id)

    def get_participant_choice(self, room_id: int, address: AddressLike) -> int:
        """Get the dice number a player picked in a room"""
        return self.get_player_dice_number(room_id, address)

    def callback_gas_limit(self) -> int:
        """Get the VRF callback gas limit configured on the core contract"""
        return self.peer_bet_core.functions.vrfCallbackGasLimit().call()

    def current_gas_params(self) -> Tuple[Optional[int], Optional[int]]:
        """
        Get (max_fee_per_gas, max_priority_fee_per_gas) for an EIP-1559 tx

        Raises whatever the node raises when it does not support
        eth_maxPriorityFeePerGas or has no base fee.
        """
        priority = self.w3.eth.max_priority_fee
        base_fee = self.w3.eth.get_block("latest")["baseFeePerGas"]
        return base_fee * BASE_FEE_MULTIPLIER_X10 // 10 + priority, priority

    def gas_price(self) -> int:
        """Get the legacy network gas price in wei"""
        return self.w3.eth.gas_price

    def estimate_settlement_fee(self, gas_limit: int, word_count: int, gas_price: int) -> int:
        """Ask the VRF wrapper for the native price of a request"""
        return self.vrf_wrapper.functions.estimateRequestPriceNative(
            gas_limit,
            word_count,
            gas_price
        ).call()

    # ==================== CoinFlip Functions ====================

    def get_coinflip_waiting_rooms(self, offset: int = 0, limit: int = MAX_PAGE_SIZE) -> PaginatedResult:
        """
        Get CoinFlip rooms waiting for an opponent

        Args:
            offset: Number of rooms to skip
            limit: Maximum rooms to return (max 100)

        Returns:
            PaginatedResult of room IDs
        """
        result = self.coinflip_game.functions.getActiveWaitingRooms(offset, limit).call()
        return self._page(result)

    def get_filtered_coinflip_rooms(
        self,
        bet_amounts: List[int],
        offset: int = 0,
        limit: int = MAX_PAGE_SIZE
    ) -> PaginatedResult:
        """Get waiting CoinFlip rooms whose bet is one of bet_amounts"""
        result = self.coinflip_game.functions.getWaitingRoomsFiltered(
            offset,
            limit,
            bet_amounts
        ).call()
        return self._page(result)

    def get_coinflip_room(self, room_id: int) -> CoinFlipRoom:
        """
        Get CoinFlip room information

        Args:
            room_id: Room identifier

        Returns:
            CoinFlipRoom dataclass
        """
        room = self.coinflip_game.functions.getRoom(room_id).call()

        return CoinFlipRoom(
            id=room[0],
            room_number=room[1],
            created_at=room[2],
            player_a=Address(room[3]),
            player_b=Address.optional(room[4]),
            bet_amount=room[5],
            is_active=room[6],
            winner=Address.optional(room[7]),
            is_house_game=room[8],
            is_challenge=room[9],
            completed_at=room[10],
            random_word=room[11],
            vrf_request_id=room[12],
            house_edge_bps=room[13]
        )

    def get_player_coinflip_waiting_rooms(self, address: Optional[AddressLike] = None) -> List[int]:
        """Get IDs of waiting CoinFlip rooms created by a player"""
        return list(
            self.coinflip_game.functions.getPlayerWaitingRooms(self._target(address)).call()
        )

    def get_coinflip_total_games(self) -> int:
        """Get the number of CoinFlip games settled so far"""
        return self.coinflip_game.functions.totalGamesPlayed().call()

    def get_coinflip_total_rooms(self) -> int:
        """Get the number of CoinFlip rooms ever created"""
        return self.coinflip_game.functions.totalRoomsCreated().call()

    def is_coinflip_active(self) -> bool:
        """Check whether CoinFlip accepts new rooms"""
        return self.coinflip_game.functions.gameActive().call()

    def create_coinflip_room(self, bet_amount: int, is_private: bool = False) -> TransactionResult:
        """
        Create a CoinFlip room; the bet stays locked until joined or cancelled

        Args:
            bet_amount: Bet in token units, one of the allowed bet sizes
            is_private: Create a challenge room joinable only by room ID

        Returns:
            TransactionResult
        """
        if is_private:
            func = self.coinflip_game.functions.createChallengeRoom(bet_amount)
        else:
            func = self.coinflip_game.functions.createRoom(bet_amount)
        return self._write(func)

    def join_coinflip_room(self, room_id: int) -> TransactionResult:
        """
        Join a CoinFlip room, paying the VRF fee that settles it

        Raises:
            EstimationUnavailableError: VRF cost could not be estimated;
                nothing was sent
        """
        return self._vrf_write(self.coinflip_game.functions.joinRoom(room_id))

    def cancel_coinflip_room(self, room_id: int) -> TransactionResult:
        """Cancel a CoinFlip room nobody has joined yet"""
        return self._write(self.coinflip_game.functions.cancelRoom(room_id))

    # ==================== Dice Functions ====================

    def get_dice_waiting_rooms(self, offset: int = 0, limit: int = MAX_PAGE_SIZE) -> PaginatedResult:
        """
        Get Dice rooms waiting for players

        Args:
            offset: Number of rooms to skip
            limit: Maximum rooms to return (max 100)

        Returns:
            PaginatedResult of room IDs
        """
        result = self.dice_game.functions.getActiveRooms(offset, limit).call()
        return self._page(result)

    def get_filtered_dice_rooms(
        self,
        bet_amounts: List[int],
        offset: int = 0,
        limit: int = MAX_PAGE_SIZE
    ) -> PaginatedResult:
        """Get waiting Dice rooms whose bet is one of bet_amounts"""
        result = self.dice_game.functions.getWaitingRoomsFiltered(
            offset,
            limit,
            bet_amounts
        ).call()
        return self._page(result)

    def get_dice_room(self, room_id: int) -> DiceRoom:
        """
        Get Dice room information

        Args:
            room_id: Room identifier

        Returns:
            DiceRoom dataclass
        """
        room = self.dice_game.functions.getRoom(room_id).call()

        return DiceRoom(
            id=room[0],
            room_number=room[1],
            creator=Address(room[2]),
            bet_amount=room[3],
            max_players=int(room[4]),
            current_players=int(room[5]),
            is_active=room[6],
            has_started=room[7],
            winning_number=int(room[8]),
            winner=Address.optional(room[9]),
            created_at=room[10],
            completed_at=room[11],
            is_private=room[12]
        )

    def get_dice_room_players(self, room_id: int) -> List[str]:
        """Get the addresses seated in a Dice room, in join order"""
        return list(self.dice_game.functions.getRoomPlayers(room_id).call())

    def get_player_dice_number(self, room_id: int, player: Optional[AddressLike] = None) -> int:
        """Get the dice number (1-6) a player holds in a room"""
        return int(
            self.dice_game.functions.getPlayerNumber(room_id, self._target(player)).call()
        )

    def is_player_in_dice_room(self, room_id: int, player: Optional[AddressLike] = None) -> bool:
        """Check whether a player holds a seat in a Dice room"""
        return self.dice_game.functions.isPlayerInRoom(room_id, self._target(player)).call()

    def get_player_dice_waiting_rooms(self, address: Optional[AddressLike] = None) -> List[int]:
        """Get IDs of waiting Dice rooms a player has joined"""
        return list(
            self.dice_game.functions.getPlayerWaitingRooms(self._target(address)).call()
        )

    def get_dice_total_games(self) -> int:
        """Get the number of Dice games settled so far"""
        return self.dice_game.functions.totalGamesPlayed().call()

    def get_dice_total_rooms(self) -> int:
        """Get the number of Dice rooms ever created"""
        return self.dice_game.functions.totalRoomsCreated().call()

    def is_dice_active(self) -> bool:
        """Check whether Dice accepts new rooms"""
        return self.dice_game.functions.gameActive().call()

    def create_dice_room(
        self,
        bet_amount: int,
        max_players: int,
        is_private: bool = False
    ) -> TransactionResult:
        """
        Create a Dice room

        Args:
            bet_amount: Bet in token units
            max_players: Room capacity (2-1000)
            is_private: Hide the room from waiting lists

        Returns:
            TransactionResult
        """
        if not MIN_DICE_PLAYERS <= max_players <= MAX_DICE_PLAYERS:
            raise ValueError(
                f"max_players must be between {MIN_DICE_PLAYERS} and {MAX_DICE_PLAYERS}"
            )

        func = self.dice_game.functions.createRoom(bet_amount, max_players, is_private)
        return self._write(func)

    def join_dice_room(self, room_id: int, current_players: int, max_players: int) -> TransactionResult:
        """
        Join a Dice room

        The player taking the last seat triggers the game and pays the VRF
        fee; earlier joins are plain calls.

        Args:
            room_id: Room identifier
            current_players: Players in the room before joining
            max_players: Room capacity
        """
        func = self.dice_game.functions.joinRoom(room_id)
        if current_players + 1 == max_players:
            return self._vrf_write(func)
        return self._write(func, gas=DICE_JOIN_GAS)

    def leave_dice_room(self, room_id: int) -> TransactionResult:
        """Leave a Dice room before it starts; the bet is refunded"""
        return self._write(self.dice_game.functions.leaveRoom(room_id))

    def cancel_dice_room(self, room_id: int) -> TransactionResult:
        """Cancel a Dice room before it starts (creator only); bets are refunded"""
        return self._write(self.dice_game.functions.cancelRoom(room_id))

    def start_dice_game(self, room_id: int) -> TransactionResult:
        """Start a Dice game before the room is full (creator only, 2+ players)"""
        return self._vrf_write(self.dice_game.functions.startGame(room_id))

    # ==================== Results ====================

    def get_coinflip_game_result(
        self,
        room_id: int,
        player_address: Optional[AddressLike] = None
    ) -> CoinFlipResult:
        """
        Get the structured result of a finished CoinFlip game

        Args:
            room_id: Room identifier
            player_address: Address to report win/loss for (default: wallet)

        Raises:
            UnsettledRoomError: game still in progress
            RoomCancelledError: room closed without a winner
        """
        room = self.get_coinflip_room(room_id)
        return derive_coinflip_outcome(room, player_address or self.address, self.config)

    def get_dice_game_result(
        self,
        room_id: int,
        player_address: Optional[AddressLike] = None
    ) -> DiceResult:
        """Get the structured result of a finished Dice game"""
        room = self.get_dice_room(room_id)
        return derive_dice_from_ledger(
            self,
            room,
            Address.optional(player_address or self.address),
            self.config
        )

    def _wait(self, game_kind, room_id, timeout_ms, poll_interval_ms, on_progress,
              cancel_event, player_address):
        overrides = {}
        if timeout_ms is not None:
            overrides["timeout_ms"] = timeout_ms
        if poll_interval_ms is not None:
            overrides["poll_interval_ms"] = poll_interval_ms

        return wait_for_settlement(
            self,
            game_kind,
            room_id,
            observer=player_address or self.address,
            config=replace(self.config, **overrides),
            on_progress=on_progress,
            cancel_event=cancel_event
        )

    def wait_for_coinflip_result(
        self,
        room_id: int,
        timeout_ms: Optional[int] = None,
        poll_interval_ms: Optional[int] = None,
        on_progress: Optional[ProgressCallback] = None,
        cancel_event: Optional[threading.Event] = None,
        player_address: Optional[AddressLike] = None
    ) -> CoinFlipResult:
        """
        Wait for a CoinFlip game to finish and return the result

        Args:
            room_id: Room identifier
            timeout_ms: Maximum wait (default from config, 120000)
            poll_interval_ms: Delay between polls (default from config, 2000)
            on_progress: Called with a status string while waiting
            cancel_event: Set to abandon the wait
            player_address: Address to report win/loss for (default: wallet)

        Raises:
            ResolutionTimeoutError: no result within timeout_ms
            RoomCancelledError: room was cancelled before it started
        """
        return self._wait(GameKind.COINFLIP, room_id, timeout_ms, poll_interval_ms,
                          on_progress, cancel_event, player_address)

    def wait_for_dice_result(
        self,
        room_id: int,
        timeout_ms: Optional[int] = None,
        poll_interval_ms: Optional[int] = None,
        on_progress: Optional[ProgressCallback] = None,
        cancel_event: Optional[threading.Event] = None,
        player_address: Optional[AddressLike] = None
    ) -> DiceResult:
        """Wait for a Dice game to finish and return the result"""
        return self._wait(GameKind.DICE, room_id, timeout_ms, poll_interval_ms,
                          on_progress, cancel_event, player_address)

    def estimate_vrf_cost(self) -> VrfCostEstimate:
        """
        Estimate the VRF fee for joining the last seat or starting a game

        Raises:
            EstimationUnavailableError: any read in the estimate failed
        """
        return estimate_settlement_cost(self, self.config)

    # ==================== Events ====================

    def get_game_completions(
        self,
        game_kind: str,
        from_block: int,
        to_block: Union[int, str] = "latest"
    ) -> List[GameCompletedEvent]:
        """
        Get GameCompleted events in a block range

        Args:
            game_kind: GameKind.COINFLIP or GameKind.DICE
            from_block: First block to scan
            to_block: Last block to scan (default: latest)

        Returns:
            List of GameCompletedEvent
        """
        contract = self._game_contract(game_kind)
        logs = contract.events.GameCompleted().get_logs(
            from_block=from_block,
            to_block=to_block
        )

        return [
            GameCompletedEvent(
                game_kind=game_kind,
                room_id=entry["args"]["roomId"],
                winner=Address(entry["args"]["winner"]),
                payout=entry["args"]["payout"],
                fee=entry["args"]["fee"],
                timestamp=entry["args"]["timestamp"],
                block_number=entry["blockNumber"],
                tx_hash=Web3.to_hex(entry["transactionHash"])
            )
            for entry in logs
        ]

    def get_deposits(
        self,
        from_block: int,
        to_block: Union[int, str] = "latest",
        address: Optional[AddressLike] = None
    ) -> List[DepositEvent]:
        """
        Get Deposit events for one account in a block range

        Args:
            from_block: First block to scan
            to_block: Last block to scan (default: latest)
            address: Depositor to filter on (default: current account)

        Returns:
            List of DepositEvent
        """
        logs = self.peer_bet_core.events.Deposit().get_logs(
            from_block=from_block,
            to_block=to_block,
            argument_filters={"user": self._target(address)}
        )

        return [
            DepositEvent(
                user=Address(entry["args"]["user"]),
                amount=entry["args"]["amount"],
                block_number=entry["blockNumber"],
                tx_hash=Web3.to_hex(entry["transactionHash"])
            )
            for entry in logs
        ]

    # ==================== Utility Functions ====================

    def format_tokens(self, amount: int, decimals: Optional[int] = None) -> str:
        """Format raw token units for display, e.g. 1500000 -> "1.5" """
        return format_tokens(amount, self.config.token_decimals if decimals is None else decimals)

    def parse_tokens(self, amount: str, decimals: Optional[int] = None) -> int:
        """Parse a display amount into raw token units, e.g. "1.5" -> 1500000"""
        return parse_tokens(amount, self.config.token_decimals if decimals is None else decimals)

    def wait_for_transaction(self, tx_hash: str, timeout: int = 120) -> Dict:
        """
        Wait for transaction confirmation

        Args:
            tx_hash: Transaction hash
            timeout: Timeout in seconds

        Returns:
            Transaction receipt
        """
        return self.w3.eth.wait_for_transaction_receipt(
            tx_hash,
            timeout=timeout
        )
