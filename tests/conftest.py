import pytest

from peetbet_sdk.models import Address, CoinFlipRoom, DiceRoom

ALICE = "0x" + "a1" * 20
BOB = "0x" + "b2" * 20
CAROL = "0x" + "c3" * 20
DAVE = "0x" + "d4" * 20
ZERO = "0x" + "00" * 20


class FakeClock:
    """Monotonic clock whose sleep advances time instantly"""

    def __init__(self) -> None:
        self.now = 0.0
        self.sleeps = []

    def __call__(self) -> float:
        return self.now

    def sleep(self, seconds: float) -> None:
        self.sleeps.append(seconds)
        self.now += seconds


class ScriptedLedger:
    """Returns the scripted rooms in order, repeating the last one"""

    def __init__(self, rooms, participants=(), choices=None) -> None:
        self.rooms = list(rooms)
        self.participants = list(participants)
        self.choices = {Address(k): v for k, v in (choices or {}).items()}
        self.reads = 0
        self.choice_reads = []

    def get_room(self, game_kind, room_id):
        index = min(self.reads, len(self.rooms) - 1)
        self.reads += 1
        room = self.rooms[index]
        if isinstance(room, Exception):
            raise room
        return room

    def get_room_participants(self, room_id):
        return list(self.participants)

    def get_participant_choice(self, room_id, address):
        self.choice_reads.append(Address(address))
        return self.choices[Address(address)]


class FeeLedger:
    """Fee reads for the VRF estimator; pass an exception to make a read fail"""

    def __init__(self, gas_limit=250_000, gas_params=(30, 2), gas_price=20, price=10**15) -> None:
        self.gas_limit = gas_limit
        self.gas_params = gas_params
        self.price_value = gas_price
        self.price = price
        self.fee_calls = []

    def callback_gas_limit(self):
        if isinstance(self.gas_limit, Exception):
            raise self.gas_limit
        return self.gas_limit

    def current_gas_params(self):
        if isinstance(self.gas_params, Exception):
            raise self.gas_params
        return self.gas_params

    def gas_price(self):
        if isinstance(self.price_value, Exception):
            raise self.price_value
        return self.price_value

    def estimate_settlement_fee(self, gas_limit, word_count, gas_price):
        self.fee_calls.append((gas_limit, word_count, gas_price))
        if isinstance(self.price, Exception):
            raise self.price
        return self.price


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def scripted_ledger():
    return ScriptedLedger


@pytest.fixture
def fee_ledger():
    return FeeLedger


@pytest.fixture
def coinflip_room():
    """Factory for CoinFlip rooms; defaults to a room settled in ALICE's favor"""

    def make(**overrides):
        fields = dict(
            id=7,
            room_number=3,
            created_at=1_700_000_000,
            player_a=Address(ALICE),
            player_b=Address(BOB),
            bet_amount=1_000_000,
            is_active=False,
            winner=Address(ALICE),
            is_house_game=False,
            is_challenge=False,
            completed_at=1_700_000_060,
            random_word=42,
            vrf_request_id=9001,
            house_edge_bps=500,
        )
        fields.update(overrides)
        return CoinFlipRoom(**fields)

    return make


@pytest.fixture
def dice_room():
    """Factory for Dice rooms; defaults to a full 4-player room won by ALICE"""

    def make(**overrides):
        fields = dict(
            id=11,
            room_number=5,
            creator=Address(ALICE),
            bet_amount=1_000_000,
            max_players=4,
            current_players=4,
            is_active=False,
            has_started=True,
            winning_number=4,
            winner=Address(ALICE),
            created_at=1_700_000_000,
            completed_at=1_700_000_090,
            is_private=False,
        )
        fields.update(overrides)
        return DiceRoom(**fields)

    return make
