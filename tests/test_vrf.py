import pytest

from peetbet_sdk import EstimationUnavailableError, SettlementConfig, estimate_settlement_cost
from peetbet_sdk.constants import DEFAULT_PRIORITY_FEE_WEI
from peetbet_sdk.vrf import apply_fee_buffer

GWEI = 10**9


def test_max_fee_raised_to_priority_then_buffered(fee_ledger) -> None:
    ledger = fee_ledger(gas_params=(1 * GWEI, 2 * GWEI), price=123)

    estimate = estimate_settlement_cost(ledger)

    assert estimate.max_fee_per_gas == 2 * GWEI * 140 // 100
    assert estimate.max_priority_fee_per_gas == 2 * GWEI
    assert estimate.cost == 123
    assert ledger.fee_calls == [(250_000, 1, 2_800_000_000)]


def test_buffer_applied_to_max_fee(fee_ledger) -> None:
    estimate = estimate_settlement_cost(fee_ledger(gas_params=(30 * GWEI, 1 * GWEI)))
    assert estimate.max_fee_per_gas == 42 * GWEI
    assert estimate.max_priority_fee_per_gas == 1 * GWEI


def test_buffer_floors() -> None:
    assert apply_fee_buffer(7, 1, 40) == 9
    assert apply_fee_buffer(1, 7, 40) == 9
    assert apply_fee_buffer(10, 3, 0) == 10


def test_missing_priority_fee_uses_default(fee_ledger) -> None:
    estimate = estimate_settlement_cost(fee_ledger(gas_params=(None, None)))
    assert estimate.max_priority_fee_per_gas == DEFAULT_PRIORITY_FEE_WEI
    assert estimate.max_fee_per_gas == DEFAULT_PRIORITY_FEE_WEI * 140 // 100


def test_falls_back_to_gas_price(fee_ledger) -> None:
    ledger = fee_ledger(gas_params=ValueError("method not found"), gas_price=3 * GWEI)

    estimate = estimate_settlement_cost(ledger)

    assert estimate.max_priority_fee_per_gas == 1_500_000_000
    assert estimate.max_fee_per_gas == 3 * GWEI * 140 // 100


def test_fallback_gas_price_below_default_priority(fee_ledger) -> None:
    ledger = fee_ledger(gas_params=ValueError("no base fee"), gas_price=1 * GWEI)
    estimate = estimate_settlement_cost(ledger)
    assert estimate.max_fee_per_gas == 2_100_000_000


def test_both_fee_paths_failing_is_unavailable(fee_ledger) -> None:
    ledger = fee_ledger(gas_params=ValueError("nope"), gas_price=ConnectionError("down"))

    with pytest.raises(EstimationUnavailableError) as excinfo:
        estimate_settlement_cost(ledger)

    assert isinstance(excinfo.value.__cause__, ConnectionError)
    assert ledger.fee_calls == []


def test_gas_limit_read_failure_is_unavailable(fee_ledger) -> None:
    ledger = fee_ledger(gas_limit=ConnectionError("down"))
    with pytest.raises(EstimationUnavailableError):
        estimate_settlement_cost(ledger)
    assert ledger.fee_calls == []


def test_wrapper_failure_is_unavailable(fee_ledger) -> None:
    with pytest.raises(EstimationUnavailableError):
        estimate_settlement_cost(fee_ledger(price=ValueError("execution reverted")))


def test_custom_buffer(fee_ledger) -> None:
    config = SettlementConfig(fee_buffer_percent=100)
    estimate = estimate_settlement_cost(fee_ledger(gas_params=(10 * GWEI, 1 * GWEI)), config)
    assert estimate.max_fee_per_gas == 20 * GWEI
