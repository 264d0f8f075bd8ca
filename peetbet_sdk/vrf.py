"""
VRF cost estimation.

Joining the last seat of a room (or starting a Dice game early) triggers a
Chainlink VRF v2.5 direct-funding request, which must be paid for in the
native currency alongside the call.
"""

import logging
from typing import Optional

from .constants import DEFAULT_PRIORITY_FEE_WEI, VRF_NUM_WORDS
from .exceptions import EstimationUnavailableError
from .models import SettlementConfig, VrfCostEstimate

log = logging.getLogger(__name__)


def apply_fee_buffer(max_fee_per_gas: int, max_priority_fee_per_gas: int, buffer_percent: int) -> int:
    """
    Raise max fee to at least the priority fee, then add the buffer

    EIP-1559 rejects transactions whose max fee is below the priority fee.
    """
    safe = max(max_fee_per_gas, max_priority_fee_per_gas)
    return safe * (100 + buffer_percent) // 100


def _fee_params(ledger):
    try:
        max_fee, priority = ledger.current_gas_params()
    except Exception as exc:
        log.warning("fee estimation unavailable, falling back to gas price: %s", exc)
        try:
            gas_price = ledger.gas_price()
        except Exception as fallback_exc:
            raise EstimationUnavailableError(
                f"Could not read network gas price: {fallback_exc}"
            ) from fallback_exc
        return max(gas_price, DEFAULT_PRIORITY_FEE_WEI), DEFAULT_PRIORITY_FEE_WEI

    if priority is None:
        priority = DEFAULT_PRIORITY_FEE_WEI
    if max_fee is None:
        max_fee = 0
    return max_fee, priority


def estimate_settlement_cost(ledger, config: Optional[SettlementConfig] = None) -> VrfCostEstimate:
    """
    Estimate the native payment for a VRF-triggering call

    Args:
        ledger: Gateway exposing callback_gas_limit, current_gas_params,
            gas_price and estimate_settlement_fee
        config: Settlement config (fee buffer)

    Returns:
        VrfCostEstimate with the buffered max fee

    Raises:
        EstimationUnavailableError: any of the reads failed
    """
    config = config or SettlementConfig()

    try:
        callback_gas_limit = ledger.callback_gas_limit()
    except Exception as exc:
        raise EstimationUnavailableError(
            f"Could not read VRF callback gas limit: {exc}"
        ) from exc

    max_fee, priority = _fee_params(ledger)
    buffered = apply_fee_buffer(max_fee, priority, config.fee_buffer_percent)

    log.debug(
        "vrf estimate inputs: gas_limit=%s max_fee=%s priority=%s buffered=%s",
        callback_gas_limit, max_fee, priority, buffered
    )

    try:
        cost = ledger.estimate_settlement_fee(callback_gas_limit, VRF_NUM_WORDS, buffered)
    except Exception as exc:
        raise EstimationUnavailableError(
            f"VRF wrapper price query failed: {exc}"
        ) from exc

    return VrfCostEstimate(
        cost=cost,
        max_fee_per_gas=buffered,
        max_priority_fee_per_gas=priority
    )
