import re

import pytest

from peetbet_sdk import (
    CHAIN_CONFIGS,
    ChainName,
    UnsupportedChainError,
    get_chain_config,
    get_chain_config_by_id,
    get_mainnet_chains,
    get_supported_chains,
    get_testnet_chains,
    is_valid_chain,
)

ADDRESS_RE = re.compile(r"^0x[a-fA-F0-9]{40}$")


def test_supported_chains() -> None:
    assert get_supported_chains() == ChainName.all()


@pytest.mark.parametrize(
    "name,chain_id",
    [
        (ChainName.BASE_SEPOLIA, 84532),
        (ChainName.SEPOLIA, 11155111),
        (ChainName.BSC_TESTNET, 97),
        (ChainName.BASE, 8453),
    ],
)
def test_chain_ids(name, chain_id) -> None:
    config = get_chain_config(name)
    assert config.chain_id == chain_id
    assert config.short_name == name
    assert get_chain_config_by_id(chain_id) is config


def test_unknown_chain() -> None:
    with pytest.raises(UnsupportedChainError) as excinfo:
        get_chain_config("polygon")
    assert excinfo.value.chain == "polygon"
    assert get_chain_config_by_id(1) is None
    assert not is_valid_chain("polygon")
    assert is_valid_chain(ChainName.BASE)


def test_testnet_and_mainnet_split() -> None:
    assert [c.short_name for c in get_mainnet_chains()] == [ChainName.BASE]
    assert len(get_testnet_chains()) == 3
    assert all(c.is_testnet for c in get_testnet_chains())


@pytest.mark.parametrize("name", list(CHAIN_CONFIGS))
def test_address_book_is_well_formed(name) -> None:
    config = CHAIN_CONFIGS[name]
    contracts = config.contracts
    for address in (
        contracts.peer_bet_core,
        contracts.coinflip_game,
        contracts.dice_game,
        contracts.peer_bet_views,
        contracts.token,
        config.vrf_wrapper,
    ):
        assert ADDRESS_RE.match(address)
    assert config.rpc_url.startswith("https://")
