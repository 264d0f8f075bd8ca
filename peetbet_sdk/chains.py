"""
PeetBet chain configuration

Contract address book and default RPC endpoint for every supported chain.
"""

from dataclasses import dataclass
from typing import Dict, List, Optional

from .constants import ChainName
from .exceptions import UnsupportedChainError


@dataclass(frozen=True)
class ContractAddresses:
    """Deployed PeetBet contracts on one chain"""
    peer_bet_core: str
    coinflip_game: str
    dice_game: str
    peer_bet_views: str
    token: str


@dataclass(frozen=True)
class ChainConfig:
    """Chain information"""
    chain_id: int
    name: str
    short_name: str
    is_testnet: bool
    rpc_url: str
    contracts: ContractAddresses
    vrf_wrapper: str


CHAIN_CONFIGS: Dict[str, ChainConfig] = {
    ChainName.BASE_SEPOLIA: ChainConfig(
        chain_id=84532,
        name="Base Sepolia",
        short_name=ChainName.BASE_SEPOLIA,
        is_testnet=True,
        rpc_url="https://sepolia.base.org",
        contracts=ContractAddresses(
            peer_bet_core="0x43ebe246f06ac9815e2fab62592a51e6cc27f2d9",
            coinflip_game="0x64af3ba41f55159a1e2dab4e812b547274ea3089",
            dice_game="0x444544a40c1cfc9849630f8bd335ec293bf4c01d",
            peer_bet_views="0xabc1cbc11e3e498665faccc6021fd6409a75d881",
            token="0x036cbd53842c5426634e7929541ec2318f3dcf7e",
        ),
        vrf_wrapper="0x7a1BaC17Ccc5b313516C5E16fb24f7659aA5ebed",
    ),
    ChainName.SEPOLIA: ChainConfig(
        chain_id=11155111,
        name="Ethereum Sepolia",
        short_name=ChainName.SEPOLIA,
        is_testnet=True,
        rpc_url="https://ethereum-sepolia-rpc.publicnode.com",
        contracts=ContractAddresses(
            peer_bet_core="0x10ff96bf5caebd530d5b0db07914dec7f04751cf",
            coinflip_game="0xe7a07a10ab2111fcd39023332bf945972f6982c8",
            dice_game="0xd752455d46b336e2d088837ac14c36c51a60e5fa",
            peer_bet_views="0x0a444c1dca2364077100d8baf2bcb95ff255ed87",
            token="0xcac524bca292aaade2df8a05cc58f0a65b1b3bb9",
        ),
        vrf_wrapper="0x195f15F2d49d693cE265b4fB0fdDbE15b1850Cc1",
    ),
    ChainName.BSC_TESTNET: ChainConfig(
        chain_id=97,
        name="BSC Testnet",
        short_name=ChainName.BSC_TESTNET,
        is_testnet=True,
        rpc_url="https://data-seed-prebsc-1-s1.bnbchain.org:8545",
        contracts=ContractAddresses(
            peer_bet_core="0xbc04429d4e9a9a2069026006f4fdce4689011092",
            coinflip_game="0xd5889124c5ea7dfe61e89994fec18764a92bd642",
            dice_game="0x9c3182d0f9ba5ae663ffc537daae10ac7e45c490",
            peer_bet_views="0x4182146db51a7de373655800c1757c67a00c494d",
            token="0x64544969ed7ebf5f083679233325356ebe738930",
        ),
        vrf_wrapper="0x471506e6ADED0b9811D05B8cAc8Db25eE839Ac94",
    ),
    # Mainnet, real funds
    ChainName.BASE: ChainConfig(
        chain_id=8453,
        name="Base",
        short_name=ChainName.BASE,
        is_testnet=False,
        rpc_url="https://mainnet.base.org",
        contracts=ContractAddresses(
            peer_bet_core="0xa5efef6b29f093b10f07a7598fedb9716907015d",
            coinflip_game="0x57d82907fe211a34cde047fc107aab2962efdf2f",
            dice_game="0xee7359ffdeb0af5d8ccf0ef42c0ad6e2f808226c",
            peer_bet_views="0x8ca77bdf300f66e7e916482cfaacfcdb652b3f3f",
            token="0x833589fcd6edb6e08f4c7c32d4f71b54bda02913",
        ),
        vrf_wrapper="0xb0407dbe851f8318bd31404A49e658143C982F23",
    ),
}


def get_chain_config(chain: str) -> ChainConfig:
    """
    Get chain config by name

    Raises:
        UnsupportedChainError: unknown chain name
    """
    try:
        return CHAIN_CONFIGS[chain]
    except KeyError:
        raise UnsupportedChainError(chain) from None


def get_chain_config_by_id(chain_id: int) -> Optional[ChainConfig]:
    """Get chain config by chain ID, or None"""
    for config in CHAIN_CONFIGS.values():
        if config.chain_id == chain_id:
            return config
    return None


def get_supported_chains() -> List[str]:
    return list(CHAIN_CONFIGS)


def get_testnet_chains() -> List[ChainConfig]:
    return [c for c in CHAIN_CONFIGS.values() if c.is_testnet]


def get_mainnet_chains() -> List[ChainConfig]:
    return [c for c in CHAIN_CONFIGS.values() if not c.is_testnet]


def is_valid_chain(chain: str) -> bool:
    return chain in CHAIN_CONFIGS
