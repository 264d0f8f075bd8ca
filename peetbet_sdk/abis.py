"""
PeetBet Contract ABIs
Simplified ABIs for SDK usage
"""

ERC20_ABI = [
    {
        "inputs": [{"name": "account", "type": "address"}],
        "name": "balanceOf",
        "outputs": [{"name": "", "type": "uint256"}],
        "stateMutability": "view",
        "type": "function"
    },
    {
        "inputs": [
            {"name": "owner", "type": "address"},
            {"name": "spender", "type": "address"}
        ],
        "name": "allowance",
        "outputs": [{"name": "", "type": "uint256"}],
        "stateMutability": "view",
        "type": "function"
    },
    {
        "inputs": [
            {"name": "spender", "type": "address"},
            {"name": "amount", "type": "uint256"}
        ],
        "name": "approve",
        "outputs": [{"name": "", "type": "bool"}],
        "stateMutability": "nonpayable",
        "type": "function"
    }
]

PEER_BET_CORE_ABI = [
    {
        "inputs": [{"name": "", "type": "address"}],
        "name": "balances",
        "outputs": [{"name": "", "type": "uint256"}],
        "stateMutability": "view",
        "type": "function"
    },
    {
        "inputs": [{"name": "", "type": "address"}],
        "name": "depositBasis",
        "outputs": [{"name": "", "type": "uint256"}],
        "stateMutability": "view",
        "type": "function"
    },
    {
        "inputs": [{"name": "amount", "type": "uint256"}],
        "name": "deposit",
        "outputs": [],
        "stateMutability": "nonpayable",
        "type": "function"
    },
    {
        "inputs": [],
        "name": "withdraw",
        "outputs": [],
        "stateMutability": "nonpayable",
        "type": "function"
    },
    {
        "inputs": [],
        "name": "getAllowedBetSizes",
        "outputs": [{"name": "", "type": "uint256[]"}],
        "stateMutability": "view",
        "type": "function"
    },
    {
        "inputs": [],
        "name": "getHouseBetSizes",
        "outputs": [{"name": "", "type": "uint256[]"}],
        "stateMutability": "view",
        "type": "function"
    },
    {
        "inputs": [],
        "name": "getSecurityStatus",
        "outputs": [
            {"name": "casinoEnabled", "type": "bool"},
            {"name": "houseGamblingEnabled", "type": "bool"},
            {"name": "autoCleanupEnabled", "type": "bool"},
            {"name": "casinoShutdown", "type": "bool"}
        ],
        "stateMutability": "view",
        "type": "function"
    },
    {
        "inputs": [],
        "name": "vrfCallbackGasLimit",
        "outputs": [{"name": "", "type": "uint32"}],
        "stateMutability": "view",
        "type": "function"
    },
    {
        "anonymous": False,
        "inputs": [
            {"indexed": True, "name": "user", "type": "address"},
            {"indexed": False, "name": "amount", "type": "uint256"}
        ],
        "name": "Deposit",
        "type": "event"
    }
]

GAME_COMPLETED_EVENT = {
    "anonymous": False,
    "inputs": [
        {"indexed": True, "name": "roomId", "type": "uint256"},
        {"indexed": True, "name": "winner", "type": "address"},
        {"indexed": False, "name": "payout", "type": "uint256"},
        {"indexed": False, "name": "fee", "type": "uint256"},
        {"indexed": False, "name": "timestamp", "type": "uint256"}
    ],
    "name": "GameCompleted",
    "type": "event"
}

_ROOM_PAGE_OUTPUTS = [
    {"name": "roomIds", "type": "uint256[]"},
    {"name": "total", "type": "uint256"}
]

_SHARED_GAME_ABI = [
    {
        "inputs": [
            {"name": "offset", "type": "uint256"},
            {"name": "limit", "type": "uint256"},
            {"name": "betAmounts", "type": "uint256[]"}
        ],
        "name": "getWaitingRoomsFiltered",
        "outputs": _ROOM_PAGE_OUTPUTS,
        "stateMutability": "view",
        "type": "function"
    },
    {
        "inputs": [{"name": "player", "type": "address"}],
        "name": "getPlayerWaitingRooms",
        "outputs": [{"name": "", "type": "uint256[]"}],
        "stateMutability": "view",
        "type": "function"
    },
    {
        "inputs": [],
        "name": "totalGamesPlayed",
        "outputs": [{"name": "", "type": "uint256"}],
        "stateMutability": "view",
        "type": "function"
    },
    {
        "inputs": [],
        "name": "totalRoomsCreated",
        "outputs": [{"name": "", "type": "uint256"}],
        "stateMutability": "view",
        "type": "function"
    },
    {
        "inputs": [],
        "name": "gameActive",
        "outputs": [{"name": "", "type": "bool"}],
        "stateMutability": "view",
        "type": "function"
    },
    {
        "inputs": [{"name": "roomId", "type": "uint256"}],
        "name": "cancelRoom",
        "outputs": [],
        "stateMutability": "nonpayable",
        "type": "function"
    },
    {
        "inputs": [{"name": "roomId", "type": "uint256"}],
        "name": "joinRoom",
        "outputs": [],
        "stateMutability": "payable",
        "type": "function"
    },
    GAME_COMPLETED_EVENT
]

COINFLIP_GAME_ABI = _SHARED_GAME_ABI + [
    {
        "inputs": [
            {"name": "offset", "type": "uint256"},
            {"name": "limit", "type": "uint256"}
        ],
        "name": "getActiveWaitingRooms",
        "outputs": _ROOM_PAGE_OUTPUTS,
        "stateMutability": "view",
        "type": "function"
    },
    {
        "inputs": [{"name": "roomId", "type": "uint256"}],
        "name": "getRoom",
        "outputs": [
            {
                "name": "",
                "type": "tuple",
                "components": [
                    {"name": "id", "type": "uint256"},
                    {"name": "roomNumber", "type": "uint256"},
                    {"name": "createdAt", "type": "uint256"},
                    {"name": "playerA", "type": "address"},
                    {"name": "playerB", "type": "address"},
                    {"name": "betAmount", "type": "uint256"},
                    {"name": "isActive", "type": "bool"},
                    {"name": "winner", "type": "address"},
                    {"name": "isHouseGame", "type": "bool"},
                    {"name": "isChallenge", "type": "bool"},
                    {"name": "completedAt", "type": "uint256"},
                    {"name": "randomWord", "type": "uint256"},
                    {"name": "vrfRequestId", "type": "uint256"},
                    {"name": "houseEdgeBps", "type": "uint16"}
                ]
            }
        ],
        "stateMutability": "view",
        "type": "function"
    },
    {
        "inputs": [{"name": "betAmount", "type": "uint256"}],
        "name": "createRoom",
        "outputs": [],
        "stateMutability": "nonpayable",
        "type": "function"
    },
    {
        "inputs": [{"name": "betAmount", "type": "uint256"}],
        "name": "createChallengeRoom",
        "outputs": [],
        "stateMutability": "nonpayable",
        "type": "function"
    }
]

DICE_GAME_ABI = _SHARED_GAME_ABI + [
    {
        "inputs": [
            {"name": "offset", "type": "uint256"},
            {"name": "limit", "type": "uint256"}
        ],
        "name": "getActiveRooms",
        "outputs": _ROOM_PAGE_OUTPUTS,
        "stateMutability": "view",
        "type": "function"
    },
    {
        "inputs": [{"name": "roomId", "type": "uint256"}],
        "name": "getRoom",
        "outputs": [
            {
                "name": "",
                "type": "tuple",
                "components": [
                    {"name": "id", "type": "uint256"},
                    {"name": "roomNumber", "type": "uint256"},
                    {"name": "creator", "type": "address"},
                    {"name": "betAmount", "type": "uint256"},
                    {"name": "maxPlayers", "type": "uint16"},
                    {"name": "currentPlayers", "type": "uint16"},
                    {"name": "isActive", "type": "bool"},
                    {"name": "hasStarted", "type": "bool"},
                    {"name": "winningNumber", "type": "uint8"},
                    {"name": "winner", "type": "address"},
                    {"name": "createdAt", "type": "uint256"},
                    {"name": "completedAt", "type": "uint256"},
                    {"name": "isPrivate", "type": "bool"}
                ]
            }
        ],
        "stateMutability": "view",
        "type": "function"
    },
    {
        "inputs": [{"name": "roomId", "type": "uint256"}],
        "name": "getRoomPlayers",
        "outputs": [{"name": "", "type": "address[]"}],
        "stateMutability": "view",
        "type": "function"
    },
    {
        "inputs": [
            {"name": "roomId", "type": "uint256"},
            {"name": "player", "type": "address"}
        ],
        "name": "getPlayerNumber",
        "outputs": [{"name": "", "type": "uint8"}],
        "stateMutability": "view",
        "type": "function"
    },
    {
        "inputs": [
            {"name": "roomId", "type": "uint256"},
            {"name": "player", "type": "address"}
        ],
        "name": "isPlayerInRoom",
        "outputs": [{"name": "", "type": "bool"}],
        "stateMutability": "view",
        "type": "function"
    },
    {
        "inputs": [
            {"name": "betAmount", "type": "uint256"},
            {"name": "maxPlayers", "type": "uint16"},
            {"name": "isPrivate", "type": "bool"}
        ],
        "name": "createRoom",
        "outputs": [],
        "stateMutability": "nonpayable",
        "type": "function"
    },
    {
        "inputs": [{"name": "roomId", "type": "uint256"}],
        "name": "leaveRoom",
        "outputs": [],
        "stateMutability": "nonpayable",
        "type": "function"
    },
    {
        "inputs": [{"name": "roomId", "type": "uint256"}],
        "name": "startGame",
        "outputs": [],
        "stateMutability": "payable",
        "type": "function"
    }
]

# Chainlink VRF v2.5 wrapper, direct funding
VRF_WRAPPER_ABI = [
    {
        "inputs": [
            {"name": "_callbackGasLimit", "type": "uint32"},
            {"name": "_numWords", "type": "uint32"},
            {"name": "_requestGasPriceWei", "type": "uint256"}
        ],
        "name": "estimateRequestPriceNative",
        "outputs": [{"name": "", "type": "uint256"}],
        "stateMutability": "view",
        "type": "function"
    }
]
