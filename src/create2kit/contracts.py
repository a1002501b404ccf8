"""ABI definitions for the example factory and account contracts.

Solidity sources live in ``contracts/`` at the repository root. The factory
deploys arbitrary init code with CREATE2 and reports the resulting address
through its ``Deployed`` event.
"""

FACTORY_ABI = [
    {
        "type": "function",
        "name": "deploy",
        "stateMutability": "payable",
        "inputs": [
            {"name": "bytecode", "type": "bytes"},
            {"name": "salt", "type": "uint256"},
        ],
        "outputs": [{"name": "addr", "type": "address"}],
    },
    {
        "type": "function",
        "name": "getAddress",
        "stateMutability": "view",
        "inputs": [
            {"name": "bytecode", "type": "bytes"},
            {"name": "salt", "type": "uint256"},
        ],
        "outputs": [{"name": "", "type": "address"}],
    },
    {
        "type": "event",
        "name": "Deployed",
        "anonymous": False,
        "inputs": [
            {"name": "addr", "type": "address", "indexed": False},
            {"name": "salt", "type": "uint256", "indexed": False},
        ],
    },
]

ACCOUNT_ABI = [
    {
        "type": "constructor",
        "stateMutability": "payable",
        "inputs": [{"name": "owner", "type": "address"}],
    },
    {
        "type": "function",
        "name": "owner",
        "stateMutability": "view",
        "inputs": [],
        "outputs": [{"name": "", "type": "address"}],
    },
]


def constructor_types(abi: list) -> list[str]:
    """Return the constructor parameter types of a contract ABI."""
    for item in abi:
        if item.get("type") == "constructor":
            return [inp["type"] for inp in item.get("inputs", [])]
    return []
