"""
Minimal contract ABIs for the governance reads Relais performs.
"""

GOVERNANCE_TOKEN_ABI = [
    {
        "name": "balanceOf",
        "type": "function",
        "stateMutability": "view",
        "inputs": [{"name": "account", "type": "address"}],
        "outputs": [{"name": "", "type": "uint256"}],
    },
    {
        "name": "getDelegateeByType",
        "type": "function",
        "stateMutability": "view",
        "inputs": [
            {"name": "delegator", "type": "address"},
            {"name": "delegationType", "type": "uint8"},
        ],
        "outputs": [{"name": "", "type": "address"}],
    },
    {
        "name": "getPowerAtBlock",
        "type": "function",
        "stateMutability": "view",
        "inputs": [
            {"name": "user", "type": "address"},
            {"name": "blockNumber", "type": "uint256"},
            {"name": "delegationType", "type": "uint8"},
        ],
        "outputs": [{"name": "", "type": "uint256"}],
    },
]

# Field order of the governor's ProposalWithoutVotes struct
PROPOSAL_FIELDS = (
    ("id", "uint256"),
    ("creator", "address"),
    ("executor", "address"),
    ("targets", "address[]"),
    ("values", "uint256[]"),
    ("signatures", "string[]"),
    ("calldatas", "bytes[]"),
    ("withDelegatecalls", "bool[]"),
    ("startBlock", "uint256"),
    ("endBlock", "uint256"),
    ("executionTime", "uint256"),
    ("forVotes", "uint256"),
    ("againstVotes", "uint256"),
    ("executed", "bool"),
    ("canceled", "bool"),
    ("strategy", "address"),
    ("ipfsHash", "bytes32"),
)

PROPOSAL_INDEX = {name: index for index, (name, _) in enumerate(PROPOSAL_FIELDS)}

GOVERNOR_ABI = [
    {
        "name": "getProposalById",
        "type": "function",
        "stateMutability": "view",
        "inputs": [{"name": "proposalId", "type": "uint256"}],
        "outputs": [
            {
                "name": "",
                "type": "tuple",
                "components": [
                    {"name": name, "type": abi_type}
                    for name, abi_type in PROPOSAL_FIELDS
                ],
            }
        ],
    },
    {
        "name": "getVoteOnProposal",
        "type": "function",
        "stateMutability": "view",
        "inputs": [
            {"name": "proposalId", "type": "uint256"},
            {"name": "voter", "type": "address"},
        ],
        "outputs": [
            {
                "name": "",
                "type": "tuple",
                "components": [
                    {"name": "support", "type": "bool"},
                    {"name": "votingPower", "type": "uint248"},
                ],
            }
        ],
    },
    {
        "name": "getProposalsCount",
        "type": "function",
        "stateMutability": "view",
        "inputs": [],
        "outputs": [{"name": "", "type": "uint256"}],
    },
]
