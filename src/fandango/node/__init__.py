"""
Node clients.

- `RpcClient`: JSON-RPC calls for chain metadata
- `RestClient`: binary REST downloads for full blocks
- `SvNodeClient`: facade routing each operation to one of the two
"""

from .address import Credentials, NodeAddress
from .client import NodeClient, SvNodeClient
from .rest import RestClient
from .rpc import RPC_REQUEST_ID, RPC_VERSION, RpcClient
from .transport import DEFAULT_TIMEOUT

__all__ = [
    "Credentials",
    "DEFAULT_TIMEOUT",
    "NodeAddress",
    "NodeClient",
    "RPC_REQUEST_ID",
    "RPC_VERSION",
    "RestClient",
    "RpcClient",
    "SvNodeClient",
]
