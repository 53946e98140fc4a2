from .admin_utils import AdminUtils
from .base import Call, CallBuilder
from .balances import Balances
from .evm import EVM
from .proxy import Proxy
from .subtensor_module import SubtensorModule
from .sudo import Sudo


__all__ = [
    "AdminUtils",
    "Balances",
    "Call",
    "CallBuilder",
    "EVM",
    "Proxy",
    "SubtensorModule",
    "Sudo",
]
