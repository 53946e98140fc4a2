from typing import Optional, TYPE_CHECKING

from subtensor_fixtures.core.pallets import AdminUtils, EVM
from subtensor_fixtures.core.types import TransactionOutcome
from subtensor_fixtures.extrinsics.utils import ensure_storage_value

if TYPE_CHECKING:
    from subtensor_fixtures.core.chain import ChainClient


async def force_set_chain_id(
    client: "ChainClient", chain_id: int
) -> Optional[TransactionOutcome]:
    """Sets the EVM chain id (`EVMChainId.ChainId`) through the sudo envelope.

    Parameters:
        client: The chain client.
        chain_id: The new chain id (u64).

    Returns:
        The outcome, or `None` if the chain already used this id.
    """
    return await ensure_storage_value(
        client,
        "EVMChainId",
        "ChainId",
        None,
        chain_id,
        lambda: AdminUtils(client).sudo_set_evm_chain_id(chain_id=chain_id),
    )


async def disable_whitelist_check(
    client: "ChainClient", disabled: bool
) -> Optional[TransactionOutcome]:
    """Turns the EVM contract deployment whitelist check off (`True`) or on (`False`)."""
    return await ensure_storage_value(
        client,
        "EVM",
        "DisableWhitelistCheck",
        None,
        disabled,
        lambda: EVM(client).disable_whitelist(disabled=disabled),
    )
