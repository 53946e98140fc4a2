from typing import Optional, TYPE_CHECKING

from bittensor.utils.balance import Balance

from subtensor_fixtures.core import settings
from subtensor_fixtures.core.pallets import SubtensorModule
from subtensor_fixtures.core.types import TransactionOutcome
from subtensor_fixtures.extrinsics.utils import sudo_call
from subtensor_fixtures.utils import to_ss58

if TYPE_CHECKING:
    from subtensor_fixtures.core.chain import ChainClient


async def swap_coldkey(
    client: "ChainClient",
    old_coldkey_ss58: str,
    new_coldkey: str,
    swap_cost: Optional[Balance] = None,
) -> TransactionOutcome:
    """Moves everything owned by `old_coldkey_ss58` to `new_coldkey` through the sudo envelope.

    Parameters:
        client: The chain client.
        old_coldkey_ss58: The coldkey being replaced.
        new_coldkey: The replacement coldkey, as an SS58 address or as an EVM (H160) address such as a contract. An
            EVM address is mapped to its substrate mirror account.
        swap_cost: Amount charged to the old coldkey. Defaults to `settings.DEFAULT_SWAP_COST_TAO`.

    Returns:
        The successful outcome.
    """
    swap_cost = swap_cost if swap_cost is not None else Balance.from_tao(settings.DEFAULT_SWAP_COST_TAO)
    call = await SubtensorModule(client).swap_coldkey(
        old_coldkey=old_coldkey_ss58,
        new_coldkey=to_ss58(new_coldkey),
        swap_cost=swap_cost.rao,
    )
    return await sudo_call(client, call)
