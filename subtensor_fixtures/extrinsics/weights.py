from typing import TYPE_CHECKING

from subtensor_fixtures.core import settings
from subtensor_fixtures.core.pallets import SubtensorModule
from subtensor_fixtures.core.submit import submit_with_retry
from subtensor_fixtures.core.types import TransactionOutcome

if TYPE_CHECKING:
    from bittensor_wallet import Keypair
    from subtensor_fixtures.core.chain import ChainClient


async def set_weights(
    client: "ChainClient",
    netuid: int,
    dests: list[int],
    weights: list[int],
    version_key: int,
    hotkey: "Keypair",
) -> TransactionOutcome:
    """Sets the weights of the validator `hotkey` on a subnet.

    Parameters:
        client: The chain client.
        netuid: The subnet.
        dests: Destination uids.
        weights: Weight for each destination, already normalized to u16::MAX.
        version_key: The subnet's weights version key.
        hotkey: The validator hotkey signing the call.

    Returns:
        The successful outcome.

    Raises:
        ValueError: If `dests` and `weights` differ in length or a value does not fit in u16.
    """
    if len(dests) != len(weights):
        raise ValueError(
            f"`dests` and `weights` must have the same length, got {len(dests)} and {len(weights)}."
        )
    if any(not 0 <= value <= settings.U16_MAX for value in (*dests, *weights)):
        raise ValueError("`dests` and `weights` values must fit in u16.")

    call = await SubtensorModule(client).set_weights(
        netuid=netuid,
        dests=list(dests),
        weights=list(weights),
        version_key=version_key,
    )
    return await submit_with_retry(client, call, hotkey)
