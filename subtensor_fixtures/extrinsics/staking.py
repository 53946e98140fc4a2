from typing import TYPE_CHECKING

from bittensor.utils.balance import Balance

from subtensor_fixtures.core.pallets import SubtensorModule
from subtensor_fixtures.core.submit import submit_with_retry
from subtensor_fixtures.core.types import TransactionOutcome

if TYPE_CHECKING:
    from bittensor_wallet import Keypair
    from subtensor_fixtures.core.chain import ChainClient


async def become_delegate(
    client: "ChainClient", hotkey_ss58: str, coldkey: "Keypair"
) -> TransactionOutcome:
    """Submits `become_delegate` for a hotkey owned by `coldkey`.

    Recent runtimes treat every hotkey as a delegate and keep the call only for compatibility, so there is nothing to
    read back.
    """
    call = await SubtensorModule(client).become_delegate(hotkey=hotkey_ss58)
    return await submit_with_retry(client, call, coldkey)


async def add_stake(
    client: "ChainClient",
    netuid: int,
    hotkey_ss58: str,
    amount: Balance,
    coldkey: "Keypair",
) -> TransactionOutcome:
    """Stakes TAO from `coldkey` to a hotkey on a subnet.

    Parameters:
        client: The chain client.
        netuid: The subnet to stake on.
        hotkey_ss58: The hotkey receiving the stake.
        amount: Amount of TAO to stake.
        coldkey: The coldkey paying for the stake.

    Returns:
        The successful outcome.
    """
    call = await SubtensorModule(client).add_stake(
        netuid=netuid,
        hotkey=hotkey_ss58,
        amount_staked=amount.rao,
    )
    return await submit_with_retry(client, call, coldkey)


async def remove_stake(
    client: "ChainClient",
    netuid: int,
    hotkey_ss58: str,
    amount: Balance,
    coldkey: "Keypair",
) -> TransactionOutcome:
    """Unstakes `amount` of alpha held by `coldkey` on a hotkey back to TAO."""
    call = await SubtensorModule(client).remove_stake(
        netuid=netuid,
        hotkey=hotkey_ss58,
        amount_unstaked=amount.rao,
    )
    return await submit_with_retry(client, call, coldkey)
