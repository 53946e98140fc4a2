from typing import Optional, TYPE_CHECKING

from bittensor.utils.balance import Balance
from bittensor.utils.btlogging import logging

from subtensor_fixtures.core import settings
from subtensor_fixtures.core.errors import ReadBackMismatchError
from subtensor_fixtures.core.pallets import Balances
from subtensor_fixtures.core.types import TransactionOutcome
from subtensor_fixtures.extrinsics.utils import sudo_call
from subtensor_fixtures.utils import h160_to_ss58

if TYPE_CHECKING:
    from subtensor_fixtures.core.chain import ChainClient


async def force_set_balance(
    client: "ChainClient",
    ss58_address: str,
    amount: Optional[Balance] = None,
) -> Optional[TransactionOutcome]:
    """Sets the free balance of an account through the sudo envelope.

    The administrator pays the fee of the sudo call, so its own balance cannot equal `amount` afterwards and is not
    read back.

    Parameters:
        client: The chain client.
        ss58_address: The account to fund.
        amount: The new free balance. Defaults to `settings.DEFAULT_FUNDING_TAO`.

    Returns:
        The outcome, or `None` if the account already held exactly `amount`.

    Raises:
        ReadBackMismatchError: If the free balance of a non-administrator account differs from `amount` afterwards.
    """
    amount = amount if amount is not None else Balance.from_tao(settings.DEFAULT_FUNDING_TAO)

    if (current := await client.get_free_balance(ss58_address)).rao == amount.rao:
        logging.info(
            f"Balance of [blue]{ss58_address}[/blue] is already [blue]{amount}[/blue], skipping."
        )
        return None

    call = await Balances(client).force_set_balance(who=ss58_address, new_free=amount.rao)
    outcome = await sudo_call(client, call)

    if ss58_address == client.config.admin_ss58:
        return outcome

    if (actual := await client.get_free_balance(ss58_address)).rao != amount.rao:
        raise ReadBackMismatchError(
            f"System.Account({ss58_address}).data.free", amount, actual
        )
    logging.debug(
        f"Balance of [blue]{ss58_address}[/blue] changed from [blue]{current}[/blue] to [blue]{actual}[/blue]."
    )
    return outcome


async def force_set_balance_to_eth_address(
    client: "ChainClient",
    eth_address: str,
    amount: Optional[Balance] = None,
) -> Optional[TransactionOutcome]:
    """Funds the substrate account mirroring an EVM (H160) address."""
    return await force_set_balance(client, h160_to_ss58(eth_address), amount)
