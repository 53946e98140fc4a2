from typing import Optional, TYPE_CHECKING

from subtensor_fixtures.core.pallets import Proxy
from subtensor_fixtures.core.submit import submit_with_retry
from subtensor_fixtures.core.types import TransactionOutcome

if TYPE_CHECKING:
    from bittensor_wallet import Keypair
    from scalecodec.types import GenericCall
    from subtensor_fixtures.core.chain import ChainClient


async def send_proxy_call(
    client: "ChainClient",
    call: "GenericCall",
    real_ss58: str,
    proxy_keypair: "Keypair",
    force_proxy_type: Optional[str] = None,
) -> TransactionOutcome:
    """Dispatches `call` on behalf of `real_ss58`, signed by one of its proxies.

    Parameters:
        client: The chain client.
        call: The inner call.
        real_ss58: The account the call is made for.
        proxy_keypair: A proxy of `real_ss58` signing and paying for the extrinsic.
        force_proxy_type: Proxy type to require (e.g. "Staking"). If `None`, any proxy relationship is accepted.

    Returns:
        The successful outcome. The `Proxy.proxy` extrinsic succeeds even if the inner call fails; inspect the
        receipt's `ProxyExecuted` event for its result.
    """
    proxy_call = await Proxy(client).proxy(
        real=real_ss58,
        force_proxy_type=force_proxy_type,
        call=call,
    )
    return await submit_with_retry(client, proxy_call, proxy_keypair)
