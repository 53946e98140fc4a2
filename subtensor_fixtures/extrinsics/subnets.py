"""
Fixtures creating subnets, registering keys in them and activating their emission.
"""

from typing import Optional, TYPE_CHECKING

from bittensor.utils.btlogging import logging

from subtensor_fixtures.core.errors import ReadBackMismatchError, StartCallTooEarlyError
from subtensor_fixtures.core.pallets import AdminUtils, SubtensorModule
from subtensor_fixtures.core.submit import submit_with_retry
from subtensor_fixtures.core.types import NetworkRegistration, TransactionOutcome
from subtensor_fixtures.core.waiting import Clock, DEFAULT_CLOCK, wait_for_block
from subtensor_fixtures.extrinsics.hyperparameters import set_network_rate_limit
from subtensor_fixtures.extrinsics.utils import ensure_storage_value

if TYPE_CHECKING:
    from bittensor_wallet import Keypair
    from subtensor_fixtures.core.chain import ChainClient

ROOT_NETUID = 0


async def add_new_subnetwork(
    client: "ChainClient", hotkey: "Keypair", coldkey: "Keypair"
) -> NetworkRegistration:
    """Registers a new subnet owned by `coldkey` with `hotkey` as the owner hotkey.

    The network rate limit is lifted first if it is set, so consecutive fixtures can register subnets back to back.

    A retried submission can register more than one subnet, and other callers may register concurrently, so the
    result reports every netuid created while the call was in flight instead of guessing one.

    Parameters:
        client: The chain client.
        hotkey: The subnet owner hotkey.
        coldkey: The coldkey paying the lock cost and owning the subnet.

    Returns:
        NetworkRegistration with the candidate netuids.

    Raises:
        ReadBackMismatchError: If `TotalNetworks` did not increase.
    """
    if await client.query_subtensor("NetworkRateLimit") != 0:
        await set_network_rate_limit(client, 0)

    total_before = await client.query_subtensor("TotalNetworks")

    call = await SubtensorModule(client).register_network(hotkey=hotkey.ss58_address)
    outcome = await submit_with_retry(client, call, coldkey)

    total_after = await client.query_subtensor("TotalNetworks")
    if total_after <= total_before:
        raise ReadBackMismatchError(
            "SubtensorModule.TotalNetworks", total_before + 1, total_after
        )

    registration = NetworkRegistration(
        netuid_before=total_before, total_after=total_after, outcome=outcome
    )
    if registration.is_ambiguous:
        logging.warning(
            f"Several subnets were registered while [blue]register_network[/blue] was in flight: "
            f"[blue]{registration.candidates}[/blue]."
        )
    else:
        logging.info(f"Registered subnet [blue]{registration.netuid}[/blue].")
    return registration


async def burned_register(
    client: "ChainClient", netuid: int, hotkey_ss58: str, coldkey: "Keypair"
) -> Optional[int]:
    """Registers a hotkey in a subnet by burning the registration cost from `coldkey`.

    Parameters:
        client: The chain client.
        netuid: The subnet to register in.
        hotkey_ss58: The hotkey to register.
        coldkey: The coldkey paying the burn.

    Returns:
        The uid of the hotkey in the subnet. If it was already registered, its existing uid and nothing is submitted.

    Raises:
        ReadBackMismatchError: If `SubnetworkN` did not grow by exactly one.
    """
    if (uid := await client.query_subtensor("Uids", [netuid, hotkey_ss58])) is not None:
        logging.info(
            f"Hotkey [blue]{hotkey_ss58}[/blue] is already registered in subnet [blue]{netuid}[/blue] "
            f"with uid [blue]{uid}[/blue]."
        )
        return uid

    neurons_before = await client.query_subtensor("SubnetworkN", [netuid])

    call = await SubtensorModule(client).burned_register(netuid=netuid, hotkey=hotkey_ss58)
    await submit_with_retry(client, call, coldkey)

    neurons_after = await client.query_subtensor("SubnetworkN", [netuid])
    if neurons_after != neurons_before + 1:
        raise ReadBackMismatchError(
            f"SubtensorModule.SubnetworkN({netuid})", neurons_before + 1, neurons_after
        )
    return await client.query_subtensor("Uids", [netuid, hotkey_ss58])


async def root_register(
    client: "ChainClient", hotkey_ss58: str, coldkey: "Keypair"
) -> Optional[int]:
    """Registers a hotkey in the root subnet. Returns its root uid."""
    if (uid := await client.query_subtensor("Uids", [ROOT_NETUID, hotkey_ss58])) is not None:
        logging.info(
            f"Hotkey [blue]{hotkey_ss58}[/blue] is already registered in the root subnet."
        )
        return uid

    call = await SubtensorModule(client).root_register(hotkey=hotkey_ss58)
    await submit_with_retry(client, call, coldkey)

    if (uid := await client.query_subtensor("Uids", [ROOT_NETUID, hotkey_ss58])) is None:
        raise ReadBackMismatchError(
            f"SubtensorModule.Uids({ROOT_NETUID}, {hotkey_ss58})", "a uid", None
        )
    return uid


async def start_call(
    client: "ChainClient",
    netuid: int,
    coldkey: "Keypair",
    wait: bool = True,
    clock: Optional[Clock] = None,
) -> Optional[TransactionOutcome]:
    """Starts emission on a subnet.

    The chain accepts the start call only once more than `DurationOfStartCall` blocks have passed since the subnet
    was registered. With `wait=True` the chain head is polled until then, followed by `settle_delay` seconds so the
    block's coinbase has run.

    Parameters:
        client: The chain client.
        netuid: The subnet to activate.
        coldkey: The subnet owner coldkey.
        wait: Whether to wait for the start call delay to elapse. If `False` and the delay has not elapsed,
            `StartCallTooEarlyError` is raised without submitting.
        clock: Time source for polling and the settle delay.

    Returns:
        The outcome, or `None` if emission had already started.

    Raises:
        StartCallTooEarlyError: If `wait` is `False` and the start call delay has not elapsed.
        WaitTimeoutError: If the delay does not elapse within `wait_timeout`.
        ReadBackMismatchError: If `FirstEmissionBlockNumber` is still unset afterwards.
    """
    clock = clock or DEFAULT_CLOCK

    if (first_emission := await client.query_subtensor("FirstEmissionBlockNumber", [netuid])) is not None:
        logging.info(
            f"Subnet [blue]{netuid}[/blue] already emits since block [blue]{first_emission}[/blue]."
        )
        return None

    registered_at = await client.query_subtensor("NetworkRegisteredAt", [netuid])
    duration = await client.query_constant("SubtensorModule", "DurationOfStartCall")
    allowed_from = registered_at + duration + 1

    if (current_block := await client.get_current_block()) < allowed_from:
        if not wait:
            raise StartCallTooEarlyError(netuid, allowed_from - current_block)
        logging.info(
            f"Waiting for block [blue]{allowed_from}[/blue] to start subnet [blue]{netuid}[/blue] "
            f"(current block [blue]{current_block}[/blue])."
        )
        await wait_for_block(client, allowed_from, clock=clock)
    await clock.sleep(client.config.settle_delay)

    call = await SubtensorModule(client).start_call(netuid=netuid)
    outcome = await submit_with_retry(client, call, coldkey, clock=clock)

    if await client.query_subtensor("FirstEmissionBlockNumber", [netuid]) is None:
        raise ReadBackMismatchError(
            f"SubtensorModule.FirstEmissionBlockNumber({netuid})", "a block number", None
        )
    return outcome


async def set_subtoken_enabled(
    client: "ChainClient", netuid: int, enabled: bool
) -> Optional[TransactionOutcome]:
    """Enables or disables subtoken (alpha) trading on a subnet."""
    return await ensure_storage_value(
        client,
        "SubtensorModule",
        "SubtokenEnabled",
        [netuid],
        enabled,
        lambda: AdminUtils(client).sudo_set_subtoken_enabled(
            netuid=netuid, subtoken_enabled=enabled
        ),
    )


async def set_network_registration_allowed(
    client: "ChainClient", netuid: int, allowed: bool
) -> Optional[TransactionOutcome]:
    """Allows or forbids neuron registration on a subnet."""
    return await ensure_storage_value(
        client,
        "SubtensorModule",
        "NetworkRegistrationAllowed",
        [netuid],
        allowed,
        lambda: AdminUtils(client).sudo_set_network_registration_allowed(
            netuid=netuid, registration_allowed=allowed
        ),
    )
