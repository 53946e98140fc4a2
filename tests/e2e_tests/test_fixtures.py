import pytest
from bittensor.utils.balance import Balance
from bittensor.utils.btlogging import logging

from subtensor_fixtures import extrinsics


@pytest.mark.asyncio
async def test_subnet_lifecycle(client, bob, bob_hotkey, charlie_hotkey):
    """
    Tests:
    - Funding an owner coldkey
    - Registering a subnet and reading its candidates
    - Idempotent hyperparameter updates
    - Burned registration of a neuron
    - Starting the subnet emission
    """
    async with client:
        await extrinsics.force_set_balance(client, bob.ss58_address, Balance.from_tao(10_000))

        registration = await extrinsics.add_new_subnetwork(client, bob_hotkey, bob)
        netuid = registration.netuid
        logging.console.info(f"Registered subnet {netuid}, candidates {registration.candidates}.")
        assert await client.query_subtensor("SubnetOwner", [netuid]) == bob.ss58_address

        assert (await extrinsics.set_tempo(client, netuid, 10)).success
        assert await extrinsics.set_tempo(client, netuid, 10) is None
        await extrinsics.set_network_registration_allowed(client, netuid, True)
        await extrinsics.set_target_registrations_per_interval(client, netuid)

        uid = await extrinsics.burned_register(client, netuid, charlie_hotkey.ss58_address, bob)
        assert uid is not None
        assert (
            await extrinsics.burned_register(client, netuid, charlie_hotkey.ss58_address, bob)
            == uid
        )

        await extrinsics.start_call(client, netuid, bob)
        assert await client.query_subtensor("FirstEmissionBlockNumber", [netuid]) is not None


@pytest.mark.asyncio
async def test_chain_wide_parameters(client):
    """
    Tests:
    - Transaction rate limit round trip
    - EVM whitelist switch
    """
    async with client:
        previous = await client.query_subtensor("TxRateLimit")

        await extrinsics.set_tx_rate_limit(client, 0)
        assert await client.query_subtensor("TxRateLimit") == 0

        await extrinsics.set_tx_rate_limit(client, previous)
        assert await client.query_subtensor("TxRateLimit") == previous

        await extrinsics.disable_whitelist_check(client, True)
        assert await client.query("EVM", "DisableWhitelistCheck") is True
