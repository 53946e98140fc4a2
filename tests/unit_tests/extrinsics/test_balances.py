import pytest
from bittensor.utils.balance import Balance

from subtensor_fixtures.core.errors import ReadBackMismatchError
from subtensor_fixtures.extrinsics import balances
from subtensor_fixtures.utils import h160_to_ss58

ETH_ADDRESS = "0x709615c655B24919F48B365D292521EFcC74467B"


@pytest.mark.asyncio
async def test_force_set_balance_default_amount(chain, coldkey, admin):
    # Call
    outcome = await balances.force_set_balance(chain, coldkey.ss58_address)

    # Asserts
    assert outcome.success
    assert await chain.get_free_balance(coldkey.ss58_address) == Balance.from_tao(1e8)
    [submission] = chain.submissions
    assert submission.signer.ss58_address == admin.ss58_address
    inner = submission.call.call_params["call"]
    assert (inner.call_module, inner.call_function) == ("Balances", "force_set_balance")
    assert inner.call_params == {
        "who": coldkey.ss58_address,
        "new_free": Balance.from_tao(1e8).rao,
    }


@pytest.mark.asyncio
async def test_force_set_balance_skips_current_amount(chain, coldkey):
    # Preps
    chain.set_free_balance(coldkey.ss58_address, Balance.from_tao(5).rao)

    # Call
    result = await balances.force_set_balance(chain, coldkey.ss58_address, Balance.from_tao(5))

    # Asserts
    assert result is None
    assert chain.attempts == 0


@pytest.mark.asyncio
async def test_force_set_balance_of_administrator(chain, admin):
    """Tests the administrator pays the fee of its own funding, so its balance is not read back."""
    # Preps
    chain.fee_rao = 1_000

    # Call
    outcome = await balances.force_set_balance(chain, admin.ss58_address, Balance.from_tao(10))

    # Asserts
    assert outcome.success
    assert (await chain.get_free_balance(admin.ss58_address)).rao == Balance.from_tao(10).rao - 1_000


@pytest.mark.asyncio
async def test_force_set_balance_read_back_mismatch(chain, coldkey):
    # Preps
    chain.ignore_writes.add("force_set_balance")

    # Call
    with pytest.raises(ReadBackMismatchError) as error:
        await balances.force_set_balance(chain, coldkey.ss58_address, Balance.from_tao(3))

    # Asserts
    assert error.value.actual == Balance.from_rao(0)


@pytest.mark.asyncio
async def test_force_set_balance_to_eth_address(chain):
    # Call
    await balances.force_set_balance_to_eth_address(chain, ETH_ADDRESS, Balance.from_tao(2))

    # Asserts
    mirror = h160_to_ss58(ETH_ADDRESS)
    assert (await chain.get_free_balance(mirror)).rao == Balance.from_tao(2).rao


@pytest.mark.asyncio
async def test_force_set_balance_to_invalid_eth_address(chain):
    with pytest.raises(ValueError):
        await balances.force_set_balance_to_eth_address(chain, "0x1234")
    assert chain.attempts == 0
