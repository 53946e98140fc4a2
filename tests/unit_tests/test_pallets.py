import pytest

from subtensor_fixtures.core.pallets import (
    AdminUtils,
    Balances,
    EVM,
    Proxy,
    SubtensorModule,
    Sudo,
)


@pytest.fixture
def composer(mocker):
    client = mocker.Mock()
    client.compose_call = mocker.AsyncMock(return_value="composed_call")
    return client


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "pallet, function, params",
    [
        (AdminUtils, "sudo_set_tempo", {"netuid": 1, "tempo": 10}),
        (AdminUtils, "sudo_set_network_rate_limit", {"rate_limit": 0}),
        (AdminUtils, "sudo_set_evm_chain_id", {"chain_id": 945}),
        (
            AdminUtils,
            "sudo_set_target_registrations_per_interval",
            {"netuid": 1, "target_registrations_per_interval": 1000},
        ),
        (Balances, "force_set_balance", {"who": "5Fake", "new_free": 10}),
        (EVM, "disable_whitelist", {"disabled": True}),
        (SubtensorModule, "register_network", {"hotkey": "5Hot"}),
        (SubtensorModule, "burned_register", {"netuid": 2, "hotkey": "5Hot"}),
        (SubtensorModule, "start_call", {"netuid": 2}),
        (
            SubtensorModule,
            "add_stake",
            {"netuid": 2, "hotkey": "5Hot", "amount_staked": 1_000_000_000},
        ),
        (SubtensorModule, "sudo_set_max_childkey_take", {"take": 100}),
        (
            SubtensorModule,
            "swap_coldkey",
            {"old_coldkey": "5Old", "new_coldkey": "5New", "swap_cost": 10},
        ),
        (Sudo, "sudo", {"call": "inner_call"}),
        (Proxy, "proxy", {"real": "5Real", "force_proxy_type": None, "call": "inner_call"}),
    ],
)
async def test_pallet_functions_compose_calls(composer, pallet, function, params):
    """Tests each builder composes the pallet function named after it."""
    # Call
    result = await getattr(pallet(composer), function)(**params)

    # Asserts
    composer.compose_call.assert_awaited_once_with(
        call_module=pallet.__name__,
        call_function=function,
        call_params=params,
    )
    assert result == "composed_call"


@pytest.mark.asyncio
async def test_dynamic_function(composer):
    # Call
    await AdminUtils(composer).sudo_set_kappa(netuid=1, kappa=10)

    # Asserts
    composer.compose_call.assert_awaited_once_with(
        call_module="AdminUtils",
        call_function="sudo_set_kappa",
        call_params={"netuid": 1, "kappa": 10},
    )


def test_dynamic_function_disabled(composer):
    with pytest.raises(AttributeError):
        _ = AdminUtils(composer, dynamic_function=False).sudo_set_kappa


def test_private_attributes_are_not_dynamic(composer):
    with pytest.raises(AttributeError):
        _ = AdminUtils(composer)._private
