"""
Idempotent setters for chain and subnet hyperparameters.

Every setter reads the current value first and submits nothing when it already matches. Otherwise the update is sent
through the sudo envelope and the storage item is read back to confirm it.
"""

from typing import Optional, TYPE_CHECKING

from subtensor_fixtures.core import settings
from subtensor_fixtures.core.pallets import AdminUtils, SubtensorModule
from subtensor_fixtures.core.types import TransactionOutcome
from subtensor_fixtures.extrinsics.utils import ensure_storage_value

if TYPE_CHECKING:
    from subtensor_fixtures.core.chain import ChainClient


def _check_u16(name: str, value: int):
    if not 0 <= value <= settings.U16_MAX:
        raise ValueError(f"`{name}` must fit in u16, got {value}.")


async def set_commit_reveal_weights_enabled(
    client: "ChainClient", netuid: int, enabled: bool
) -> Optional[TransactionOutcome]:
    """Enables or disables commit-reveal weights on a subnet."""
    return await ensure_storage_value(
        client,
        "SubtensorModule",
        "CommitRevealWeightsEnabled",
        [netuid],
        enabled,
        lambda: AdminUtils(client).sudo_set_commit_reveal_weights_enabled(
            netuid=netuid, enabled=enabled
        ),
    )


async def set_weights_set_rate_limit(
    client: "ChainClient", netuid: int, rate_limit: int
) -> Optional[TransactionOutcome]:
    """Sets the number of blocks a validator must wait between two weight updates."""
    return await ensure_storage_value(
        client,
        "SubtensorModule",
        "WeightsSetRateLimit",
        [netuid],
        rate_limit,
        lambda: AdminUtils(client).sudo_set_weights_set_rate_limit(
            netuid=netuid, weights_set_rate_limit=rate_limit
        ),
    )


async def set_tempo(
    client: "ChainClient", netuid: int, tempo: int
) -> Optional[TransactionOutcome]:
    """Sets the epoch length of a subnet.

    Parameters:
        client: The chain client.
        netuid: The subnet.
        tempo: Blocks per epoch. Stored as u16 on chain.

    Returns:
        The outcome, or `None` if the subnet already had this tempo.

    Raises:
        ValueError: If `tempo` does not fit in u16.
    """
    _check_u16("tempo", tempo)
    return await ensure_storage_value(
        client,
        "SubtensorModule",
        "Tempo",
        [netuid],
        tempo,
        lambda: AdminUtils(client).sudo_set_tempo(netuid=netuid, tempo=tempo),
    )


async def set_commit_reveal_weights_interval(
    client: "ChainClient", netuid: int, interval: int
) -> Optional[TransactionOutcome]:
    """Sets the reveal period, in epochs, of commit-reveal weights (`RevealPeriodEpochs`)."""
    return await ensure_storage_value(
        client,
        "SubtensorModule",
        "RevealPeriodEpochs",
        [netuid],
        interval,
        lambda: AdminUtils(client).sudo_set_commit_reveal_weights_interval(
            netuid=netuid, interval=interval
        ),
    )


async def set_tx_rate_limit(
    client: "ChainClient", rate_limit: int
) -> Optional[TransactionOutcome]:
    """Sets the global transaction rate limit. `0` disables it."""
    return await ensure_storage_value(
        client,
        "SubtensorModule",
        "TxRateLimit",
        None,
        rate_limit,
        lambda: AdminUtils(client).sudo_set_tx_rate_limit(tx_rate_limit=rate_limit),
    )


async def set_network_rate_limit(
    client: "ChainClient", rate_limit: int
) -> Optional[TransactionOutcome]:
    """Sets the number of blocks required between two subnet registrations. `0` disables it."""
    return await ensure_storage_value(
        client,
        "SubtensorModule",
        "NetworkRateLimit",
        None,
        rate_limit,
        lambda: AdminUtils(client).sudo_set_network_rate_limit(rate_limit=rate_limit),
    )


async def set_max_allowed_validators(
    client: "ChainClient", netuid: int, max_allowed_validators: int
) -> Optional[TransactionOutcome]:
    _check_u16("max_allowed_validators", max_allowed_validators)
    return await ensure_storage_value(
        client,
        "SubtensorModule",
        "MaxAllowedValidators",
        [netuid],
        max_allowed_validators,
        lambda: AdminUtils(client).sudo_set_max_allowed_validators(
            netuid=netuid, max_allowed_validators=max_allowed_validators
        ),
    )


async def set_subnet_owner_cut(
    client: "ChainClient", subnet_owner_cut: int
) -> Optional[TransactionOutcome]:
    """Sets the share of emission paid to subnet owners, normalized to u16::MAX."""
    _check_u16("subnet_owner_cut", subnet_owner_cut)
    return await ensure_storage_value(
        client,
        "SubtensorModule",
        "SubnetOwnerCut",
        None,
        subnet_owner_cut,
        lambda: AdminUtils(client).sudo_set_subnet_owner_cut(
            subnet_owner_cut=subnet_owner_cut
        ),
    )


async def set_activity_cutoff(
    client: "ChainClient", netuid: int, activity_cutoff: int
) -> Optional[TransactionOutcome]:
    _check_u16("activity_cutoff", activity_cutoff)
    return await ensure_storage_value(
        client,
        "SubtensorModule",
        "ActivityCutoff",
        [netuid],
        activity_cutoff,
        lambda: AdminUtils(client).sudo_set_activity_cutoff(
            netuid=netuid, activity_cutoff=activity_cutoff
        ),
    )


async def set_max_allowed_uids(
    client: "ChainClient", netuid: int, max_allowed_uids: int
) -> Optional[TransactionOutcome]:
    _check_u16("max_allowed_uids", max_allowed_uids)
    return await ensure_storage_value(
        client,
        "SubtensorModule",
        "MaxAllowedUids",
        [netuid],
        max_allowed_uids,
        lambda: AdminUtils(client).sudo_set_max_allowed_uids(
            netuid=netuid, max_allowed_uids=max_allowed_uids
        ),
    )


async def set_min_delegate_take(
    client: "ChainClient", take: int
) -> Optional[TransactionOutcome]:
    """Sets the minimum delegate take, normalized to u16::MAX."""
    _check_u16("take", take)
    return await ensure_storage_value(
        client,
        "SubtensorModule",
        "MinDelegateTake",
        None,
        take,
        lambda: AdminUtils(client).sudo_set_min_delegate_take(take=take),
    )


async def set_max_childkey_take(
    client: "ChainClient", take: int
) -> Optional[TransactionOutcome]:
    """Sets the maximum childkey take, normalized to u16::MAX.

    This root call lives in SubtensorModule rather than AdminUtils.
    """
    _check_u16("take", take)
    return await ensure_storage_value(
        client,
        "SubtensorModule",
        "MaxChildkeyTake",
        None,
        take,
        lambda: SubtensorModule(client).sudo_set_max_childkey_take(take=take),
    )


async def set_target_registrations_per_interval(
    client: "ChainClient",
    netuid: int,
    target: int = settings.DEFAULT_TARGET_REGISTRATIONS_PER_INTERVAL,
) -> Optional[TransactionOutcome]:
    """Sets how many registrations a subnet targets per adjustment interval.

    The default is high enough that registering many neurons in a test never hits the per-interval limit.
    """
    _check_u16("target", target)
    return await ensure_storage_value(
        client,
        "SubtensorModule",
        "TargetRegistrationsPerInterval",
        [netuid],
        target,
        lambda: AdminUtils(client).sudo_set_target_registrations_per_interval(
            netuid=netuid, target_registrations_per_interval=target
        ),
    )
