"""
WARNING: This module composes administrative calls that should ONLY be used against local development and test chains.
They modify core network parameters and must be wrapped in `Sudo.sudo` (signed by the sudo key) to dispatch.
"""

from dataclasses import dataclass

from .base import CallBuilder as _BasePallet, Call


@dataclass
class AdminUtils(_BasePallet):
    """Factory class for creating GenericCall objects for AdminUtils pallet functions.

    Example:
        call = await AdminUtils(client).sudo_set_tempo(netuid=1, tempo=10)
        sudo_call = await Sudo(client).sudo(call=call)
    """

    def sudo_set_activity_cutoff(self, netuid: int, activity_cutoff: int) -> Call:
        """Returns GenericCall instance for AdminUtils function sudo_set_activity_cutoff.

        Parameters:
            netuid: The network identifier.
            activity_cutoff: Blocks of inactivity after which a validator loses its permit (u16).

        Returns:
            GenericCall instance.
        """
        return self.create_composed_call(
            netuid=netuid,
            activity_cutoff=activity_cutoff,
        )

    def sudo_set_commit_reveal_weights_enabled(self, netuid: int, enabled: bool) -> Call:
        """Returns GenericCall instance for AdminUtils function sudo_set_commit_reveal_weights_enabled.

        Parameters:
            netuid: The network identifier.
            enabled: Whether weights must be committed and revealed instead of set directly.

        Returns:
            GenericCall instance.
        """
        return self.create_composed_call(netuid=netuid, enabled=enabled)

    def sudo_set_commit_reveal_weights_interval(self, netuid: int, interval: int) -> Call:
        """Returns GenericCall instance for AdminUtils function sudo_set_commit_reveal_weights_interval.

        Parameters:
            netuid: The network identifier.
            interval: Reveal period in epochs (u64).

        Returns:
            GenericCall instance.
        """
        return self.create_composed_call(netuid=netuid, interval=interval)

    def sudo_set_evm_chain_id(self, chain_id: int) -> Call:
        """Returns GenericCall instance for AdminUtils function sudo_set_evm_chain_id."""
        return self.create_composed_call(chain_id=chain_id)

    def sudo_set_max_allowed_uids(self, netuid: int, max_allowed_uids: int) -> Call:
        """Returns GenericCall instance for AdminUtils function sudo_set_max_allowed_uids.

        Parameters:
            netuid: The network identifier.
            max_allowed_uids: Maximum number of neurons in the subnet (u16).

        Returns:
            GenericCall instance.
        """
        return self.create_composed_call(
            netuid=netuid,
            max_allowed_uids=max_allowed_uids,
        )

    def sudo_set_max_allowed_validators(
        self, netuid: int, max_allowed_validators: int
    ) -> Call:
        """Returns GenericCall instance for AdminUtils function sudo_set_max_allowed_validators.

        Parameters:
            netuid: The network identifier.
            max_allowed_validators: Maximum number of validator permits in the subnet (u16).

        Returns:
            GenericCall instance.
        """
        return self.create_composed_call(
            netuid=netuid,
            max_allowed_validators=max_allowed_validators,
        )

    def sudo_set_min_delegate_take(self, take: int) -> Call:
        """Returns GenericCall instance for AdminUtils function sudo_set_min_delegate_take."""
        return self.create_composed_call(take=take)

    def sudo_set_network_rate_limit(self, rate_limit: int) -> Call:
        """Returns GenericCall instance for AdminUtils function sudo_set_network_rate_limit.

        Parameters:
            rate_limit: Blocks required between two subnet registrations (u64).

        Returns:
            GenericCall instance.
        """
        return self.create_composed_call(rate_limit=rate_limit)

    def sudo_set_network_registration_allowed(
        self, netuid: int, registration_allowed: bool
    ) -> Call:
        """Returns GenericCall instance for AdminUtils function sudo_set_network_registration_allowed."""
        return self.create_composed_call(
            netuid=netuid,
            registration_allowed=registration_allowed,
        )

    def sudo_set_subnet_owner_cut(self, subnet_owner_cut: int) -> Call:
        """Returns GenericCall instance for AdminUtils function sudo_set_subnet_owner_cut.

        Parameters:
            subnet_owner_cut: Share of emission paid to subnet owners, normalized to u16::MAX.

        Returns:
            GenericCall instance.
        """
        return self.create_composed_call(subnet_owner_cut=subnet_owner_cut)

    def sudo_set_subtoken_enabled(self, netuid: int, subtoken_enabled: bool) -> Call:
        """Returns GenericCall instance for AdminUtils function sudo_set_subtoken_enabled."""
        return self.create_composed_call(
            netuid=netuid,
            subtoken_enabled=subtoken_enabled,
        )

    def sudo_set_target_registrations_per_interval(
        self, netuid: int, target_registrations_per_interval: int
    ) -> Call:
        """Returns GenericCall instance for AdminUtils function sudo_set_target_registrations_per_interval.

        Parameters:
            netuid: The network identifier.
            target_registrations_per_interval: Registrations targeted per adjustment interval (u16).

        Returns:
            GenericCall instance.
        """
        return self.create_composed_call(
            netuid=netuid,
            target_registrations_per_interval=target_registrations_per_interval,
        )

    def sudo_set_tempo(self, netuid: int, tempo: int) -> Call:
        """Returns GenericCall instance for AdminUtils function sudo_set_tempo.

        Parameters:
            netuid: The network identifier.
            tempo: Blocks per epoch (u16).

        Returns:
            GenericCall instance.
        """
        return self.create_composed_call(netuid=netuid, tempo=tempo)

    def sudo_set_tx_rate_limit(self, tx_rate_limit: int) -> Call:
        """Returns GenericCall instance for AdminUtils function sudo_set_tx_rate_limit.

        Parameters:
            tx_rate_limit: Blocks required between two rate limited transactions of one key (u64).

        Returns:
            GenericCall instance.
        """
        return self.create_composed_call(tx_rate_limit=tx_rate_limit)

    def sudo_set_weights_set_rate_limit(
        self, netuid: int, weights_set_rate_limit: int
    ) -> Call:
        """Returns GenericCall instance for AdminUtils function sudo_set_weights_set_rate_limit.

        Parameters:
            netuid: The network identifier.
            weights_set_rate_limit: Blocks required between two weight updates of one validator (u64).

        Returns:
            GenericCall instance.
        """
        return self.create_composed_call(
            netuid=netuid,
            weights_set_rate_limit=weights_set_rate_limit,
        )
