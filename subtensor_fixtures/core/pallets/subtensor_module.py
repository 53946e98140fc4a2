from dataclasses import dataclass

from .base import CallBuilder as _BasePallet, Call


@dataclass
class SubtensorModule(_BasePallet):
    """Factory class for creating GenericCall objects for SubtensorModule pallet functions.

    Example:
        call = await SubtensorModule(client).start_call(netuid=2)
        outcome = await submit_with_retry(client, call, owner_coldkey)
    """

    def add_stake(self, netuid: int, hotkey: str, amount_staked: int) -> Call:
        """Returns GenericCall instance for SubtensorModule function add_stake.

        Parameters:
            netuid: The subnet to stake on.
            hotkey: The hotkey SS58 address receiving the stake.
            amount_staked: Amount of TAO to stake, in RAO.

        Returns:
            GenericCall instance.
        """
        return self.create_composed_call(
            netuid=netuid,
            hotkey=hotkey,
            amount_staked=amount_staked,
        )

    def become_delegate(self, hotkey: str) -> Call:
        """Returns GenericCall instance for SubtensorModule function become_delegate."""
        return self.create_composed_call(hotkey=hotkey)

    def burned_register(self, netuid: int, hotkey: str) -> Call:
        """Returns GenericCall instance for SubtensorModule function burned_register.

        Parameters:
            netuid: The subnet to register in.
            hotkey: The hotkey SS58 address to register. The signing coldkey pays the burn.

        Returns:
            GenericCall instance.
        """
        return self.create_composed_call(netuid=netuid, hotkey=hotkey)

    def register_network(self, hotkey: str) -> Call:
        """Returns GenericCall instance for SubtensorModule function register_network.

        Parameters:
            hotkey: The hotkey SS58 address of the subnet owner. The signing coldkey pays the lock cost.

        Returns:
            GenericCall instance.
        """
        return self.create_composed_call(hotkey=hotkey)

    def remove_stake(self, netuid: int, hotkey: str, amount_unstaked: int) -> Call:
        """Returns GenericCall instance for SubtensorModule function remove_stake.

        Parameters:
            netuid: The subnet to unstake from.
            hotkey: The hotkey SS58 address holding the stake.
            amount_unstaked: Amount of alpha to unstake, in RAO.

        Returns:
            GenericCall instance.
        """
        return self.create_composed_call(
            netuid=netuid,
            hotkey=hotkey,
            amount_unstaked=amount_unstaked,
        )

    def root_register(self, hotkey: str) -> Call:
        """Returns GenericCall instance for SubtensorModule function root_register."""
        return self.create_composed_call(hotkey=hotkey)

    def set_weights(
        self,
        netuid: int,
        dests: list[int],
        weights: list[int],
        version_key: int,
    ) -> Call:
        """Returns GenericCall instance for SubtensorModule function set_weights.

        Parameters:
            netuid: The subnet the weights apply to.
            dests: Destination uids (u16).
            weights: Weights for each destination uid, normalized to u16::MAX.
            version_key: The subnet's weights version key.

        Returns:
            GenericCall instance.
        """
        return self.create_composed_call(
            netuid=netuid,
            dests=dests,
            weights=weights,
            version_key=version_key,
        )

    def start_call(self, netuid: int) -> Call:
        """Returns GenericCall instance for SubtensorModule function start_call.

        Parameters:
            netuid: The subnet whose emission should start. Must be signed by the subnet owner coldkey.

        Returns:
            GenericCall instance.
        """
        return self.create_composed_call(netuid=netuid)

    def sudo_set_max_childkey_take(self, take: int) -> Call:
        """Returns GenericCall instance for SubtensorModule function sudo_set_max_childkey_take."""
        return self.create_composed_call(take=take)

    def swap_coldkey(self, old_coldkey: str, new_coldkey: str, swap_cost: int) -> Call:
        """Returns GenericCall instance for SubtensorModule function swap_coldkey.

        Root only; wrap in `Sudo.sudo`.

        Parameters:
            old_coldkey: SS58 address of the coldkey being replaced.
            new_coldkey: SS58 address of the replacement coldkey.
            swap_cost: Amount charged to the old coldkey, in RAO.

        Returns:
            GenericCall instance.
        """
        return self.create_composed_call(
            old_coldkey=old_coldkey,
            new_coldkey=new_coldkey,
            swap_cost=swap_cost,
        )
