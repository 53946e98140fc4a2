from dataclasses import dataclass

from .base import CallBuilder as _BasePallet, Call


@dataclass
class Balances(_BasePallet):
    """Factory class for creating GenericCall objects for Balances pallet functions."""

    def force_set_balance(self, who: str, new_free: int) -> Call:
        """Returns GenericCall instance for Balances function force_set_balance.

        Root only; wrap in `Sudo.sudo`.

        Parameters:
            who: The SS58 address of the account.
            new_free: The new free balance, in RAO.

        Returns:
            GenericCall instance.
        """
        return self.create_composed_call(who=who, new_free=new_free)
