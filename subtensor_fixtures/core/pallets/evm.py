from dataclasses import dataclass

from .base import CallBuilder as _BasePallet, Call


@dataclass
class EVM(_BasePallet):
    """Factory class for creating GenericCall objects for EVM pallet functions."""

    def disable_whitelist(self, disabled: bool) -> Call:
        """Returns GenericCall instance for EVM function disable_whitelist.

        Root only; wrap in `Sudo.sudo`. While disabled, any account may deploy contracts.
        """
        return self.create_composed_call(disabled=disabled)
