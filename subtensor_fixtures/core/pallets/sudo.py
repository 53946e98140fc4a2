from dataclasses import dataclass
from typing import TYPE_CHECKING

from .base import CallBuilder, Call

if TYPE_CHECKING:
    from scalecodec import GenericCall


@dataclass
class Sudo(CallBuilder):
    """Factory class for creating GenericCall objects for Sudo pallet functions.

    Example:
        inner_call = await AdminUtils(client).sudo_set_tempo(netuid=1, tempo=10)
        sudo_call = await Sudo(client).sudo(call=inner_call)
        outcome = await submit_with_retry(client, sudo_call, client.admin)
    """

    def sudo(
        self,
        call: "GenericCall",
    ) -> Call:
        """Returns GenericCall instance for Sudo.sudo.

        Parameters:
            call: The call to be dispatched with Root origin.

        Returns:
            GenericCall instance.
        """
        return self.create_composed_call(call=call)
