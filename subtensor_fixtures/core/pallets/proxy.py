from dataclasses import dataclass
from typing import Optional, TYPE_CHECKING

from .base import CallBuilder as _BasePallet, Call

if TYPE_CHECKING:
    from scalecodec import GenericCall


@dataclass
class Proxy(_BasePallet):
    """Factory class for creating GenericCall objects for Proxy pallet functions."""

    def proxy(
        self,
        real: str,
        force_proxy_type: Optional[str],
        call: "GenericCall",
    ) -> Call:
        """Create a call to execute an operation through a proxy relationship.

        Parameters:
            real: The SS58 address of the real account on whose behalf the call is being made.
            force_proxy_type: The type of proxy to use for the call. If `None`, any proxy type the signer holds for
                the real account can be used.
            call: The inner call to be executed on behalf of the real account.

        Returns:
            GenericCall instance for the `Proxy.proxy` extrinsic.
        """
        return self.create_composed_call(
            real=real,
            force_proxy_type=force_proxy_type,
            call=call,
        )
