from dataclasses import dataclass
from typing import Awaitable, Callable, TYPE_CHECKING

from bittensor.utils import get_caller_name

if TYPE_CHECKING:
    from scalecodec import GenericCall
    from subtensor_fixtures.core.chain import ChainClient


Call = Awaitable["GenericCall"]


@dataclass
class CallBuilder:
    """Base class for creating GenericCall objects for pallet functions.

    Subclasses are named after the pallet and their methods after the pallet function, so each method only passes its
    parameters to `create_composed_call`. Calls are composed by the client and must be awaited.

    Attributes:
        client: The ChainClient used for call composition.
        dynamic_function: If True, allows calls to functions not explicitly defined in the pallet class. Accessing a
            missing method returns a callable composing the pallet function with the same name.
    """

    client: "ChainClient"
    dynamic_function: bool = True

    def create_composed_call(
        self, call_module: str = None, call_function: str = None, **kwargs
    ) -> Call:
        """Create a call to the pallet function.

        Parameters:
            call_module: If not provided, will be determined from the calling class name.
            call_function: If not provided, will be determined from the calling method name.
            **kwargs: Named parameters that will be passed to the function.

        Note:
            The key in kwargs must always match the parameter name in the pallet's function.
        """
        if call_module is None:
            call_module = self.__class__.__name__

        if call_function is None:
            call_function = get_caller_name()

        return self.client.compose_call(
            call_module=call_module,
            call_function=call_function,
            call_params=kwargs,
        )

    def __getattr__(self, name: str) -> Callable[..., Call]:
        # Don't intercept special attributes or if dynamic_function is disabled
        if name.startswith("_") or not self.dynamic_function:
            raise AttributeError(
                f"'{self.__class__.__name__}' object has no attribute '{name}'."
            )

        def _dynamic_call(**kwargs) -> Call:
            return self.create_composed_call(call_function=name, **kwargs)

        return _dynamic_call
