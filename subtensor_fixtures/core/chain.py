"""
The typed chain client used by every fixture helper.

`ChainClient` is a thin adapter over `AsyncSubstrateInterface` exposing only what the fixtures need: storage reads by
key, constants, the current block number, call composition and a single-attempt submit primitive. Retrying and
finality handling live in `subtensor_fixtures.core.submit`.
"""

import asyncio
import ssl
from typing import Any, Optional, TYPE_CHECKING

from async_substrate_interface import AsyncSubstrateInterface
from async_substrate_interface.errors import SubstrateRequestException
from bittensor.utils import format_error_message, get_caller_name
from bittensor.utils.balance import Balance
from bittensor.utils.btlogging import logging
from bittensor_wallet.utils import SS58_FORMAT
from websockets.exceptions import ConnectionClosed

from subtensor_fixtures.core import settings
from subtensor_fixtures.core.config import FixtureConfig
from subtensor_fixtures.core.types import OutcomeStatus, TransactionOutcome

if TYPE_CHECKING:
    from bittensor_wallet import Keypair
    from scalecodec.types import GenericCall

TRANSIENT_ERRORS = (
    SubstrateRequestException,
    ConnectionError,
    ConnectionClosed,
    TimeoutError,
    asyncio.TimeoutError,
)


class ChainClient:
    """Connection to one subtensor node plus the fixture configuration used against it.

    Example:

        async with ChainClient("ws://127.0.0.1:9944") as client:
            await set_tempo(client, netuid=1, tempo=10)
    """

    def __init__(
        self,
        chain_endpoint: Optional[str] = None,
        config: Optional[FixtureConfig] = None,
        substrate: Optional[AsyncSubstrateInterface] = None,
        mock: bool = False,
    ):
        """Initializes a ChainClient.

        Parameters:
            chain_endpoint: Websocket endpoint of the node. Defaults to `config.chain_endpoint`, then to
                `settings.DEFAULTS.subtensor.chain_endpoint`.
            config: Fixture settings including the administrator keypair. Defaults to `FixtureConfig()`.
            substrate: A ready substrate interface to use instead of creating one.
            mock: Whether this is a mock instance. FOR TESTING ONLY.
        """
        self.config = config or FixtureConfig()
        self.chain_endpoint = (
            chain_endpoint
            or self.config.chain_endpoint
            or settings.DEFAULTS.subtensor.chain_endpoint
        )
        self.substrate = substrate or AsyncSubstrateInterface(
            url=self.chain_endpoint,
            ss58_format=SS58_FORMAT,
            type_registry=settings.TYPE_REGISTRY,
            use_remote_preset=True,
            chain_name="Bittensor",
            _mock=mock,
        )

    def __str__(self):
        return f"ChainClient<{self.chain_endpoint}>"

    def __repr__(self):
        return self.__str__()

    @property
    def admin(self) -> "Keypair":
        return self.config.admin

    async def initialize(self) -> "ChainClient":
        """Establishes connection to the node."""
        logging.info(
            f"[magenta]Connecting to Substrate:[/magenta] [blue]{self}[/blue][magenta]...[/magenta]"
        )
        try:
            await self.substrate.initialize()
            return self
        except TimeoutError:
            logging.error(
                f"[red]Error[/red]: Timeout occurred connecting to substrate. Verify the endpoint: {self}"
            )
            raise ConnectionError
        except (ConnectionRefusedError, ssl.SSLError) as error:
            logging.error(
                f"[red]Error[/red]: Connection refused when connecting to substrate. "
                f"Verify the endpoint: {self}. Error: {error}"
            )
            raise ConnectionError

    async def close(self):
        """Closes the connection to the node."""
        if self.substrate:
            await self.substrate.close()

    async def __aenter__(self):
        return await self.initialize()

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()

    # Queries ==========================================================================================================

    async def query(
        self,
        module: str,
        name: str,
        params: Optional[list] = None,
        block_hash: Optional[str] = None,
    ) -> Any:
        """Reads a storage item and returns its decoded value.

        Parameters:
            module: The pallet holding the storage item (e.g. "SubtensorModule", "System").
            name: The storage function (e.g. "Tempo").
            params: Storage keys, for maps.
            block_hash: Block to read at. Defaults to the chain head.

        Returns:
            The decoded value, or `None` for an absent optional item.
        """
        result = await self.substrate.query(
            module=module,
            storage_function=name,
            params=params,
            block_hash=block_hash,
        )
        return getattr(result, "value", result)

    async def query_subtensor(
        self,
        name: str,
        params: Optional[list] = None,
        block_hash: Optional[str] = None,
    ) -> Any:
        """Reads a storage item of the SubtensorModule pallet."""
        return await self.query("SubtensorModule", name, params, block_hash)

    async def query_constant(self, module_name: str, constant_name: str) -> Any:
        """Returns the decoded value of a runtime constant (e.g. `SubtensorModule.DurationOfStartCall`)."""
        result = await self.substrate.get_constant(
            module_name=module_name,
            constant_name=constant_name,
        )
        return getattr(result, "value", result)

    async def get_current_block(self) -> int:
        """Returns the current block number."""
        return await self.substrate.get_block_number(None)

    async def get_free_balance(self, ss58_address: str) -> Balance:
        """Returns the free balance of an account."""
        account = await self.query("System", "Account", [ss58_address])
        free = (account or {}).get("data", {}).get("free", 0)
        return Balance.from_rao(free)

    # Extrinsics =======================================================================================================

    async def compose_call(
        self,
        call_module: str,
        call_function: str,
        call_params: dict[str, Any],
    ) -> "GenericCall":
        """Composes a GenericCall against the node metadata."""
        logging.debug(
            f"Composing GenericCall -> {call_module}.{call_function} with params: {call_params}."
        )
        return await self.substrate.compose_call(
            call_module=call_module,
            call_function=call_function,
            call_params=call_params,
        )

    async def submit(
        self,
        call: "GenericCall",
        signer: "Keypair",
        wait_for_inclusion: bool = True,
        wait_for_finalization: bool = True,
        calling_function: Optional[str] = None,
    ) -> TransactionOutcome:
        """Signs `call` with `signer`, submits it once and waits for the requested stage.

        A fresh nonce and signature are produced on each invocation.

        Parameters:
            call: A prepared call.
            signer: The keypair that signs and pays for the extrinsic.
            wait_for_inclusion: Whether to wait until the extrinsic is included in a block.
            wait_for_finalization: Whether to wait until that block is finalized.
            calling_function: Name recorded in the outcome. Defaults to the caller's name.

        Returns:
            The outcome. RPC-level rejections and connection losses, including those while the receipt is read, are
            reported as `SUBMISSION_FAILED` rather than raised, so the caller can decide whether to retry.
        """
        outcome = TransactionOutcome(
            extrinsic_function=calling_function or get_caller_name()
        )
        extrinsic_data: dict[str, Any] = {"call": call, "keypair": signer}
        if self.config.period is not None:
            extrinsic_data["era"] = {"period": self.config.period}

        try:
            outcome.extrinsic = await self.substrate.create_signed_extrinsic(
                **extrinsic_data
            )
            response = await self.substrate.submit_extrinsic(
                extrinsic=outcome.extrinsic,
                wait_for_inclusion=wait_for_inclusion,
                wait_for_finalization=wait_for_finalization,
            )

            if not wait_for_finalization and not wait_for_inclusion:
                outcome.message = "Not waiting for finalization or inclusion."
                logging.debug(outcome.message)
                return outcome

            outcome.extrinsic_receipt = response
            outcome.block_hash = getattr(response, "block_hash", None)

            if await response.is_success:
                outcome.fee = Balance.from_rao(await response.total_fee_amount)
                outcome.message = "Success"
                return outcome

            error_message = await response.error_message
        except TRANSIENT_ERRORS as error:
            outcome.status = OutcomeStatus.SUBMISSION_FAILED
            outcome.message = describe_error(error)
            outcome.error = error
            return outcome

        outcome.status = OutcomeStatus.FINALIZED_FAILURE
        outcome.message = format_error_message(error_message)
        outcome.error = error_message
        return outcome

    async def decode_dispatch_error(
        self, dispatch_error: Any, block_hash: Optional[str] = None
    ) -> dict:
        """Decodes a raw `DispatchError` (e.g. the `Err` of a `Sudo.Sudid` result) into a `{type, name, docs}` dict.

        Module errors are resolved against the runtime metadata at `block_hash`.
        """
        if isinstance(dispatch_error, dict) and "Module" in dispatch_error:
            module = dispatch_error["Module"]
            if isinstance(module, (tuple, list)):
                module_index, error_index = module[0], module[1]
            else:
                module_index, error_index = module["index"], module["error"]
            if isinstance(error_index, str):
                # first byte of the [u8; 4] error field
                error_index = int(error_index[2:4], 16)
            runtime = await self.substrate.init_runtime(block_hash=block_hash)
            module_error = runtime.metadata.get_module_error(
                module_index=module_index, error_index=error_index
            )
            return {
                "type": "Module",
                "name": module_error.name,
                "docs": module_error.docs,
            }

        name = (
            dispatch_error
            if isinstance(dispatch_error, str)
            else next(iter(dispatch_error or {}), "Other")
        )
        return {"type": "System", "name": name, "docs": [f"{name} error."]}


def describe_error(error: BaseException) -> str:
    """Human-readable message of an error raised before an extrinsic's outcome is known."""
    if isinstance(error, SubstrateRequestException):
        if error.args and isinstance(error.args[0], dict):
            return format_error_message(error.args[0])
        if all(isinstance(arg, str) for arg in error.args):
            return format_error_message(error)
    return f"{type(error).__name__}: {error}"
