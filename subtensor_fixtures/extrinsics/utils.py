"""Module with helper functions shared by the call-site fixtures."""

from typing import Any, Awaitable, Callable, Optional, TYPE_CHECKING

from bittensor.utils import format_error_message, get_caller_name
from bittensor.utils.btlogging import logging

from subtensor_fixtures.core.errors import ReadBackMismatchError
from subtensor_fixtures.core.pallets import Sudo
from subtensor_fixtures.core.submit import raise_for_outcome, submit_with_retry
from subtensor_fixtures.core.types import OutcomeStatus, TransactionOutcome

if TYPE_CHECKING:
    from bittensor_wallet import Keypair
    from scalecodec.types import GenericCall
    from subtensor_fixtures.core.chain import ChainClient


ComposeCall = Callable[[], Awaitable["GenericCall"]]


async def sudo_call(
    client: "ChainClient",
    call: "GenericCall",
    calling_function: Optional[str] = None,
) -> TransactionOutcome:
    """Wraps `call` in `Sudo.sudo` and submits it signed by the administrator of `client`.

    Parameters:
        client: The chain client. Its `config.admin` keypair signs the envelope.
        call: The privileged call.
        calling_function: Name recorded in the outcome and logs.

    Returns:
        The successful outcome.

    Raises:
        ExtrinsicFailedError: The envelope or the wrapped call failed on chain.
    """
    envelope = await Sudo(client).sudo(call=call)
    outcome = await submit_with_retry(
        client,
        envelope,
        client.admin,
        calling_function=calling_function or get_caller_name(),
    )

    if (error := await get_sudo_error(client, outcome)) is not None:
        outcome.status = OutcomeStatus.FINALIZED_FAILURE
        outcome.message = format_error_message(error)
        outcome.error = error
        outcome.with_log("error")
        raise_for_outcome(outcome)
    return outcome


async def get_sudo_error(
    client: "ChainClient", outcome: TransactionOutcome
) -> Optional[dict]:
    """Returns the decoded error of the call dispatched by a finalized `Sudo.sudo`, or `None` if it succeeded.

    The envelope itself finalizes successfully even when the inner call fails; the failure is only reported by the
    `Sudo.Sudid` event.
    """
    receipt = outcome.extrinsic_receipt
    if receipt is None:
        return None

    for event in await receipt.triggered_events:
        event = event["event"]
        if event["module_id"] != "Sudo" or event["event_id"] != "Sudid":
            continue
        attributes = event["attributes"]
        result = (
            attributes.get("sudo_result")
            if isinstance(attributes, dict)
            else attributes[0]
        )
        if isinstance(result, dict) and "Err" in result:
            return await client.decode_dispatch_error(
                result["Err"], block_hash=outcome.block_hash
            )
    return None


async def assert_storage_value(
    client: "ChainClient",
    module: str,
    storage: str,
    params: Optional[list],
    expected: Any,
) -> Any:
    """Reads a storage item and raises `ReadBackMismatchError` unless it equals `expected`."""
    if (actual := await client.query(module, storage, params)) != expected:
        raise ReadBackMismatchError(f"{module}.{storage}", expected, actual)
    return actual


async def ensure_storage_value(
    client: "ChainClient",
    module: str,
    storage: str,
    params: Optional[list],
    expected: Any,
    compose: ComposeCall,
    signer: Optional["Keypair"] = None,
    read_back: bool = True,
) -> Optional[TransactionOutcome]:
    """Makes a storage item hold `expected`, submitting only when it does not already.

    Parameters:
        client: The chain client.
        module: Pallet of the storage item.
        storage: Name of the storage item.
        params: Storage keys, for maps.
        expected: The value the storage item must hold afterwards.
        compose: Coroutine function composing the call that writes `expected`.
        signer: Keypair submitting the call directly. If `None`, the call is wrapped in `Sudo.sudo` and signed by
            the administrator.
        read_back: Whether to read the storage item again after finalization and compare it with `expected`.

    Returns:
        The outcome of the submission, or `None` if the value was already set.

    Raises:
        ReadBackMismatchError: The item does not hold `expected` after a successful submission.
    """
    calling_function = get_caller_name()
    current = await client.query(module, storage, params)
    if current == expected:
        logging.info(
            f"[blue]{module}.{storage}[/blue] is already [blue]{expected}[/blue], skipping "
            f"[blue]{calling_function}[/blue]."
        )
        return None

    logging.debug(
        f"Updating [blue]{module}.{storage}[/blue] from [blue]{current}[/blue] to [blue]{expected}[/blue]."
    )
    call = await compose()
    if signer is None:
        outcome = await sudo_call(client, call, calling_function=calling_function)
    else:
        outcome = await submit_with_retry(
            client, call, signer, calling_function=calling_function
        )

    if read_back:
        await assert_storage_value(client, module, storage, params, expected)
    return outcome
