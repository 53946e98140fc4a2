"""
Submit-and-confirm: sign a call, broadcast it and wait until it is finalized.

Transient submission errors (nonce races, pool priority clashes, dropped connections) are retried with a freshly signed
extrinsic; a dispatch failure in a finalized block is definitive and is raised immediately.
"""

import asyncio
from typing import Optional, TYPE_CHECKING

from async_substrate_interface.errors import SubstrateRequestException
from bittensor.utils import get_caller_name
from bittensor.utils.btlogging import logging
from websockets.exceptions import ConnectionClosed

from subtensor_fixtures.core import settings
from subtensor_fixtures.core.errors import (
    ExtrinsicFailedError,
    RetriesExhaustedError,
    SubmissionError,
)
from subtensor_fixtures.core.types import OutcomeStatus, TransactionOutcome
from subtensor_fixtures.core.waiting import Clock, DEFAULT_CLOCK

if TYPE_CHECKING:
    from bittensor_wallet import Keypair
    from scalecodec.types import GenericCall
    from subtensor_fixtures.core.chain import ChainClient


def is_transient_error(error) -> bool:
    """Whether a pre-inclusion failure may succeed if the call is signed and submitted again."""
    if isinstance(
        error, (ConnectionError, ConnectionClosed, TimeoutError, asyncio.TimeoutError)
    ):
        return True
    if isinstance(error, SubstrateRequestException):
        text = str(error).lower()
        return any(marker in text for marker in settings.TRANSIENT_SUBMISSION_ERRORS)
    return False


def raise_for_outcome(outcome: TransactionOutcome) -> TransactionOutcome:
    """Returns a successful outcome unchanged and raises the matching error otherwise."""
    if outcome.success:
        return outcome

    if outcome.status is OutcomeStatus.FINALIZED_FAILURE:
        error = ExtrinsicFailedError.from_error(outcome.error)
    else:
        error = SubmissionError(outcome.message)
    error.outcome = outcome
    if isinstance(outcome.error, BaseException):
        raise error from outcome.error
    raise error


async def submit(
    client: "ChainClient",
    call: "GenericCall",
    signer: "Keypair",
    calling_function: Optional[str] = None,
) -> TransactionOutcome:
    """Signs and submits `call` once and waits for finalization.

    Parameters:
        client: The chain client.
        call: The call to submit.
        signer: Keypair signing and paying for the extrinsic.
        calling_function: Name recorded in the outcome and logs.

    Returns:
        The successful outcome.

    Raises:
        ExtrinsicFailedError: The extrinsic was finalized but dispatch failed.
        SubmissionError: The node rejected the extrinsic before inclusion.
    """
    outcome = await client.submit(
        call=call,
        signer=signer,
        wait_for_inclusion=True,
        wait_for_finalization=True,
        calling_function=calling_function or get_caller_name(),
    )
    if not outcome.success:
        outcome.with_log("error")
    return raise_for_outcome(outcome)


async def submit_with_retry(
    client: "ChainClient",
    call: "GenericCall",
    signer: "Keypair",
    max_attempts: Optional[int] = None,
    retry_delay: Optional[float] = None,
    clock: Optional[Clock] = None,
    calling_function: Optional[str] = None,
) -> TransactionOutcome:
    """Submits `call` until it is finalized, retrying transient submission errors.

    Each attempt signs the call again, so a nonce consumed by an earlier attempt that did make it into the pool does
    not block the next one. That also means a retried call may be executed more than once; callers must tolerate it.

    Parameters:
        client: The chain client.
        call: The call to submit.
        signer: Keypair signing and paying for the extrinsic.
        max_attempts: Attempts before giving up. Defaults to `client.config.max_attempts`.
        retry_delay: Seconds between attempts. Defaults to `client.config.retry_delay`.
        clock: Sleeper used between attempts.
        calling_function: Name recorded in the outcome and logs.

    Returns:
        The successful outcome, with `attempts` set.

    Raises:
        ExtrinsicFailedError: Dispatch failed on chain. Never retried.
        SubmissionError: The node rejected the extrinsic for a non-transient reason. Never retried.
        RetriesExhaustedError: Every attempt failed with a transient error.
    """
    max_attempts = max_attempts if max_attempts is not None else client.config.max_attempts
    retry_delay = retry_delay if retry_delay is not None else client.config.retry_delay
    clock = clock or DEFAULT_CLOCK
    calling_function = calling_function or get_caller_name()

    if max_attempts <= 0:
        raise ValueError(f"`max_attempts` must be greater than 0, not {max_attempts}.")

    last_outcome: Optional[TransactionOutcome] = None
    for attempt in range(1, max_attempts + 1):
        outcome = await client.submit(
            call=call,
            signer=signer,
            wait_for_inclusion=True,
            wait_for_finalization=True,
            calling_function=calling_function,
        )
        outcome.attempts = attempt

        if outcome.success:
            logging.debug(
                f"[blue]{calling_function}[/blue] finalized in block [blue]{outcome.block_hash}[/blue] "
                f"after [blue]{attempt}[/blue] attempt(s)."
            )
            return outcome

        if not (outcome.is_transient and is_transient_error(outcome.error)):
            outcome.with_log("error")
            return raise_for_outcome(outcome)

        last_outcome = outcome
        logging.warning(
            f"Attempt [blue]{attempt}/{max_attempts}[/blue] of [blue]{calling_function}[/blue] failed: "
            f"{outcome.message}"
        )
        if attempt < max_attempts:
            await clock.sleep(retry_delay)

    error = RetriesExhaustedError(
        f"{calling_function} was not finalized after {max_attempts} attempts: {last_outcome.message}",
        attempts=max_attempts,
    )
    error.outcome = last_outcome
    logging.error(str(error))
    cause = last_outcome.error
    raise error from (cause if isinstance(cause, BaseException) else None)
