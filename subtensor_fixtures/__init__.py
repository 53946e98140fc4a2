from bittensor.utils.btlogging import logging

from .core.chain import ChainClient
from .core.config import FixtureConfig
from .core.errors import (
    ChainError,
    ExtrinsicFailedError,
    FixtureError,
    ReadBackMismatchError,
    RetriesExhaustedError,
    StartCallTooEarlyError,
    SubmissionError,
    WaitTimeoutError,
)
from .core.settings import __version__, DEFAULTS
from .core.submit import submit, submit_with_retry
from .core.types import NetworkRegistration, OutcomeStatus, TransactionOutcome
from .core.waiting import Clock, wait_for_block, wait_until
from .extrinsics import *  # noqa: F401,F403
from .utils import h160_to_ss58, public_key_to_ss58

if DEFAULTS.logging.trace:
    logging.set_trace(True)
elif DEFAULTS.logging.debug:
    logging.set_debug(True)
