from typing import Any, Optional

from async_substrate_interface.errors import SubstrateRequestException

__all__ = [
    "BadOrigin",
    "ChainError",
    "ExtrinsicFailedError",
    "FirstEmissionBlockNumberAlreadySet",
    "FixtureError",
    "HotKeyAlreadyRegisteredInSubNet",
    "InvalidChainId",
    "NeedWaitingMoreBlocksToStarCall",
    "NetworkTxRateLimitExceeded",
    "NotEnoughBalanceToStake",
    "ReadBackMismatchError",
    "RetriesExhaustedError",
    "StartCallTooEarlyError",
    "SubmissionError",
    "SubnetNotExists",
    "SubstrateRequestException",
    "TooManyRegistrationsThisBlock",
    "TxRateLimitExceeded",
    "WaitTimeoutError",
]


class _ChainErrorMeta(type):
    _exceptions: dict[str, Exception] = {}

    def __new__(mcs, name, bases, attrs):
        cls = super().__new__(mcs, name, bases, attrs)

        mcs._exceptions.setdefault(cls.__name__, cls)

        return cls

    @classmethod
    def get_exception_class(mcs, exception_name):
        return mcs._exceptions[exception_name]


class FixtureError(Exception):
    """Base error for failures detected by the fixture helpers themselves."""


class ChainError(SubstrateRequestException, metaclass=_ChainErrorMeta):
    """Base error for any chain related errors."""

    @classmethod
    def from_error(cls, error):
        try:
            error_cls = _ChainErrorMeta.get_exception_class(
                error["name"],
            )
        except (KeyError, TypeError):
            return cls(error)
        else:
            if not issubclass(error_cls, cls):
                return cls(error)
            return error_cls(" ".join(error.get("docs") or [error["name"]]))


class SubmissionError(ChainError):
    """The node rejected the extrinsic before it reached a block (invalid, dropped or unreachable node)."""


class RetriesExhaustedError(SubmissionError):
    """Every submission attempt failed with a transient error."""

    def __init__(self, message: str, attempts: int = 0):
        super().__init__(message)
        self.attempts = attempts


class ExtrinsicFailedError(ChainError):
    """The extrinsic was finalized but its dispatch failed on chain."""


class BadOrigin(ExtrinsicFailedError):
    """The origin is not allowed to dispatch the call (usually a sudo call signed by a non-sudo key)."""


class FirstEmissionBlockNumberAlreadySet(ExtrinsicFailedError):
    """Start call was already executed for the subnet."""


class HotKeyAlreadyRegisteredInSubNet(ExtrinsicFailedError):
    """The hotkey is already registered in the subnet."""


class InvalidChainId(ExtrinsicFailedError):
    """The EVM chain id is not accepted."""


class NeedWaitingMoreBlocksToStarCall(ExtrinsicFailedError):
    """The start call delay after subnet registration has not elapsed yet."""


class NetworkTxRateLimitExceeded(ExtrinsicFailedError):
    """Subnet registration exceeded the network rate limit."""


class NotEnoughBalanceToStake(ExtrinsicFailedError):
    """The coldkey balance is too low for the requested stake."""


class SubnetNotExists(ExtrinsicFailedError):
    """The subnet does not exist."""


class TooManyRegistrationsThisBlock(ExtrinsicFailedError):
    """The subnet registration limit for the current block has been reached."""


class TxRateLimitExceeded(ExtrinsicFailedError):
    """Default transaction rate limit exceeded."""


class ReadBackMismatchError(FixtureError, AssertionError):
    """Storage read after a successful submission does not hold the value that was written."""

    def __init__(self, storage: str, expected: Any, actual: Any):
        self.storage = storage
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"{storage} is {actual!r} after the update, expected {expected!r}."
        )


class StartCallTooEarlyError(FixtureError, AssertionError):
    """Start call attempted before `DurationOfStartCall` blocks passed since subnet registration."""

    def __init__(self, netuid: int, blocks_remaining: Optional[int] = None):
        self.netuid = netuid
        self.blocks_remaining = blocks_remaining
        message = f"Start call for subnet {netuid} is not allowed yet"
        if blocks_remaining is not None:
            message += f" ({blocks_remaining} more blocks required)"
        super().__init__(message + ".")


class WaitTimeoutError(FixtureError, TimeoutError):
    """A polled condition did not hold before the deadline."""
