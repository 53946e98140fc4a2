from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Literal, Optional, TYPE_CHECKING

from bittensor.utils import get_caller_name
from bittensor.utils.btlogging import logging

if TYPE_CHECKING:
    from async_substrate_interface.async_substrate import AsyncExtrinsicReceipt
    from bittensor.utils.balance import Balance
    from scalecodec.types import GenericExtrinsic


class OutcomeStatus(str, Enum):
    """Terminal state of one submission attempt."""

    FINALIZED_SUCCESS = "finalized_success"
    FINALIZED_FAILURE = "finalized_failure"
    SUBMISSION_FAILED = "submission_failed"


@dataclass
class TransactionOutcome:
    """
    Result of submitting one call to the chain.

    Mirrors the tuple-like behaviour of the SDK's extrinsic response:
      * Iteration yields ``(success, message)``.
      * Indexing is supported: ``outcome[0] -> success``, ``outcome[1] -> message``.
      * ``len(outcome)`` returns 2.

    Attributes:
        status: Terminal state of the attempt.
        message: A status or informational message (e.g. "Success" or the decoded dispatch error).
        extrinsic_function: The fixture function that submitted the call.
        attempts: How many submissions were made before reaching this outcome.
        extrinsic: The signed extrinsic of the last attempt, if it was created.
        extrinsic_receipt: The receipt of the last attempt, if the extrinsic reached a block.
        block_hash: Hash of the block the extrinsic was included in.
        fee: The fee charged for the extrinsic, if known.
        error: The underlying error (dispatch error dict or exception) when the attempt failed.
        data: Arbitrary data attached by the caller.
    """

    status: OutcomeStatus = OutcomeStatus.FINALIZED_SUCCESS
    message: Optional[str] = None
    extrinsic_function: Optional[str] = None
    attempts: int = 1
    extrinsic: Optional["GenericExtrinsic"] = None
    extrinsic_receipt: Optional["AsyncExtrinsicReceipt"] = None
    block_hash: Optional[str] = None
    fee: Optional["Balance"] = None
    error: Optional[Any] = None
    data: Optional[Any] = None

    def __post_init__(self):
        if self.extrinsic_function is None:
            self.extrinsic_function = get_caller_name(depth=3)

    @property
    def success(self) -> bool:
        return self.status is OutcomeStatus.FINALIZED_SUCCESS

    @property
    def is_transient(self) -> bool:
        """Whether the failure happened before inclusion, so resubmitting may succeed."""
        return self.status is OutcomeStatus.SUBMISSION_FAILED

    def __iter__(self):
        yield self.success
        yield self.message

    def __getitem__(self, index: int) -> Any:
        if index == 0:
            return self.success
        elif index == 1:
            return self.message
        else:
            raise IndexError(
                "TransactionOutcome only supports indices 0 (success) and 1 (message)."
            )

    def __len__(self):
        return 2

    def __repr__(self):
        return repr((self.success, self.message))

    def as_dict(self) -> dict:
        """Represents this object as a dictionary."""
        return {
            "status": self.status.value,
            "success": self.success,
            "message": self.message,
            "extrinsic_function": self.extrinsic_function,
            "attempts": self.attempts,
            "block_hash": self.block_hash,
            "fee": self.fee.rao if self.fee is not None else None,
            "error": str(self.error) if self.error else None,
            "data": self.data,
        }

    def with_log(
        self,
        level: Literal["trace", "debug", "info", "warning", "error", "success"] = "error",
    ) -> "TransactionOutcome":
        """Logs the outcome message with the provided level and returns itself."""
        if self.message:
            if level in ["trace", "error"]:
                message = f"[red]{self.message}[/red]"
            elif level == "info":
                message = f"[blue]{self.message}[/blue]"
            elif level == "warning":
                message = f"[yellow]{self.message}[/yellow]"
            elif level == "success":
                message = f"[green]{self.message}[/green]"
            else:
                message = self.message
            getattr(logging, level)(message)
        return self


@dataclass
class NetworkRegistration:
    """
    Result of `add_new_subnetwork`.

    Retried submissions may register more than one subnet, so every netuid created while the call was in flight is
    reported. Netuids are assigned from `TotalNetworks`, so they are the half-open range
    `[netuid_before, total_after)`. Concurrent registrations by other callers fall in the same range; the caller
    decides which candidate is theirs (e.g. by checking `SubnetOwner`).

    Attributes:
        netuid_before: `TotalNetworks` before submission, i.e. the first netuid that could have been assigned.
        total_after: `TotalNetworks` after finalization.
        outcome: The submission outcome.
    """

    netuid_before: int
    total_after: int
    outcome: Optional[TransactionOutcome] = field(default=None, repr=False)

    @property
    def candidates(self) -> list[int]:
        return list(range(self.netuid_before, self.total_after))

    @property
    def netuid(self) -> int:
        """The first netuid created during the call."""
        return self.netuid_before

    @property
    def is_ambiguous(self) -> bool:
        return len(self.candidates) > 1
