"""Awaiting conditions on chain state with a polling interval and a real deadline."""

import asyncio
import time
from typing import Awaitable, Callable, Optional, TypeVar, TYPE_CHECKING

from bittensor.utils.btlogging import logging

from subtensor_fixtures.core.errors import WaitTimeoutError

if TYPE_CHECKING:
    from subtensor_fixtures.core.chain import ChainClient

T = TypeVar("T")


class Clock:
    """Monotonic time source and sleeper. Tests replace it to run polling loops without real delays."""

    def now(self) -> float:
        return time.monotonic()

    async def sleep(self, seconds: float):
        await asyncio.sleep(seconds)


DEFAULT_CLOCK = Clock()


async def wait_until(
    poll: Callable[[], Awaitable[T]],
    predicate: Callable[[T], bool],
    interval: float,
    timeout: float,
    clock: Optional[Clock] = None,
    description: str = "condition",
) -> T:
    """Awaits `poll` until `predicate` holds for its result, or the deadline passes.

    `poll` is awaited immediately, then every `interval` seconds. The last sleep is shortened so the final
    poll happens at the deadline rather than after it.

    Parameters:
        poll: Coroutine function reading the observed state.
        predicate: Returns `True` once the observed state is acceptable.
        interval: Seconds between two polls.
        timeout: Seconds after which to give up.
        clock: Time source. Defaults to the monotonic clock with `asyncio.sleep`.
        description: Used in log and error messages.

    Returns:
        The first polled value satisfying the predicate.

    Raises:
        WaitTimeoutError: If the predicate does not hold before the deadline.
    """
    clock = clock or DEFAULT_CLOCK
    deadline = clock.now() + timeout
    value = await poll()
    while not predicate(value):
        remaining = deadline - clock.now()
        if remaining <= 0:
            raise WaitTimeoutError(
                f"Timed out after {timeout}s waiting for {description}. Last observed value: {value!r}."
            )
        logging.debug(
            f"Waiting for [blue]{description}[/blue]. Observed: [blue]{value}[/blue]."
        )
        await clock.sleep(min(interval, remaining))
        value = await poll()
    return value


async def wait_for_block(
    client: "ChainClient",
    block: int,
    interval: Optional[float] = None,
    timeout: Optional[float] = None,
    clock: Optional[Clock] = None,
) -> int:
    """Waits until the chain head reaches `block`.

    Interval and timeout default to the client's `FixtureConfig`.

    Returns:
        The current block number once it is greater than or equal to `block`.
    """
    return await wait_until(
        poll=client.get_current_block,
        predicate=lambda current: current >= block,
        interval=interval if interval is not None else client.config.poll_interval,
        timeout=timeout if timeout is not None else client.config.wait_timeout,
        clock=clock,
        description=f"block {block}",
    )
