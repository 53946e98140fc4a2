import argparse
from dataclasses import dataclass, field, replace
from typing import Optional

from bittensor_wallet import Keypair
from munch import Munch, munchify

from subtensor_fixtures.core import settings


def _admin_from_defaults() -> Keypair:
    return Keypair.create_from_uri(settings.DEFAULTS.fixtures.admin_uri)


@dataclass
class FixtureConfig:
    """Runtime settings shared by every fixture helper.

    The administrator credential is carried here instead of being looked up globally, so a test can point the helpers
    at any sudo key (or a fake one) without patching module state.

    Attributes:
        admin: Keypair holding the chain's Sudo key. Used to sign every privileged (sudo-wrapped) call.
        max_attempts: Number of times a transiently failing submission is attempted before giving up.
        retry_delay: Seconds to wait between two submission attempts.
        poll_interval: Seconds between two reads while waiting for on-chain state to change.
        wait_timeout: Deadline in seconds for any polling loop.
        settle_delay: Seconds to wait once a block threshold is reached, so block hooks (coinbase) can run.
        period: Mortality period (in blocks) of submitted extrinsics. `None` makes them immortal.
        chain_endpoint: Websocket endpoint used by a `ChainClient` created without an explicit one. `None` falls back to
            `settings.DEFAULTS.subtensor.chain_endpoint`.
    """

    admin: Keypair = field(default_factory=_admin_from_defaults)
    max_attempts: int = settings.DEFAULTS.fixtures.max_attempts
    retry_delay: float = settings.DEFAULTS.fixtures.retry_delay
    poll_interval: float = settings.DEFAULTS.fixtures.poll_interval
    wait_timeout: float = settings.DEFAULTS.fixtures.wait_timeout
    settle_delay: float = settings.DEFAULTS.fixtures.settle_delay
    period: Optional[int] = settings.DEFAULTS.fixtures.period
    chain_endpoint: Optional[str] = None

    def __post_init__(self):
        if self.max_attempts <= 0:
            raise ValueError(
                f"`max_attempts` must be greater than 0, not {self.max_attempts}."
            )
        if self.poll_interval <= 0:
            raise ValueError(
                f"`poll_interval` must be greater than 0, not {self.poll_interval}."
            )
        if self.wait_timeout <= 0:
            raise ValueError(
                f"`wait_timeout` must be greater than 0, not {self.wait_timeout}."
            )

    @property
    def admin_ss58(self) -> str:
        return self.admin.ss58_address

    def with_overrides(self, **kwargs) -> "FixtureConfig":
        """Returns a copy of this config with the given fields replaced."""
        return replace(self, **kwargs)

    @classmethod
    def from_config(cls, config: Munch, admin: Optional[Keypair] = None) -> "FixtureConfig":
        """Builds a FixtureConfig from a parsed `fixtures.*` configuration tree.

        Parameters:
            config: A munch with a `fixtures` section and optionally a `subtensor` section, as produced by
                `FixtureConfig.config()`.
            admin: Administrator keypair. If `None`, it is derived from `fixtures.admin_uri`.

        Returns:
            FixtureConfig instance.
        """
        fixtures = config.fixtures
        return cls(
            admin=admin or Keypair.create_from_uri(fixtures.admin_uri),
            max_attempts=int(fixtures.max_attempts),
            retry_delay=float(fixtures.retry_delay),
            poll_interval=float(fixtures.poll_interval),
            wait_timeout=float(fixtures.wait_timeout),
            settle_delay=float(fixtures.settle_delay),
            period=fixtures.period,
            chain_endpoint=config.get("subtensor", {}).get("chain_endpoint"),
        )

    @classmethod
    def config(cls, args: Optional[list[str]] = None) -> Munch:
        """Parses `--fixtures.*` and `--subtensor.*` arguments into a nested munch.

        Parameters:
            args: Argument list to parse. Defaults to an empty list so the caller's `sys.argv` is never consumed.

        Returns:
            A munch shaped like `settings.DEFAULTS`.
        """
        parser = argparse.ArgumentParser()
        cls.add_args(parser)
        namespace = parser.parse_args(args or [])
        tree: dict = {}
        for dotted, value in vars(namespace).items():
            node = tree
            *parents, leaf = dotted.split(".")
            for part in parents:
                node = node.setdefault(part, {})
            node[leaf] = value
        return munchify(tree)

    @classmethod
    def add_args(cls, parser: "argparse.ArgumentParser", prefix: Optional[str] = None):
        """
        Adds command-line arguments to the provided ArgumentParser for configuring the fixture helpers.

        Parameters:
            parser: The ArgumentParser object to which the arguments will be added.
            prefix: An optional prefix for the argument names. If provided, the prefix is prepended to each argument name.

        Arguments added:
            --subtensor.chain_endpoint: Websocket endpoint of the node the fixtures talk to.
            --fixtures.admin_uri: Secret URI of the sudo key.
            --fixtures.max_attempts: Submission attempts before giving up on transient errors.
            --fixtures.retry_delay: Seconds between submission attempts.
            --fixtures.poll_interval: Seconds between polls while waiting for chain state.
            --fixtures.wait_timeout: Deadline in seconds for polling loops.
            --fixtures.settle_delay: Seconds to wait after a block threshold is reached.
            --fixtures.period: Mortality period of submitted extrinsics, in blocks.
        """
        prefix_str = "" if prefix is None else f"{prefix}."
        defaults = settings.DEFAULTS
        try:
            parser.add_argument(
                f"--{prefix_str}subtensor.chain_endpoint",
                default=defaults.subtensor.chain_endpoint,
                type=str,
                help="""The subtensor node websocket endpoint.""",
            )
            parser.add_argument(
                f"--{prefix_str}fixtures.admin_uri",
                default=defaults.fixtures.admin_uri,
                type=str,
                help="""Secret URI of the key holding sudo on the target chain.""",
            )
            parser.add_argument(
                f"--{prefix_str}fixtures.max_attempts",
                default=defaults.fixtures.max_attempts,
                type=int,
                help="""Number of submission attempts on transient errors.""",
            )
            parser.add_argument(
                f"--{prefix_str}fixtures.retry_delay",
                default=defaults.fixtures.retry_delay,
                type=float,
                help="""Seconds to wait between submission attempts.""",
            )
            parser.add_argument(
                f"--{prefix_str}fixtures.poll_interval",
                default=defaults.fixtures.poll_interval,
                type=float,
                help="""Seconds between two reads of chain state while waiting.""",
            )
            parser.add_argument(
                f"--{prefix_str}fixtures.wait_timeout",
                default=defaults.fixtures.wait_timeout,
                type=float,
                help="""Deadline in seconds for waiting on chain state.""",
            )
            parser.add_argument(
                f"--{prefix_str}fixtures.settle_delay",
                default=defaults.fixtures.settle_delay,
                type=float,
                help="""Seconds to wait once a block threshold is reached.""",
            )
            parser.add_argument(
                f"--{prefix_str}fixtures.period",
                default=defaults.fixtures.period,
                type=int,
                help="""Mortality period of submitted extrinsics, in blocks.""",
            )
        except argparse.ArgumentError:
            # re-parsing arguments.
            pass
