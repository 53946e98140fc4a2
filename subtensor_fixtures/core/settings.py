import os

from munch import munchify

__version__ = "0.1.0"

# Local subtensor node (Needs to use ws:// or wss://)
LOCAL_ENTRYPOINT = os.getenv("SF_CHAIN_ENDPOINT") or "ws://127.0.0.1:9944"

# Well-known development account holding the Sudo key on localnet and devnet.
DEFAULT_ADMIN_URI = "//Alice"

# Currency Symbols
TAO_SYMBOL: str = chr(0x03C4)
RAO_SYMBOL: str = chr(0x03C1)

# Default period for extrinsics Era
# details https://paritytech.github.io/polkadot-sdk/master/src/sp_runtime/generic/era.rs.html#65-72
DEFAULT_PERIOD = 128

# Amount given to accounts funded through `force_set_balance` when none is provided (in TAO).
DEFAULT_FUNDING_TAO = 1e8

# Cost charged by a sudo coldkey swap when none is provided (in TAO).
DEFAULT_SWAP_COST_TAO = 10

# Registrations allowed per interval when relaxing registration limits on a test subnet.
DEFAULT_TARGET_REGISTRATIONS_PER_INTERVAL = 1000

# Largest value accepted by u16 storage items (tempo, cutoffs, uids).
U16_MAX = 65535

# --- Type Registry ---
TYPE_REGISTRY: dict[str, dict] = {
    "types": {
        "Balance": "u64",  # Need to override default u128
    },
}

# Substrings of node RPC errors that are worth resubmitting for. Anything else raised before inclusion is treated
# as a definitive rejection.
TRANSIENT_SUBMISSION_ERRORS = (
    "priority is too low",
    "transaction is outdated",
    "transaction is stale",
    "transaction will be valid in the future",
    "temporarily banned",
    "already imported",
    "immediately dropped",
    "connection",
    "timed out",
)

_SF_MAX_ATTEMPTS = os.getenv("SF_MAX_ATTEMPTS")
_SF_RETRY_DELAY = os.getenv("SF_RETRY_DELAY")
_SF_POLL_INTERVAL = os.getenv("SF_POLL_INTERVAL")
_SF_WAIT_TIMEOUT = os.getenv("SF_WAIT_TIMEOUT")
_SF_SETTLE_DELAY = os.getenv("SF_SETTLE_DELAY")

DEFAULTS = munchify(
    {
        "subtensor": {
            "chain_endpoint": LOCAL_ENTRYPOINT,
        },
        "fixtures": {
            "admin_uri": os.getenv("SF_ADMIN_URI") or DEFAULT_ADMIN_URI,
            "max_attempts": int(_SF_MAX_ATTEMPTS) if _SF_MAX_ATTEMPTS else 3,
            "retry_delay": float(_SF_RETRY_DELAY) if _SF_RETRY_DELAY else 1.0,
            "poll_interval": float(_SF_POLL_INTERVAL) if _SF_POLL_INTERVAL else 2.0,
            "wait_timeout": float(_SF_WAIT_TIMEOUT) if _SF_WAIT_TIMEOUT else 600.0,
            "settle_delay": float(_SF_SETTLE_DELAY) if _SF_SETTLE_DELAY else 2.0,
            "period": DEFAULT_PERIOD,
        },
        "logging": {
            "debug": bool(os.getenv("SF_LOGGING_DEBUG")) or False,
            "trace": bool(os.getenv("SF_LOGGING_TRACE")) or False,
        },
    }
)
