"""In-memory stand-in for `ChainClient` used by the unit tests.

`FakeChainClient` keeps storage in a dict, counts submitted extrinsics and applies the effect of the calls the fixtures
compose. `FakeClock` replaces real sleeping and produces blocks as fake time passes.
"""

from dataclasses import dataclass, field
from typing import Any, Optional, Union

from bittensor.utils.balance import Balance
from bittensor_wallet import Keypair

from subtensor_fixtures.core.config import FixtureConfig
from subtensor_fixtures.core.types import OutcomeStatus, TransactionOutcome
from subtensor_fixtures.core.waiting import Clock

# AdminUtils function -> (storage pallet, storage item, value parameter)
ADMIN_SETTERS = {
    "sudo_set_activity_cutoff": ("SubtensorModule", "ActivityCutoff", "activity_cutoff"),
    "sudo_set_commit_reveal_weights_enabled": ("SubtensorModule", "CommitRevealWeightsEnabled", "enabled"),
    "sudo_set_commit_reveal_weights_interval": ("SubtensorModule", "RevealPeriodEpochs", "interval"),
    "sudo_set_evm_chain_id": ("EVMChainId", "ChainId", "chain_id"),
    "sudo_set_max_allowed_uids": ("SubtensorModule", "MaxAllowedUids", "max_allowed_uids"),
    "sudo_set_max_allowed_validators": ("SubtensorModule", "MaxAllowedValidators", "max_allowed_validators"),
    "sudo_set_min_delegate_take": ("SubtensorModule", "MinDelegateTake", "take"),
    "sudo_set_network_rate_limit": ("SubtensorModule", "NetworkRateLimit", "rate_limit"),
    "sudo_set_network_registration_allowed": (
        "SubtensorModule",
        "NetworkRegistrationAllowed",
        "registration_allowed",
    ),
    "sudo_set_subnet_owner_cut": ("SubtensorModule", "SubnetOwnerCut", "subnet_owner_cut"),
    "sudo_set_subtoken_enabled": ("SubtensorModule", "SubtokenEnabled", "subtoken_enabled"),
    "sudo_set_target_registrations_per_interval": (
        "SubtensorModule",
        "TargetRegistrationsPerInterval",
        "target_registrations_per_interval",
    ),
    "sudo_set_tempo": ("SubtensorModule", "Tempo", "tempo"),
    "sudo_set_tx_rate_limit": ("SubtensorModule", "TxRateLimit", "tx_rate_limit"),
    "sudo_set_weights_set_rate_limit": ("SubtensorModule", "WeightsSetRateLimit", "weights_set_rate_limit"),
}

# Storage items whose absence reads as `None` or `False` instead of 0.
STORAGE_DEFAULTS = {
    "Account": None,
    "ChainId": 42,
    "CommitRevealWeightsEnabled": False,
    "DisableWhitelistCheck": False,
    "FirstEmissionBlockNumber": None,
    "NetworkRegistrationAllowed": False,
    "SubtokenEnabled": False,
    "Uids": None,
}

# Pallet errors reported as `{"Module": {"index": FAKE_MODULE_INDEX, "error": ...}}` inside `Sudo.Sudid` events.
FAKE_MODULE_INDEX = 7
MODULE_ERRORS = [
    "HotKeyAlreadyRegisteredInSubNet",
    "NeedWaitingMoreBlocksToStarCall",
    "FirstEmissionBlockNumberAlreadySet",
    "NotEnoughBalanceToPaySwapColdKey",
    "ColdKeyAlreadyAssociated",
]


def dispatch_error(name: str, docs: Optional[list[str]] = None) -> dict:
    """A dispatch error dict shaped like the ones decoded by async-substrate-interface."""
    return {"type": "Module", "name": name, "docs": docs or [f"{name} error."]}


def sudid_event(error: Optional[dict]) -> dict:
    """A `Sudo.Sudid` event as decoded by async-substrate-interface, carrying the inner call result."""
    if error is None:
        result = {"Ok": ()}
    elif error["name"] in MODULE_ERRORS:
        index = MODULE_ERRORS.index(error["name"])
        result = {"Err": {"Module": {"index": FAKE_MODULE_INDEX, "error": f"0x{index:02x}000000"}}}
    else:
        result = {"Err": error["name"]}
    return {
        "phase": {"ApplyExtrinsic": 1},
        "event": {"module_id": "Sudo", "event_id": "Sudid", "attributes": {"sudo_result": result}},
        "topics": [],
    }


@dataclass
class FakeCall:
    call_module: str
    call_function: str
    call_params: dict = field(default_factory=dict)


@dataclass
class FakeReceipt:
    block_hash: str
    events: list = field(default_factory=list)

    @property
    async def triggered_events(self) -> list:
        return self.events


@dataclass
class Submission:
    call: FakeCall
    signer: Keypair
    outcome: TransactionOutcome


class FakeChainClient:
    """Implements the `ChainClient` surface used by the fixtures against an in-memory ledger."""

    def __init__(
        self,
        config: Optional[FixtureConfig] = None,
        block: int = 100,
        duration_of_start_call: int = 10,
        fee_rao: int = 0,
    ):
        self.config = config or FixtureConfig(
            admin=Keypair.create_from_uri("//Alice"),
            retry_delay=0.5,
            poll_interval=12.0,
            wait_timeout=600.0,
            settle_delay=2.0,
        )
        self.sudo_key = self.config.admin.ss58_address
        self.block = block
        self.fee_rao = fee_rao
        self.storage: dict[tuple, Any] = {}
        self.constants = {("SubtensorModule", "DurationOfStartCall"): duration_of_start_call}
        self.submissions: list[Submission] = []
        self.attempts = 0
        self._scripted_failures: list[Union[BaseException, dict]] = []
        self.reads: list[tuple] = []
        self.ignore_writes: set[str] = set()
        self.inner_failures: dict[str, str] = {}

    @property
    def admin(self) -> Keypair:
        return self.config.admin

    # Storage ==========================================================================================================

    def set(self, module: str, name: str, value: Any, params: Optional[list] = None):
        self.storage[(module, name, tuple(params or ()))] = value

    def get(self, module: str, name: str, params: Optional[list] = None) -> Any:
        return self.storage.get(
            (module, name, tuple(params or ())), STORAGE_DEFAULTS.get(name, 0)
        )

    def set_free_balance(self, ss58_address: str, rao: int):
        self.set("System", "Account", {"data": {"free": rao}}, [ss58_address])

    async def query(self, module, name, params=None, block_hash=None):
        self.reads.append((module, name, tuple(params or ())))
        return self.get(module, name, params)

    async def query_subtensor(self, name, params=None, block_hash=None):
        return await self.query("SubtensorModule", name, params, block_hash)

    async def query_constant(self, module_name, constant_name):
        return self.constants[(module_name, constant_name)]

    async def get_current_block(self) -> int:
        return self.block

    async def get_free_balance(self, ss58_address: str) -> Balance:
        account = self.get("System", "Account", [ss58_address])
        return Balance.from_rao((account or {}).get("data", {}).get("free", 0))

    # Extrinsics =======================================================================================================

    async def compose_call(self, call_module, call_function, call_params) -> FakeCall:
        return FakeCall(call_module, call_function, dict(call_params))

    def fail_next(self, *failures: Union[BaseException, dict]):
        """Scripts the next submissions to fail.

        An exception is reported as a submission failure, a dict as a dispatch error in a finalized block.
        """
        self._scripted_failures.extend(failures)

    def reject_inner(self, function: str, error_name: str):
        """Makes a sudo-wrapped `function` fail with `error_name`, reported through the `Sudo.Sudid` event."""
        self.inner_failures[function] = error_name

    @property
    def submitted_calls(self) -> list[FakeCall]:
        return [submission.call for submission in self.submissions]

    async def submit(
        self,
        call,
        signer,
        wait_for_inclusion=True,
        wait_for_finalization=True,
        calling_function=None,
    ) -> TransactionOutcome:
        self.attempts += 1

        if self._scripted_failures:
            failure = self._scripted_failures.pop(0)
            if isinstance(failure, BaseException):
                return TransactionOutcome(
                    status=OutcomeStatus.SUBMISSION_FAILED,
                    message=str(failure),
                    extrinsic_function=calling_function,
                    error=failure,
                )
            return self._failed(failure, calling_function)

        self.block += 1
        events = []
        if (call.call_module, call.call_function) == ("Sudo", "sudo"):
            if signer.ss58_address != self.sudo_key:
                return self._failed(dispatch_error("RequireSudo"), calling_function)
            inner_error = self._apply(call.call_params["call"], signer, root=True)
            events.append(sudid_event(inner_error))
        elif (error := self._apply(call, signer)) is not None:
            return self._failed(error, calling_function)

        self._charge_fee(signer.ss58_address)
        block_hash = f"0x{self.block:064x}"
        outcome = TransactionOutcome(
            status=OutcomeStatus.FINALIZED_SUCCESS,
            message="Success",
            extrinsic_function=calling_function,
            extrinsic_receipt=FakeReceipt(block_hash, events),
            block_hash=block_hash,
            fee=Balance.from_rao(self.fee_rao),
        )
        self.submissions.append(Submission(call, signer, outcome))
        return outcome

    def _failed(self, error: dict, calling_function: Optional[str]) -> TransactionOutcome:
        return TransactionOutcome(
            status=OutcomeStatus.FINALIZED_FAILURE,
            message=f"Subtensor returned `{error['name']}` error.",
            extrinsic_function=calling_function,
            error=error,
        )

    async def decode_dispatch_error(self, error: Any, block_hash: Optional[str] = None) -> dict:
        if isinstance(error, dict) and "Module" in error:
            name = MODULE_ERRORS[int(error["Module"]["error"][2:4], 16)]
            return {"type": "Module", "name": name, "docs": [f"{name} error."]}
        return {"type": "System", "name": error, "docs": [f"{error} error."]}

    def _charge_fee(self, ss58_address: str):
        if self.fee_rao and (account := self.get("System", "Account", [ss58_address])):
            self.set_free_balance(ss58_address, account["data"]["free"] - self.fee_rao)

    def _apply(self, call: FakeCall, signer: Keypair, root: bool = False) -> Optional[dict]:
        module, function, params = call.call_module, call.call_function, call.call_params

        if module == "AdminUtils" or function.startswith("sudo_") or function in (
            "force_set_balance",
            "disable_whitelist",
            "swap_coldkey",
        ):
            if not root:
                return dispatch_error("BadOrigin")

        if function in self.inner_failures:
            return dispatch_error(self.inner_failures[function])

        if function in self.ignore_writes:
            return None

        if module == "AdminUtils":
            pallet, name, value_param = ADMIN_SETTERS[function]
            self.set(pallet, name, params[value_param], [params["netuid"]] if "netuid" in params else None)
        elif (module, function) == ("EVM", "disable_whitelist"):
            self.set("EVM", "DisableWhitelistCheck", params["disabled"])
        elif (module, function) == ("Balances", "force_set_balance"):
            self.set_free_balance(params["who"], params["new_free"])
        elif module == "SubtensorModule":
            return self._apply_subtensor_module(function, params, signer)
        return None

    def _apply_subtensor_module(self, function: str, params: dict, signer: Keypair) -> Optional[dict]:
        if function == "sudo_set_max_childkey_take":
            self.set("SubtensorModule", "MaxChildkeyTake", params["take"])

        elif function == "register_network":
            netuid = self.get("SubtensorModule", "TotalNetworks")
            self.set("SubtensorModule", "TotalNetworks", netuid + 1)
            self.set("SubtensorModule", "NetworkRegisteredAt", self.block, [netuid])
            self.set("SubtensorModule", "SubnetOwner", signer.ss58_address, [netuid])

        elif function in ("burned_register", "root_register"):
            netuid = params.get("netuid", 0)
            hotkey = params["hotkey"]
            if self.get("SubtensorModule", "Uids", [netuid, hotkey]) is not None:
                return dispatch_error("HotKeyAlreadyRegisteredInSubNet")
            uid = self.get("SubtensorModule", "SubnetworkN", [netuid])
            self.set("SubtensorModule", "Uids", uid, [netuid, hotkey])
            self.set("SubtensorModule", "SubnetworkN", uid + 1, [netuid])

        elif function == "start_call":
            netuid = params["netuid"]
            registered_at = self.get("SubtensorModule", "NetworkRegisteredAt", [netuid])
            duration = self.constants[("SubtensorModule", "DurationOfStartCall")]
            if self.block - registered_at <= duration:
                return dispatch_error("NeedWaitingMoreBlocksToStarCall")
            if self.get("SubtensorModule", "FirstEmissionBlockNumber", [netuid]) is not None:
                return dispatch_error("FirstEmissionBlockNumberAlreadySet")
            self.set("SubtensorModule", "FirstEmissionBlockNumber", self.block + 1, [netuid])

        return None


class FakeClock(Clock):
    """Fake time source. Sleeping advances fake time and, when attached to a chain, produces its blocks."""

    def __init__(self, chain: Optional[FakeChainClient] = None, block_time: float = 12.0):
        self.time = 0.0
        self.sleeps: list[float] = []
        self.chain = chain
        self.block_time = block_time

    def now(self) -> float:
        return self.time

    async def sleep(self, seconds: float):
        self.sleeps.append(seconds)
        blocks_before = int(self.time // self.block_time)
        self.time += seconds
        if self.chain is not None:
            self.chain.block += int(self.time // self.block_time) - blocks_before
