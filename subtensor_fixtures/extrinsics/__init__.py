from .balances import force_set_balance, force_set_balance_to_eth_address
from .evm import disable_whitelist_check, force_set_chain_id
from .hyperparameters import (
    set_activity_cutoff,
    set_commit_reveal_weights_enabled,
    set_commit_reveal_weights_interval,
    set_max_allowed_uids,
    set_max_allowed_validators,
    set_max_childkey_take,
    set_min_delegate_take,
    set_network_rate_limit,
    set_subnet_owner_cut,
    set_target_registrations_per_interval,
    set_tempo,
    set_tx_rate_limit,
    set_weights_set_rate_limit,
)
from .proxy import send_proxy_call
from .staking import add_stake, become_delegate, remove_stake
from .subnets import (
    add_new_subnetwork,
    burned_register,
    root_register,
    set_network_registration_allowed,
    set_subtoken_enabled,
    start_call,
)
from .swap import swap_coldkey
from .utils import assert_storage_value, ensure_storage_value, sudo_call
from .weights import set_weights

__all__ = [
    "add_new_subnetwork",
    "add_stake",
    "assert_storage_value",
    "become_delegate",
    "burned_register",
    "disable_whitelist_check",
    "ensure_storage_value",
    "force_set_balance",
    "force_set_balance_to_eth_address",
    "force_set_chain_id",
    "remove_stake",
    "root_register",
    "send_proxy_call",
    "set_activity_cutoff",
    "set_commit_reveal_weights_enabled",
    "set_commit_reveal_weights_interval",
    "set_max_allowed_uids",
    "set_max_allowed_validators",
    "set_max_childkey_take",
    "set_min_delegate_take",
    "set_network_rate_limit",
    "set_network_registration_allowed",
    "set_subnet_owner_cut",
    "set_subtoken_enabled",
    "set_target_registrations_per_interval",
    "set_tempo",
    "set_tx_rate_limit",
    "set_weights",
    "set_weights_set_rate_limit",
    "start_call",
    "sudo_call",
    "swap_coldkey",
]
