"""Conversions between the address formats the fixtures accept: raw public keys, SS58 strings and EVM (H160)
addresses."""

import hashlib
import re
from typing import Union

from bittensor_wallet.utils import SS58_FORMAT
from scalecodec.utils.ss58 import ss58_encode

_H160_RE = re.compile(r"^(0x)?[0-9a-fA-F]{40}$")


def is_h160_address(address: str) -> bool:
    """Returns `True` if `address` looks like a 20-byte hex EVM address."""
    return isinstance(address, str) and bool(_H160_RE.match(address))


def public_key_to_ss58(public_key: Union[bytes, str], ss58_format: int = SS58_FORMAT) -> str:
    """Encodes a 32-byte public key (raw bytes or hex string) as an SS58 address."""
    if isinstance(public_key, bytes):
        public_key = public_key.hex()
    return ss58_encode(public_key, ss58_format=ss58_format)


def h160_to_ss58(address: str, ss58_format: int = SS58_FORMAT) -> str:
    """Maps an EVM address to the substrate account that backs it on chain.

    The frontier `HashedAddressMapping` account is `blake2b_256(b"evm:" + h160)`.

    Parameters:
        address: The H160 address, with or without the `0x` prefix.
        ss58_format: SS58 prefix of the resulting address.

    Returns:
        The SS58 encoded mirror account.

    Raises:
        ValueError: If `address` is not a 20-byte hex string.
    """
    if not is_h160_address(address):
        raise ValueError(f"Invalid H160 address: {address!r}.")
    raw = bytes.fromhex(address[2:] if address.startswith("0x") else address)
    digest = hashlib.blake2b(b"evm:" + raw, digest_size=32).digest()
    return public_key_to_ss58(digest, ss58_format=ss58_format)


def to_ss58(address: str) -> str:
    """Returns SS58 addresses unchanged and maps H160 addresses to their mirror account."""
    if is_h160_address(address):
        return h160_to_ss58(address)
    return address
