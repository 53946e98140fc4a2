from .addresses import h160_to_ss58, is_h160_address, public_key_to_ss58, to_ss58

__all__ = [
    "h160_to_ss58",
    "is_h160_address",
    "public_key_to_ss58",
    "to_ss58",
]
