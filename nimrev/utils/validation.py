"""Validation utilities"""
from typing import Any

from ..error_handling.scan_errors import ValidationError
from ..models.network import Network

MIN_ADDRESS_LENGTH = 3


def validate_address(address: Any) -> str:
    """Validate an address before scanning.

    Per-chain format checks belong to providers; only type and minimum
    length are enforced here.
    """
    if not isinstance(address, str):
        raise ValidationError(
            "Invalid address",
            [{"field": "address", "message": "Address must be a string", "type": "string_type"}]
        )

    if len(address) < MIN_ADDRESS_LENGTH:
        raise ValidationError(
            "Invalid address",
            [{
                "field": "address",
                "message": f"Address must be at least {MIN_ADDRESS_LENGTH} characters",
                "type": "string_too_short"
            }]
        )

    return address


def validate_network(network: Any) -> Network:
    """Resolve a network name or enum member"""
    try:
        return Network(network)
    except ValueError:
        raise ValidationError(
            "Invalid network",
            [{
                "field": "network",
                "message": f"Network must be one of: {', '.join(Network.values())}",
                "type": "enum"
            }]
        ) from None
