"""
Resource tables for the Helium node.

Each module declares a closed operation enum for one resource and the
OperationDescriptor for every member of that enum.
"""

from . import accounts, blockchain, elections, hotspots, rewards, validators
from .accounts import AccountOperation
from .blockchain import BlockchainOperation
from .elections import ElectionOperation
from .hotspots import HotspotOperation
from .rewards import RewardOperation
from .validators import ValidatorOperation

RESOURCE_MODULES = (hotspots, accounts, validators, rewards, blockchain, elections)


def all_descriptors():
    """Every operation descriptor, grouped by resource in declaration order."""
    for module in RESOURCE_MODULES:
        yield from module.DESCRIPTORS


__all__ = [
    "AccountOperation",
    "BlockchainOperation",
    "ElectionOperation",
    "HotspotOperation",
    "RewardOperation",
    "ValidatorOperation",
    "RESOURCE_MODULES",
    "all_descriptors",
]
