"""
Credentials package for the Helium node pack.
Each credential type has its own file with definition and testing capabilities.
"""
from typing import Dict, Type

from .base import BaseCredential
from .heliumNetworkApi import HeliumNetworkApiCredential

CREDENTIAL_TYPES: Dict[str, Type[BaseCredential]] = {
    HeliumNetworkApiCredential.name: HeliumNetworkApiCredential,
}


def get_credential_class(name: str) -> Type[BaseCredential]:
    """Get credential class by type name"""
    if name not in CREDENTIAL_TYPES:
        raise KeyError(f"Unknown credential type: {name}")
    return CREDENTIAL_TYPES[name]


__all__ = [
    "BaseCredential",
    "HeliumNetworkApiCredential",
    "CREDENTIAL_TYPES",
    "get_credential_class",
]
