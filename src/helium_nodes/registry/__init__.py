"""
Operation Registry - Declarative table of Helium resources and operations.

This package provides:
- Resource, ParameterSpec, OperationDescriptor: operation metadata
- OperationRegistry: lookup by resource and operation
- NodePackManifest: metadata for the node pack
"""

from .models import (
    HttpMethod,
    NodePackManifest,
    OperationDescriptor,
    ParameterLocation,
    ParameterSpec,
    Resource,
)
from .registry import (
    OperationRegistry,
    RegistryFrozenError,
    get_registry,
    operations_for,
    parameters_for,
)

__all__ = [
    "HttpMethod",
    "NodePackManifest",
    "OperationDescriptor",
    "ParameterLocation",
    "ParameterSpec",
    "Resource",
    "OperationRegistry",
    "RegistryFrozenError",
    "get_registry",
    "operations_for",
    "parameters_for",
]
