"""
Node SDK - Minimal Python node execution semantics.

This package provides the runtime contract for Helium nodes:
- NodeExecutionContext: Runtime context for a node
- BaseNode: Abstract base class for node implementations
- HttpClient: Timeout-bounded JSON transport

All nodes execute synchronously.
"""

from .basenode import (
    BaseNode,
    NodeExecutionContext,
    NodeExecutionData,
    PairedItem,
    NodeParameterType,
    NodeOperationError,
    NodeValidationError,
    NodeApiError,
)
from .http import HttpClient, HttpResponse, HttpApiError, NodeTimeoutError

__all__ = [
    "NodeExecutionData",
    "PairedItem",
    # Context
    "NodeExecutionContext",
    # Base class
    "BaseNode",
    "NodeParameterType",
    # Errors
    "NodeOperationError", 
    "NodeValidationError",
    "NodeApiError",
    "HttpApiError",
    "NodeTimeoutError",
    # HTTP
    "HttpClient",
    "HttpResponse",
]
