"""
BaseNode - Abstract base class for Helium node implementations.

Nodes inherit from BaseNode and implement the execute() method.
The host runtime supplies parameters, credentials and input items
through a NodeExecutionContext.

SYNC-WORKER SAFE: execute() is synchronous.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Literal, Optional, TypedDict


# ==============================================================================
# NodeParameterType
# ==============================================================================

NodeParameterType = Literal["string", "number", "dateTime", "options"]


# ==============================================================================
# NodeExecutionData - Output data format
# ==============================================================================

class PairedItem(TypedDict):
    item: int


class NodeExecutionData(TypedDict, total=False):
    """
    Single item of execution output data.
    
    Format: {"json": {...}, "pairedItem": {"item": 0}}
    """
    json: Any
    pairedItem: PairedItem


# ==============================================================================
# BaseNode - Abstract base class
# ==============================================================================

class BaseNode(ABC):
    """
    Abstract base class for all node implementations.
    
    Nodes define:
    - type: Unique identifier (e.g., "heliumNetwork")
    - version: Node version number
    - description: Node metadata dict
    - properties: Parameters and credentials
    
    And implement execute() which processes input items.
    
    Example:
    
        class PingNode(BaseNode):
            type = "ping"
            version = 1
            
            def execute(self) -> List[List[NodeExecutionData]]:
                items = self.get_input_data()
                return [[
                    {"json": {"pong": True}, "pairedItem": {"item": i}}
                    for i in range(len(items))
                ]]
    """
    
    # Required class attributes (override in subclasses)
    type: str = "base"
    version: int = 1
    
    description: Dict[str, Any] = {
        "displayName": "Base Node",
        "name": "base",
        "description": "",
        "group": [],
        "version": 1,
        "inputs": ["main"],
        "outputs": ["main"],
    }
    
    properties: Dict[str, Any] = {
        "parameters": [],
        "credentials": [],
    }
    
    # Continue processing other items if one fails
    continue_on_fail: bool = False
    
    def __init__(self) -> None:
        """Initialize node instance."""
        self._context: Optional[NodeExecutionContext] = None
    
    @abstractmethod
    def execute(self) -> List[List[NodeExecutionData]]:
        """
        Execute node operation.
        
        Returns:
            List[List[NodeExecutionData]]: Nested list of execution results.
            - Outer list represents output branches (always 1 here)
            - Inner list represents items in that branch
            
        Raises:
            NodeOperationError: On operation failure
            NodeApiError: On API call failure
        """
        raise NotImplementedError
    
    # ==== Context Management ====
    
    def set_context(self, context: "NodeExecutionContext") -> None:
        """Set the execution context."""
        self._context = context
        self.continue_on_fail = context.continue_on_fail
    
    # ==== Helper methods for subclasses ====
    
    def get_node_parameter(
        self, 
        name: str, 
        item_index: int = 0,
        default: Any = None,
    ) -> Any:
        """
        Get parameter value.
        
        Args:
            name: Parameter name
            item_index: Index of item (per-item values take precedence)
            default: Default if not set
        """
        if self._context is None:
            return default
        return self._context.get_node_parameter(name, item_index, default)
    
    def get_credentials(self, name: str) -> Dict[str, Any]:
        """
        Get credentials by type name.
        
        Args:
            name: Credential type name (e.g., "heliumNetworkApi")
            
        Returns:
            Credentials dict with decrypted values
        """
        if self._context is None:
            raise NodeOperationError("No context set", node=self)
        return self._context.get_credentials(name)
    
    def get_input_data(self) -> List[Dict[str, Any]]:
        """
        Get input items from previous node.
        
        Returns:
            List of input items, each with 'json' key.
        """
        if self._context is None:
            return []
        return self._context.get_input_data()
    
    @classmethod
    def get_definition(cls) -> Dict[str, Any]:
        """Get full node definition for registration."""
        return {
            "type": cls.type,
            "version": cls.version,
            "description": cls.description,
            "properties": cls.properties,
        }


# ==============================================================================
# NodeExecutionContext - Runtime context for node execution
# ==============================================================================

class NodeExecutionContext:
    """
    Runtime context provided to nodes during execution.
    
    Provides access to:
    - Parameters (node-level, optionally overridden per item)
    - Credentials
    - Input data
    - The batch continue-on-fail flag
    """
    
    def __init__(
        self,
        parameters: Dict[str, Any],
        credentials: Dict[str, Dict[str, Any]],
        input_data: List[Dict[str, Any]],
        item_parameters: Optional[List[Dict[str, Any]]] = None,
        continue_on_fail: bool = False,
    ) -> None:
        self._parameters = parameters
        self._credentials = credentials
        self._input_data = input_data
        self._item_parameters = item_parameters or []
        self.continue_on_fail = continue_on_fail
    
    def get_node_parameter(
        self, 
        name: str, 
        item_index: int = 0,
        default: Any = None,
    ) -> Any:
        """Get parameter value, preferring the per-item value when present."""
        if 0 <= item_index < len(self._item_parameters):
            overrides = self._item_parameters[item_index] or {}
            if name in overrides:
                return overrides[name]
        return self._parameters.get(name, default)
    
    def get_credentials(self, name: str) -> Dict[str, Any]:
        """Get credentials by type name."""
        if name not in self._credentials:
            raise NodeOperationError(f"Credentials '{name}' not found")
        return self._credentials[name]
    
    def get_input_data(self) -> List[Dict[str, Any]]:
        """Get input items."""
        return self._input_data


# ==============================================================================
# Errors
# ==============================================================================

class NodeOperationError(Exception):
    """Error during node operation."""
    
    def __init__(
        self,
        message: str,
        node: Optional[BaseNode] = None,
        item_index: Optional[int] = None,
    ) -> None:
        self.message = message
        self.node = node
        self.item_index = item_index
        super().__init__(message)


class NodeValidationError(NodeOperationError):
    """Missing or invalid parameter, or an unknown resource/operation."""


class NodeApiError(NodeOperationError):
    """Error from external API call."""
    
    def __init__(
        self,
        message: str,
        node: Optional[BaseNode] = None,
        status_code: Optional[int] = None,
        response_body: Any = None,
        item_index: Optional[int] = None,
    ) -> None:
        super().__init__(message, node, item_index)
        self.status_code = status_code
        self.response_body = response_body


# ==============================================================================
# Exports
# ==============================================================================

__all__ = [
    "BaseNode",
    "NodeExecutionContext",
    "NodeExecutionData",
    "PairedItem",
    "NodeParameterType",
    "NodeOperationError",
    "NodeValidationError",
    "NodeApiError",
]
