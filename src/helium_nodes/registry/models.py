"""
Registry Models - Metadata structures for operations and node packs.
"""

from __future__ import annotations

import re
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

from helium_nodes.sdk.basenode import NodeParameterType


class Resource(str, Enum):
    """Resources exposed by the Helium node."""
    HOTSPOTS = "hotspots"
    ACCOUNTS = "accounts"
    VALIDATORS = "validators"
    REWARDS = "rewards"
    BLOCKCHAIN = "blockchain"
    ELECTIONS = "elections"


class HttpMethod(str, Enum):
    GET = "GET"
    POST = "POST"
    PATCH = "PATCH"
    DELETE = "DELETE"


class ParameterLocation(str, Enum):
    """Where a parameter value ends up in the request."""
    PATH = "path"
    QUERY = "query"
    BODY = "body"


_PATH_PLACEHOLDER = re.compile(r"\{(\w+)\}")


class ParameterSpec(BaseModel):
    """
    A single parameter an operation reads for every item.
    
    Omission rules for query/body fields:
    - None and "" are always treated as absent
    - zero_is_unset: 0 is treated as absent too
    - omit_values: extra sentinel values treated as absent
    - always_send: never omitted (overrides the rules above)
    """
    model_config = ConfigDict(frozen=True)
    
    name: str = Field(..., description="Parameter key (internal name)")
    display_name: str = Field(..., description="Human-readable label")
    type: NodeParameterType = Field("string", description="Parameter type")
    required: bool = Field(False, description="Is parameter required?")
    default: Any = Field(None, description="Default value")
    location: ParameterLocation = Field(ParameterLocation.QUERY)
    wire_name: Optional[str] = Field(
        None,
        description="Key sent to the API (defaults to name)",
    )
    zero_is_unset: bool = Field(False, description="Treat 0 as absent")
    omit_values: Tuple[Any, ...] = Field(default_factory=tuple)
    always_send: bool = Field(False)
    description: Optional[str] = Field(None, description="Help text")
    placeholder: Optional[str] = Field(None)
    options: Optional[List[Dict[str, Any]]] = Field(
        None,
        description="Choices for the options type",
    )
    type_options: Optional[Dict[str, Any]] = Field(None)
    
    @property
    def key(self) -> str:
        return self.wire_name or self.name
    
    @property
    def option_values(self) -> List[Any]:
        return [option["value"] for option in self.options or []]
    
    def is_absent(self, value: Any) -> bool:
        """Whether value should be left out of the query string or body."""
        if self.always_send:
            return value is None
        if value is None or value == "":
            return True
        if self.zero_is_unset and not isinstance(value, bool) and value == 0:
            return True
        return value in self.omit_values


class OperationDescriptor(BaseModel):
    """
    Static description of one (resource, operation) pair.
    
    path is a template relative to the credential base URL; each
    {placeholder} must name a PATH parameter.
    """
    model_config = ConfigDict(frozen=True)
    
    resource: Resource
    operation: str = Field(..., description="Operation value (e.g. 'listHotspots')")
    name: str = Field(..., description="Human-readable name")
    description: str = Field("")
    action: str = Field("")
    method: HttpMethod = Field(HttpMethod.GET)
    path: str = Field(..., description="Path template, e.g. '/hotspots/{address}'")
    parameters: Tuple[ParameterSpec, ...] = Field(default_factory=tuple)
    headers: Dict[str, str] = Field(default_factory=dict)
    
    @property
    def key(self) -> Tuple[Resource, str]:
        return (self.resource, self.operation)
    
    @property
    def path_fields(self) -> List[str]:
        return _PATH_PLACEHOLDER.findall(self.path)
    
    def parameters_at(self, location: ParameterLocation) -> List[ParameterSpec]:
        return [p for p in self.parameters if p.location == location]


class NodePackManifest(BaseModel):
    """
    Manifest for a node pack (collection of nodes).
    
    Used for discovery and registration of bundled nodes.
    """
    model_config = ConfigDict(extra="allow")
    
    name: str = Field(..., description="Pack name")
    version: str = Field("1.0.0", description="Pack version")
    description: str = Field("", description="Pack description")
    
    author: str = Field("", description="Author name")
    license: str = Field("MIT", description="License type")
    
    nodes: List[str] = Field(
        default_factory=list,
        description="List of node types in this pack"
    )
    credentials: List[str] = Field(
        default_factory=list,
        description="List of credential types in this pack"
    )
    
    entry_point: str = Field(
        "",
        description="Module path for node discovery"
    )


__all__ = [
    "Resource",
    "HttpMethod",
    "ParameterLocation",
    "ParameterSpec",
    "OperationDescriptor",
    "NodePackManifest",
]
