"""
Helium Models - Credential, request and per-item result structures.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, SecretStr, field_validator

from helium_nodes.config import DEFAULT_BASE_URL
from helium_nodes.sdk.basenode import NodeExecutionData


class HeliumCredential(BaseModel):
    """
    Resolved Helium API credential for one node execution.
    
    Built from the host credential dict ({"apiKey": ..., "baseUrl": ...}).
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True)
    
    api_key: Optional[SecretStr] = Field(None, alias="apiKey")
    base_url: str = Field(DEFAULT_BASE_URL, alias="baseUrl")
    
    @field_validator("api_key", mode="before")
    @classmethod
    def empty_key_is_none(cls, v: Any) -> Any:
        return v or None
    
    @field_validator("base_url", mode="before")
    @classmethod
    def normalize_base_url(cls, v: Any) -> str:
        if not v:
            return DEFAULT_BASE_URL
        return str(v).rstrip("/")
    
    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]], default_base_url: Optional[str] = None) -> "HeliumCredential":
        """Create from a host credential dict; missing baseUrl uses default_base_url."""
        data = dict(data or {})
        if not data.get("baseUrl") and default_base_url:
            data["baseUrl"] = default_base_url
        return cls.model_validate(data)
    
    def auth_headers(self) -> Dict[str, str]:
        if self.api_key is None:
            return {}
        return {"Authorization": f"Bearer {self.api_key.get_secret_value()}"}


@dataclass(frozen=True)
class RequestSpec:
    """
    One fully built HTTP request.
    
    query and body are None when there is nothing to send.
    """
    method: str
    url: str
    headers: Dict[str, str] = field(default_factory=dict)
    query: Optional[Dict[str, Any]] = None
    body: Optional[Dict[str, Any]] = None


@dataclass
class ItemResult:
    """
    Outcome of one item: either json (success) or error (failure).
    """
    index: int
    json: Any = None
    error: Optional[Exception] = None
    context: Dict[str, Any] = field(default_factory=dict)
    
    @property
    def is_success(self) -> bool:
        return self.error is None
    
    @property
    def is_error(self) -> bool:
        return self.error is not None
    
    def to_output(self) -> NodeExecutionData:
        """Convert to an output record; errors become {"error": message, ...context}."""
        if self.is_success:
            return {"json": self.json, "pairedItem": {"item": self.index}}
        message = getattr(self.error, "message", None) or str(self.error)
        return {
            "json": {"error": message, **self.context},
            "pairedItem": {"item": self.index},
        }
