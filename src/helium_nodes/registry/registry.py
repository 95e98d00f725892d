"""
Operation Registry - Static table of Helium resources and operations.

The registry is filled once from the resource tables and frozen; after
that it only answers lookups. Unknown resources or operations yield empty
results rather than errors.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, Iterator, List, Optional, Tuple, Union

from .models import OperationDescriptor, ParameterLocation, ParameterSpec, Resource


logger = logging.getLogger(__name__)

ResourceLike = Union[Resource, str]


def _as_resource(resource: ResourceLike) -> Optional[Resource]:
    try:
        return Resource(resource)
    except ValueError:
        return None


class RegistryFrozenError(RuntimeError):
    """Raised when registering into a frozen registry."""


class OperationRegistry:
    """
    Central table of (resource, operation) -> OperationDescriptor.
    
    Usage:
        registry = get_registry()
        
        registry.operations_for("hotspots")
        registry.parameters_for("hotspots", "listHotspots")
        descriptor = registry.get("accounts", "submitTransaction")
    """
    
    def __init__(self, descriptors: Optional[Iterable[OperationDescriptor]] = None):
        """Initialize registry, optionally pre-filled."""
        self._operations: Dict[Tuple[Resource, str], OperationDescriptor] = {}
        self._frozen = False
        for descriptor in descriptors or ():
            self.register(descriptor)
    
    def register(self, descriptor: OperationDescriptor) -> OperationDescriptor:
        """
        Register one operation.
        
        Raises:
            RegistryFrozenError: If the registry has been frozen
            ValueError: On a duplicate key or a path placeholder without
                a matching path parameter
        """
        if self._frozen:
            raise RegistryFrozenError("Operation registry is frozen")
        if descriptor.key in self._operations:
            raise ValueError(
                f"Operation '{descriptor.operation}' already registered "
                f"for resource '{descriptor.resource.value}'"
            )
        
        path_params = {p.name for p in descriptor.parameters if p.location == ParameterLocation.PATH}
        missing = [field for field in descriptor.path_fields if field not in path_params]
        if missing:
            raise ValueError(
                f"Path '{descriptor.path}' of '{descriptor.operation}' "
                f"has no parameter for: {', '.join(missing)}"
            )
        
        self._operations[descriptor.key] = descriptor
        logger.debug(f"Registered operation: {descriptor.resource.value}.{descriptor.operation}")
        return descriptor
    
    def freeze(self) -> "OperationRegistry":
        self._frozen = True
        return self
    
    @property
    def frozen(self) -> bool:
        return self._frozen
    
    def get(self, resource: ResourceLike, operation: str) -> Optional[OperationDescriptor]:
        """Get the descriptor of one operation, or None if unknown."""
        key = _as_resource(resource)
        if key is None:
            return None
        return self._operations.get((key, str(operation)))
    
    def resources(self) -> List[Resource]:
        """Resources with at least one operation, in registration order."""
        seen: List[Resource] = []
        for resource, _ in self._operations:
            if resource not in seen:
                seen.append(resource)
        return seen
    
    def operations_for(self, resource: ResourceLike) -> List[OperationDescriptor]:
        """All operations of a resource (empty for an unknown resource)."""
        key = _as_resource(resource)
        return [d for (res, _), d in self._operations.items() if res == key]
    
    def parameters_for(self, resource: ResourceLike, operation: str) -> List[ParameterSpec]:
        """Ordered parameters of an operation (empty if unknown)."""
        descriptor = self.get(resource, operation)
        return list(descriptor.parameters) if descriptor else []
    
    def build_node_properties(self) -> List[Dict[str, Any]]:
        """
        Build host UI parameter definitions.
        
        Produces the resource selector, one operation selector per resource
        and one entry per distinct parameter definition, shown only for the
        operations that use it.
        """
        resources = self.resources()
        properties: List[Dict[str, Any]] = [
            {
                "displayName": "Resource",
                "name": "resource",
                "type": "options",
                "noDataExpression": True,
                "options": [
                    {"name": resource.value.capitalize(), "value": resource.value}
                    for resource in resources
                ],
                "default": resources[0].value if resources else "",
            }
        ]
        
        for resource in resources:
            operations = self.operations_for(resource)
            properties.append({
                "displayName": "Operation",
                "name": "operation",
                "type": "options",
                "noDataExpression": True,
                "displayOptions": {"show": {"resource": [resource.value]}},
                "options": [
                    {
                        "name": d.name,
                        "value": d.operation,
                        "description": d.description,
                        "action": d.action,
                    }
                    for d in operations
                ],
                "default": operations[0].operation,
            })
        
        # Identical definitions are shared across operations of a resource
        grouped: Dict[Tuple[Resource, str], Tuple[ParameterSpec, List[str]]] = {}
        for descriptor in self._operations.values():
            for param in descriptor.parameters:
                key = (descriptor.resource, param.model_dump_json())
                grouped.setdefault(key, (param, []))[1].append(descriptor.operation)

        for (resource, _), (param, operations) in grouped.items():
            properties.append(_parameter_property(param, resource, operations))
        
        return properties
    
    def __len__(self) -> int:
        return len(self._operations)
    
    def __iter__(self) -> Iterator[OperationDescriptor]:
        return iter(self._operations.values())
    
    def __contains__(self, key: Tuple[ResourceLike, str]) -> bool:
        resource, operation = key
        return self.get(resource, operation) is not None


def _parameter_property(param: ParameterSpec, resource: Resource, operations: List[str]) -> Dict[str, Any]:
    prop: Dict[str, Any] = {
        "displayName": param.display_name,
        "name": param.name,
        "type": param.type,
        "required": param.required,
        "displayOptions": {"show": {"resource": [resource.value], "operation": operations}},
        "default": param.default,
    }
    if param.description:
        prop["description"] = param.description
    if param.placeholder:
        prop["placeholder"] = param.placeholder
    if param.options:
        prop["options"] = [dict(option) for option in param.options]
    if param.type_options:
        prop["typeOptions"] = dict(param.type_options)
    return prop


# Global registry instance
_registry: Optional[OperationRegistry] = None


def get_registry() -> OperationRegistry:
    """Get the global operation registry (lazy initialized, frozen)."""
    global _registry
    if _registry is None:
        from helium_nodes.resources import all_descriptors

        _registry = OperationRegistry(all_descriptors()).freeze()
        logger.debug(f"Operation registry loaded with {len(_registry)} operations")
    return _registry


def operations_for(resource: ResourceLike) -> List[OperationDescriptor]:
    """Operations of a resource in the global registry."""
    return get_registry().operations_for(resource)


def parameters_for(resource: ResourceLike, operation: str) -> List[ParameterSpec]:
    """Parameters of an operation in the global registry."""
    return get_registry().parameters_for(resource, operation)


__all__ = [
    "OperationRegistry",
    "RegistryFrozenError",
    "get_registry",
    "operations_for",
    "parameters_for",
]
