"""
Request Dispatcher - Turns (resource, operation, items) into API calls.

For every input item the dispatcher reads the operation's parameters,
builds a RequestSpec, sends it through the injected HTTP client and
records an ItemResult. The batch policy then either keeps error results
as output records (continue on fail) or raises the first one.

SYNC-WORKER SAFE: items are processed sequentially, in input order.
"""

from __future__ import annotations

from datetime import date, datetime
from typing import Any, Callable, Dict, List, Optional, Protocol, Sequence
from urllib.parse import quote

from helium_nodes.models import HeliumCredential, ItemResult, RequestSpec
from helium_nodes.observability import get_logger, with_node_context
from helium_nodes.registry import (
    OperationDescriptor,
    OperationRegistry,
    ParameterLocation,
    ParameterSpec,
    Resource,
    get_registry,
)
from helium_nodes.sdk.basenode import (
    NodeApiError,
    NodeExecutionData,
    NodeOperationError,
    NodeValidationError,
)
from helium_nodes.sdk.http import HttpApiError


logger = get_logger(__name__)

# get_parameter(name, item_index, default) -> value
ParameterResolver = Callable[[str, int, Any], Any]

# Resources whose error records carry the operation and item index
RESOURCES_WITH_ERROR_CONTEXT = frozenset({Resource.ACCOUNTS})

# Message raised for a 404 when a batch aborts
NOT_FOUND_MESSAGES = {Resource.BLOCKCHAIN: "Resource not found"}


class HttpClientProtocol(Protocol):
    """Transport used by the dispatcher."""
    
    def send(self, spec: RequestSpec) -> Any:
        """
        Execute the request and return the decoded JSON body.
        
        Raises:
            HttpApiError: Non-2xx response or transport failure
        """
        ...


def resolve_operation(
    resource: str,
    operation: str,
    registry: Optional[OperationRegistry] = None,
) -> OperationDescriptor:
    """
    Look up an operation descriptor.
    
    Raises:
        NodeValidationError: If the resource or operation is unknown
    """
    if registry is None:
        registry = get_registry()
    try:
        Resource(resource)
    except ValueError:
        raise NodeValidationError(f'The resource "{resource}" is not supported') from None
    
    descriptor = registry.get(resource, operation)
    if descriptor is None:
        raise NodeValidationError(f"Unknown operation: {operation}")
    return descriptor


def read_parameters(
    descriptor: OperationDescriptor,
    get_parameter: ParameterResolver,
    item_index: int,
) -> Dict[str, Any]:
    """
    Read every declared parameter of an operation for one item.
    
    Raises:
        NodeValidationError: Required parameter missing or an option value
            outside the declared choices
    """
    values: Dict[str, Any] = {}
    for param in descriptor.parameters:
        value = get_parameter(param.name, item_index, param.default)
        
        if param.required and (value is None or value == ""):
            raise NodeValidationError(
                f"Required parameter '{param.name}' not provided",
                item_index=item_index,
            )
        if param.options and value not in (None, "") and value not in param.option_values:
            allowed = ", ".join(str(v) for v in param.option_values)
            raise NodeValidationError(
                f"Invalid value '{value}' for parameter '{param.name}' (allowed: {allowed})",
                item_index=item_index,
            )
        
        values[param.name] = value
    return values


def _wire_value(value: Any) -> Any:
    """Normalize a parameter value for the query string or JSON body."""
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


def _path_segment(value: Any) -> str:
    return quote(str(_wire_value(value)), safe="")


def _collect(params: Sequence[ParameterSpec], values: Dict[str, Any]) -> Dict[str, Any]:
    collected: Dict[str, Any] = {}
    for param in params:
        value = values.get(param.name)
        if param.is_absent(value):
            continue
        collected[param.key] = _wire_value(value)
    return collected


def build_request(
    descriptor: OperationDescriptor,
    credential: HeliumCredential,
    values: Dict[str, Any],
) -> RequestSpec:
    """
    Build the HTTP request for one item.
    
    Args:
        descriptor: Operation to call
        credential: Resolved credential (base URL, API key)
        values: Parameter values read for the item
        
    Returns:
        RequestSpec with empty query/body left as None
    """
    path = descriptor.path
    for field_name in descriptor.path_fields:
        path = path.replace(f"{{{field_name}}}", _path_segment(values.get(field_name)))
    
    query = _collect(descriptor.parameters_at(ParameterLocation.QUERY), values)
    body = _collect(descriptor.parameters_at(ParameterLocation.BODY), values)
    
    headers = {**credential.auth_headers(), **descriptor.headers}
    
    return RequestSpec(
        method=descriptor.method.value,
        url=f"{credential.base_url}{path}",
        headers=headers,
        query=query or None,
        body=body or None,
    )


def classify_error(
    error: Exception,
    item_index: int,
    node: Any = None,
    resource: Optional[Resource] = None,
) -> NodeOperationError:
    """
    Map a failure to the error raised out of the batch.
    
    - HttpApiError with a status code -> NodeApiError (status and body kept);
      a 404 on a resource listed in NOT_FOUND_MESSAGES uses that message
    - NodeOperationError -> itself, with the item index attached
    - anything else -> NodeOperationError with the same message
    """
    if isinstance(error, HttpApiError) and error.status_code is not None:
        message = str(error)
        if error.status_code == 404 and resource in NOT_FOUND_MESSAGES:
            message = NOT_FOUND_MESSAGES[resource]
        return NodeApiError(
            message,
            node=node,
            status_code=error.status_code,
            response_body=error.response_body,
            item_index=item_index,
        )
    if isinstance(error, NodeOperationError):
        if error.item_index is None:
            error.item_index = item_index
        if error.node is None:
            error.node = node
        return error
    return NodeOperationError(str(error), node=node, item_index=item_index)


class RequestDispatcher:
    """
    Executes one operation over a batch of items.
    
    Usage:
        dispatcher = RequestDispatcher(HttpClient(timeout=30))
        records = dispatcher.dispatch(
            "hotspots", "listHotspots", items, credential,
            get_parameter=node.get_node_parameter,
        )
    """
    
    def __init__(
        self,
        http_client: HttpClientProtocol,
        registry: Optional[OperationRegistry] = None,
        node: Any = None,
    ):
        """
        Args:
            http_client: Transport with a send(RequestSpec) method
            registry: Operation registry (global registry by default)
            node: Node reported on raised errors
        """
        self._http = http_client
        self._registry = registry
        self._node = node
    
    def run_item(
        self,
        descriptor: OperationDescriptor,
        credential: HeliumCredential,
        get_parameter: ParameterResolver,
        item_index: int,
    ) -> ItemResult:
        """Process one item. Never raises; failures become error results."""
        context: Dict[str, Any] = {}
        if descriptor.resource in RESOURCES_WITH_ERROR_CONTEXT:
            context = {"operation": descriptor.operation, "itemIndex": item_index}
        
        try:
            values = read_parameters(descriptor, get_parameter, item_index)
            spec = build_request(descriptor, credential, values)
            response = self._http.send(spec)
        except Exception as e:
            logger.error(
                f"Error in operation {descriptor.operation}: {e}",
                extra=with_node_context(
                    resource=descriptor.resource.value,
                    operation=descriptor.operation,
                    item_index=item_index,
                ),
            )
            return ItemResult(index=item_index, error=e, context=context)
        
        return ItemResult(index=item_index, json=response)
    
    def dispatch(
        self,
        resource: str,
        operation: str,
        items: Sequence[Any],
        credential: HeliumCredential,
        get_parameter: ParameterResolver,
        continue_on_fail: bool = False,
    ) -> List[NodeExecutionData]:
        """
        Run the operation once per item.
        
        Returns:
            One output record per input item, in input order
            
        Raises:
            NodeValidationError: Unknown resource/operation (before any item
                runs) or, without continue_on_fail, an invalid item
            NodeApiError: Without continue_on_fail, on the first API error
            NodeOperationError: Without continue_on_fail, on any other failure
        """
        descriptor = resolve_operation(resource, operation, self._registry)
        
        records: List[NodeExecutionData] = []
        for i in range(len(items)):
            result = self.run_item(descriptor, credential, get_parameter, i)
            if result.is_error and not continue_on_fail:
                error = classify_error(result.error, i, self._node, descriptor.resource)
                if error is result.error:
                    raise error
                raise error from result.error
            records.append(result.to_output())
        
        logger.debug(
            f"Dispatched {len(records)} items",
            extra=with_node_context(resource=resource, operation=operation),
        )
        return records


__all__ = [
    "HttpClientProtocol",
    "ParameterResolver",
    "RequestDispatcher",
    "build_request",
    "classify_error",
    "read_parameters",
    "resolve_operation",
]
