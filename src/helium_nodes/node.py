"""
Helium Network Node - Query and update the Helium blockchain API.

SYNC-WORKER SAFE: uses the timeout-bounded HttpClient.
"""

from __future__ import annotations

from typing import List, Optional

from helium_nodes.config import get_settings
from helium_nodes.dispatcher import HttpClientProtocol, RequestDispatcher
from helium_nodes.models import HeliumCredential
from helium_nodes.observability import get_logger, with_node_context
from helium_nodes.registry import get_registry
from helium_nodes.sdk import BaseNode, HttpClient, NodeExecutionData

CREDENTIAL_NAME = "heliumNetworkApi"

logger = get_logger(__name__)


class HeliumNetworkNode(BaseNode):
    """
    Helium Network Node - One node for every Helium API resource.
    
    The resource and operation are chosen once per batch; every other
    parameter is read per item.
    """
    
    type = "heliumNetwork"
    version = 1
    
    description = {
        "displayName": "Helium Network",
        "name": "heliumNetwork",
        "icon": "file:heliumnetwork.svg",
        "group": ["transform"],
        "subtitle": '={{$parameter["operation"] + ": " + $parameter["resource"]}}',
        "description": "Interact with Helium Network blockchain API",
        "documentationUrl": "https://docs.helium.com/api/",
        "version": 1,
        "inputs": ["main"],
        "outputs": ["main"],
    }
    
    properties = {
        "parameters": get_registry().build_node_properties(),
        "credentials": [
            {"name": CREDENTIAL_NAME, "required": True},
        ],
    }
    
    def __init__(self, http_client: Optional[HttpClientProtocol] = None) -> None:
        """
        Args:
            http_client: Transport to use instead of a fresh HttpClient
        """
        super().__init__()
        self._http_client = http_client
    
    def execute(self) -> List[List[NodeExecutionData]]:
        """Run the selected operation once per input item."""
        items = self.get_input_data()
        resource = self.get_node_parameter("resource", 0)
        operation = self.get_node_parameter("operation", 0)
        
        settings = get_settings()
        credential = HeliumCredential.from_dict(
            self.get_credentials(CREDENTIAL_NAME),
            default_base_url=settings.default_base_url,
        )
        http_client = self._http_client or HttpClient(timeout=settings.http_timeout_s)
        
        logger.info(
            f"Executing {resource}.{operation} for {len(items)} items",
            extra=with_node_context(node_type=self.type, resource=resource, operation=operation),
        )
        
        dispatcher = RequestDispatcher(http_client, node=self)
        records = dispatcher.dispatch(
            resource,
            operation,
            items,
            credential,
            get_parameter=self.get_node_parameter,
            continue_on_fail=self.continue_on_fail,
        )
        return [records]


__all__ = ["CREDENTIAL_NAME", "HeliumNetworkNode"]
