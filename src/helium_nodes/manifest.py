"""
Helium Node Pack Manifest - Registration function for entry-points.
"""

from helium_nodes import __version__
from helium_nodes.credentials import HeliumNetworkApiCredential
from helium_nodes.node import HeliumNetworkNode
from helium_nodes.registry import NodePackManifest


MANIFEST = NodePackManifest(
    name="helium",
    version=__version__,
    description="Helium Network blockchain API node",
    author="helium-nodes",
    license="MIT",
    nodes=[HeliumNetworkNode.type],
    credentials=[HeliumNetworkApiCredential.name],
    entry_point="helium_nodes",
)


# Node classes by type
NODE_CLASSES = {
    HeliumNetworkNode.type: HeliumNetworkNode,
}


def register_nodes():
    """
    Entry point function for node pack discovery.
    
    Returns tuple of (manifest, node_classes).
    """
    return MANIFEST, NODE_CLASSES


__all__ = [
    "MANIFEST",
    "NODE_CLASSES",
    "register_nodes",
]
