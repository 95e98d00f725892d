"""
Helium Network node pack.

Exposes the Helium blockchain API (hotspots, accounts, validators,
rewards, blockchain, elections) as a workflow node.
"""

__version__ = "1.0.0"
