"""
Helium Network API credential for accessing the Helium blockchain API.
"""
from typing import Any, Dict

import aiohttp

from helium_nodes.config import DEFAULT_BASE_URL
from helium_nodes.models import HeliumCredential

from .base import BaseCredential


class HeliumNetworkApiCredential(BaseCredential):
    """Helium Network API credential implementation"""
    
    name = "heliumNetworkApi"
    display_name = "Helium Network API"
    properties = [
        {
            "name": "apiKey",
            "displayName": "API Key",
            "type": "password",
            "required": False,
            "default": "",
            "description": "API key for Helium Network (optional for public endpoints)"
        },
        {
            "name": "baseUrl",
            "displayName": "Base URL",
            "type": "string",
            "required": True,
            "default": DEFAULT_BASE_URL,
            "description": "Base URL for Helium Network API"
        },
    ]
    
    def to_connection(self) -> HeliumCredential:
        """Resolved credential used by the request dispatcher"""
        return HeliumCredential.from_dict(self.data)
    
    async def test(self) -> Dict[str, Any]:
        """
        Test the credential by fetching network stats
        
        Returns:
            Dictionary with test results
        """
        validation = self.validate()
        if not validation["valid"]:
            return {
                "success": False,
                "message": validation["message"]
            }
        
        connection = self.to_connection()
        url = f"{connection.base_url}/stats"
        
        try:
            timeout = aiohttp.ClientTimeout(total=30)
            async with aiohttp.ClientSession(timeout=timeout) as session:
                async with session.get(url, headers=connection.auth_headers()) as response:
                    if response.status == 200:
                        return {
                            "success": True,
                            "message": "Connection to Helium Network API successful"
                        }
                    error_text = await response.text()
                    return {
                        "success": False,
                        "message": f"API error {response.status}: {error_text}"
                    }
        
        except aiohttp.ClientConnectorError:
            return {
                "success": False,
                "message": f"Connection error: Could not reach {connection.base_url}"
            }
        except Exception as e:
            return {
                "success": False,
                "message": f"Error testing credential: {str(e)}"
            }
