"""
Base credential class that all credential types should inherit from.
"""
from typing import Any, ClassVar, Dict, List, Optional


class BaseCredential:
    """Base class for all credential types"""
    
    # Class variables to be overridden by subclasses
    name: ClassVar[str] = ""
    display_name: ClassVar[str] = ""
    properties: ClassVar[List[Dict[str, Any]]] = []
    
    def __init__(self, data: Optional[Dict[str, Any]] = None):
        """
        Args:
            data: Dictionary containing credential values
        """
        self.data = dict(data or {})
    
    @classmethod
    def get_definition(cls) -> Dict[str, Any]:
        """Get the credential type definition for registration"""
        return {
            "name": cls.name,
            "display_name": cls.display_name,
            "properties": cls.properties,
        }
    
    async def test(self) -> Dict[str, Any]:
        """
        Test if the credential works against the remote service
        
        Returns:
            Dictionary with test results (success, message)
        """
        raise NotImplementedError("Test method not implemented")
    
    def validate(self) -> Dict[str, Any]:
        """
        Validate that all required properties are provided
        
        Returns:
            Dictionary with validation results
        """
        missing_fields = [
            prop["name"]
            for prop in self.properties
            if prop.get("required", False) and not (self.data.get(prop["name"]) or prop.get("default"))
        ]
        
        if missing_fields:
            return {
                "valid": False,
                "message": f"Missing required fields: {', '.join(missing_fields)}"
            }
        
        return {"valid": True}
