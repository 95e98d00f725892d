"""Parameter and header building blocks shared by the resource tables."""

from typing import Any, Dict, Optional

from helium_nodes.registry.models import ParameterLocation, ParameterSpec

CONTENT_TYPE_JSON: Dict[str, str] = {"Content-Type": "application/json"}
ACCEPT_JSON: Dict[str, str] = {"Accept": "application/json"}


def cursor(description: str = "Cursor for pagination", display_name: str = "Cursor") -> ParameterSpec:
    return ParameterSpec(
        name="cursor",
        display_name=display_name,
        type="string",
        default="",
        description=description,
    )


def limit(
    default: int,
    description: str = "Maximum number of results to return",
    always_send: bool = False,
    type_options: Optional[Dict[str, Any]] = None,
) -> ParameterSpec:
    # limit=0 is never sent unless always_send is set
    return ParameterSpec(
        name="limit",
        display_name="Limit",
        type="number",
        default=default,
        zero_is_unset=True,
        always_send=always_send,
        description=description,
        type_options=type_options,
    )


def address(display_name: str, description: str, location: ParameterLocation = ParameterLocation.PATH) -> ParameterSpec:
    return ParameterSpec(
        name="address",
        display_name=display_name,
        type="string",
        required=True,
        default="",
        location=location,
        description=description,
    )


def time_bound(
    name: str,
    display_name: str,
    description: str,
    wire_name: Optional[str] = None,
    type: str = "dateTime",
    required: bool = False,
    always_send: bool = False,
    placeholder: Optional[str] = None,
) -> ParameterSpec:
    return ParameterSpec(
        name=name,
        display_name=display_name,
        type=type,
        required=required,
        default="",
        wire_name=wire_name,
        always_send=always_send,
        description=description,
        placeholder=placeholder,
    )
