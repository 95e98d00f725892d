"""Hotspot operations: gateway devices registered on the network."""

from enum import Enum

from helium_nodes.registry.models import (
    HttpMethod,
    OperationDescriptor,
    ParameterLocation,
    ParameterSpec,
    Resource,
)

from .common import CONTENT_TYPE_JSON, address, cursor, limit, time_bound


class HotspotOperation(str, Enum):
    LIST_HOTSPOTS = "listHotspots"
    GET_HOTSPOT = "getHotspot"
    GET_HOTSPOT_ACTIVITY = "getHotspotActivity"
    GET_HOTSPOT_REWARDS = "getHotspotRewards"
    GET_HOTSPOT_WITNESSES = "getHotspotWitnesses"
    GET_HOTSPOT_CHALLENGED = "getHotspotChallenged"
    UPDATE_HOTSPOT = "updateHotspot"


_ADDRESS = address("Hotspot Address", "The hotspot address")


def _op(operation: HotspotOperation, **kwargs) -> OperationDescriptor:
    return OperationDescriptor(
        resource=Resource.HOTSPOTS,
        operation=operation.value,
        headers=CONTENT_TYPE_JSON,
        **kwargs,
    )


DESCRIPTORS = [
    _op(
        HotspotOperation.LIST_HOTSPOTS,
        name="List Hotspots",
        description="Get all hotspots with pagination",
        action="List hotspots",
        path="/hotspots",
        parameters=(cursor(), limit(100, "Number of results to return")),
    ),
    _op(
        HotspotOperation.GET_HOTSPOT,
        name="Get Hotspot",
        description="Get specific hotspot by address",
        action="Get hotspot",
        path="/hotspots/{address}",
        parameters=(_ADDRESS,),
    ),
    _op(
        HotspotOperation.GET_HOTSPOT_ACTIVITY,
        name="Get Hotspot Activity",
        description="Get hotspot activity history",
        action="Get hotspot activity",
        path="/hotspots/{address}/activity",
        parameters=(_ADDRESS, cursor(), limit(100, "Number of results to return")),
    ),
    _op(
        HotspotOperation.GET_HOTSPOT_REWARDS,
        name="Get Hotspot Rewards",
        description="Get rewards earned by hotspot",
        action="Get hotspot rewards",
        path="/hotspots/{address}/rewards",
        parameters=(
            _ADDRESS,
            time_bound("min_time", "Min Time", "Minimum time for rewards query"),
            time_bound("max_time", "Max Time", "Maximum time for rewards query"),
        ),
    ),
    _op(
        HotspotOperation.GET_HOTSPOT_WITNESSES,
        name="Get Hotspot Witnesses",
        description="Get hotspots witnessed by this hotspot",
        action="Get hotspot witnesses",
        path="/hotspots/{address}/witnesses",
        parameters=(_ADDRESS, cursor()),
    ),
    _op(
        HotspotOperation.GET_HOTSPOT_CHALLENGED,
        name="Get Hotspot Challenged",
        description="Get challenge activity for hotspot",
        action="Get hotspot challenged",
        path="/hotspots/{address}/challenged",
        parameters=(_ADDRESS, cursor()),
    ),
    _op(
        HotspotOperation.UPDATE_HOTSPOT,
        name="Update Hotspot",
        description="Update hotspot settings like name or location",
        action="Update hotspot",
        method=HttpMethod.PATCH,
        path="/hotspots/{address}",
        parameters=(
            _ADDRESS,
            ParameterSpec(
                name="name",
                display_name="Name",
                default="",
                location=ParameterLocation.BODY,
                description="New name for the hotspot",
            ),
            # A coordinate of exactly 0 cannot be sent: 0 means "leave unchanged"
            ParameterSpec(
                name="lat",
                display_name="Latitude",
                type="number",
                default=0,
                location=ParameterLocation.BODY,
                zero_is_unset=True,
                description="Latitude coordinate",
            ),
            ParameterSpec(
                name="lng",
                display_name="Longitude",
                type="number",
                default=0,
                location=ParameterLocation.BODY,
                zero_is_unset=True,
                description="Longitude coordinate",
            ),
        ),
    ),
]
