"""Validator operations: staked consensus participants."""

from enum import Enum

from helium_nodes.registry.models import (
    HttpMethod,
    OperationDescriptor,
    ParameterLocation,
    ParameterSpec,
    Resource,
)

from .common import CONTENT_TYPE_JSON, address, cursor, limit, time_bound


class ValidatorOperation(str, Enum):
    LIST_VALIDATORS = "listValidators"
    GET_VALIDATOR = "getValidator"
    GET_VALIDATOR_ACTIVITY = "getValidatorActivity"
    GET_VALIDATOR_REWARDS = "getValidatorRewards"
    CREATE_VALIDATOR = "createValidator"
    UPDATE_VALIDATOR = "updateValidator"
    UNSTAKE_VALIDATOR = "unstakeValidator"


_ADDRESS = address("Validator Address", "The validator address")
# Validator listings always send limit, even 0
_LIMIT = limit(20, always_send=True)


def _op(operation: ValidatorOperation, **kwargs) -> OperationDescriptor:
    return OperationDescriptor(
        resource=Resource.VALIDATORS,
        operation=operation.value,
        headers=CONTENT_TYPE_JSON,
        **kwargs,
    )


DESCRIPTORS = [
    _op(
        ValidatorOperation.LIST_VALIDATORS,
        name="List Validators",
        description="Get all validators with pagination",
        action="List validators",
        path="/validators",
        parameters=(cursor(), _LIMIT),
    ),
    _op(
        ValidatorOperation.GET_VALIDATOR,
        name="Get Validator",
        description="Get specific validator by address",
        action="Get validator",
        path="/validators/{address}",
        parameters=(_ADDRESS,),
    ),
    _op(
        ValidatorOperation.GET_VALIDATOR_ACTIVITY,
        name="Get Validator Activity",
        description="Get validator activity and consensus participation",
        action="Get validator activity",
        path="/validators/{address}/activity",
        parameters=(
            _ADDRESS,
            cursor("Cursor for paginating activity results", display_name="Activity Cursor"),
            _LIMIT,
        ),
    ),
    _op(
        ValidatorOperation.GET_VALIDATOR_REWARDS,
        name="Get Validator Rewards",
        description="Get rewards earned by validator",
        action="Get validator rewards",
        path="/validators/{address}/rewards",
        parameters=(
            _ADDRESS,
            time_bound("min_time", "Min Time", "Minimum time for reward period"),
            time_bound("max_time", "Max Time", "Maximum time for reward period"),
        ),
    ),
    _op(
        ValidatorOperation.CREATE_VALIDATOR,
        name="Create Validator",
        description="Stake HNT to create a new validator",
        action="Create validator",
        method=HttpMethod.POST,
        path="/validators",
        parameters=(
            address(
                "Validator Address",
                "The validator address to create",
                location=ParameterLocation.BODY,
            ),
            ParameterSpec(
                name="stake",
                display_name="Stake Amount",
                type="number",
                required=True,
                default=10000,
                location=ParameterLocation.BODY,
                always_send=True,
                description="Amount of HNT to stake (minimum 10,000 HNT)",
            ),
        ),
    ),
    _op(
        ValidatorOperation.UPDATE_VALIDATOR,
        name="Update Validator",
        description="Update validator settings",
        action="Update validator",
        method=HttpMethod.PATCH,
        path="/validators/{address}",
        parameters=(
            _ADDRESS,
            ParameterSpec(
                name="name",
                display_name="Validator Name",
                required=True,
                default="",
                location=ParameterLocation.BODY,
                description="New name for the validator",
            ),
        ),
    ),
    _op(
        ValidatorOperation.UNSTAKE_VALIDATOR,
        name="Unstake Validator",
        description="Initiate validator unstaking process",
        action="Unstake validator",
        method=HttpMethod.DELETE,
        path="/validators/{address}/stake",
        parameters=(_ADDRESS,),
    ),
]
