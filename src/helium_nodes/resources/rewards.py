"""Reward operations: sums, per-block distributions, claims and oracle price."""

from enum import Enum

from helium_nodes.registry.models import (
    HttpMethod,
    OperationDescriptor,
    ParameterLocation,
    ParameterSpec,
    Resource,
)

from .common import CONTENT_TYPE_JSON, cursor, limit, time_bound


class RewardOperation(str, Enum):
    GET_REWARDS_SUM = "getRewardsSum"
    GET_BLOCK_REWARDS_BY_ACCOUNT = "getBlockRewardsByAccount"
    GET_BLOCK_REWARDS_BY_HOTSPOT = "getBlockRewardsByHotspot"
    CLAIM_REWARDS = "claimRewards"
    GET_ORACLE_PRICE = "getOraclePrice"
    GET_REWARD_PREDICTIONS = "getRewardPredictions"


_BLOCK = ParameterSpec(
    name="block",
    display_name="Block Number",
    type="number",
    required=True,
    default=0,
    location=ParameterLocation.PATH,
    description="The block number to get rewards for",
)


def _op(operation: RewardOperation, **kwargs) -> OperationDescriptor:
    return OperationDescriptor(
        resource=Resource.REWARDS,
        operation=operation.value,
        headers=CONTENT_TYPE_JSON,
        **kwargs,
    )


DESCRIPTORS = [
    _op(
        RewardOperation.GET_REWARDS_SUM,
        name="Get Rewards Sum",
        description="Get total rewards for time period",
        action="Get rewards sum",
        path="/rewards/sum",
        parameters=(
            time_bound(
                "minTime",
                "Min Time",
                "Minimum time for the reward period (ISO 8601 format)",
                wire_name="min_time",
                type="string",
                required=True,
                always_send=True,
            ),
            time_bound(
                "maxTime",
                "Max Time",
                "Maximum time for the reward period (ISO 8601 format)",
                wire_name="max_time",
                type="string",
                required=True,
                always_send=True,
            ),
            ParameterSpec(
                name="bucket",
                display_name="Bucket",
                type="options",
                required=True,
                default="day",
                always_send=True,
                options=[
                    {"name": "Hour", "value": "hour"},
                    {"name": "Day", "value": "day"},
                    {"name": "Week", "value": "week"},
                    {"name": "Month", "value": "month"},
                ],
                description="Time bucket for grouping rewards",
            ),
        ),
    ),
    _op(
        RewardOperation.GET_BLOCK_REWARDS_BY_ACCOUNT,
        name="Get Block Rewards By Account",
        description="Get reward distribution for specific block by account",
        action="Get block rewards by account",
        path="/rewards/{block}/accounts",
        parameters=(_BLOCK, cursor(), limit(100)),
    ),
    _op(
        RewardOperation.GET_BLOCK_REWARDS_BY_HOTSPOT,
        name="Get Block Rewards By Hotspot",
        description="Get hotspot rewards for specific block",
        action="Get block rewards by hotspot",
        path="/rewards/{block}/hotspots",
        parameters=(_BLOCK, cursor(), limit(100)),
    ),
    _op(
        RewardOperation.CLAIM_REWARDS,
        name="Claim Rewards",
        description="Claim pending rewards to wallet",
        action="Claim rewards",
        method=HttpMethod.POST,
        path="/rewards/claim",
        parameters=(
            ParameterSpec(
                name="account",
                display_name="Account Address",
                required=True,
                default="",
                location=ParameterLocation.BODY,
                description="The account address to claim rewards for",
            ),
            ParameterSpec(
                name="signature",
                display_name="Signature",
                required=True,
                default="",
                location=ParameterLocation.BODY,
                description="Blockchain wallet signature for reward claim authorization",
            ),
        ),
    ),
    _op(
        RewardOperation.GET_ORACLE_PRICE,
        name="Get Oracle Price",
        description="Get current HNT oracle price",
        action="Get oracle price",
        path="/rewards/oracle",
    ),
    _op(
        RewardOperation.GET_REWARD_PREDICTIONS,
        name="Get Reward Predictions",
        description="Get predicted rewards for next epoch",
        action="Get reward predictions",
        path="/rewards/predictions",
        parameters=(
            ParameterSpec(
                name="address",
                display_name="Address",
                required=True,
                default="",
                always_send=True,
                description="The address to get reward predictions for",
            ),
            ParameterSpec(
                name="type",
                display_name="Type",
                type="options",
                default="account",
                always_send=True,
                options=[
                    {"name": "Account", "value": "account"},
                    {"name": "Hotspot", "value": "hotspot"},
                    {"name": "Validator", "value": "validator"},
                ],
                description="Type of entity to get predictions for",
            ),
        ),
    ),
]
