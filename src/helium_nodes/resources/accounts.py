"""Account operations: wallets, their holdings, activity and transactions."""

from enum import Enum

from helium_nodes.registry.models import (
    HttpMethod,
    OperationDescriptor,
    ParameterLocation,
    ParameterSpec,
    Resource,
)

from .common import ACCEPT_JSON, CONTENT_TYPE_JSON, address, cursor, limit, time_bound


class AccountOperation(str, Enum):
    GET_ACCOUNT = "getAccount"
    GET_ACCOUNT_HOTSPOTS = "getAccountHotspots"
    GET_ACCOUNT_VALIDATORS = "getAccountValidators"
    GET_ACCOUNT_ACTIVITY = "getAccountActivity"
    GET_ACCOUNT_REWARDS = "getAccountRewards"
    GET_PENDING_TRANSACTIONS = "getPendingTransactions"
    SUBMIT_TRANSACTION = "submitTransaction"


_ADDRESS = address("Account Address", "The Helium account address")
_LIMIT = limit(100, type_options={"minValue": 1, "maxValue": 1000})


def _op(operation: AccountOperation, **kwargs) -> OperationDescriptor:
    kwargs.setdefault("headers", ACCEPT_JSON)
    return OperationDescriptor(
        resource=Resource.ACCOUNTS,
        operation=operation.value,
        **kwargs,
    )


DESCRIPTORS = [
    _op(
        AccountOperation.GET_ACCOUNT,
        name="Get Account",
        description="Get account information by address",
        action="Get account information",
        path="/accounts/{address}",
        parameters=(_ADDRESS,),
    ),
    _op(
        AccountOperation.GET_ACCOUNT_HOTSPOTS,
        name="Get Account Hotspots",
        description="Get hotspots owned by account",
        action="Get account hotspots",
        path="/accounts/{address}/hotspots",
        parameters=(_ADDRESS, cursor(), _LIMIT),
    ),
    _op(
        AccountOperation.GET_ACCOUNT_VALIDATORS,
        name="Get Account Validators",
        description="Get validators owned by account",
        action="Get account validators",
        path="/accounts/{address}/validators",
        parameters=(_ADDRESS, cursor(), _LIMIT),
    ),
    _op(
        AccountOperation.GET_ACCOUNT_ACTIVITY,
        name="Get Account Activity",
        description="Get account transaction activity",
        action="Get account activity",
        path="/accounts/{address}/activity",
        parameters=(
            _ADDRESS,
            cursor(),
            _LIMIT,
            ParameterSpec(
                name="filterTypes",
                display_name="Filter Types",
                wire_name="filter_types",
                default="",
                description="Comma-separated list of transaction types to filter by",
                placeholder="payment_v1,rewards_v1",
            ),
        ),
    ),
    _op(
        AccountOperation.GET_ACCOUNT_REWARDS,
        name="Get Account Rewards",
        description="Get rewards earned by account",
        action="Get account rewards",
        path="/accounts/{address}/rewards",
        parameters=(
            _ADDRESS,
            cursor(),
            time_bound(
                "minTime",
                "Min Time",
                "Minimum time for rewards query (ISO 8601 format)",
                wire_name="min_time",
                type="string",
                placeholder="2023-01-01T00:00:00Z",
            ),
            time_bound(
                "maxTime",
                "Max Time",
                "Maximum time for rewards query (ISO 8601 format)",
                wire_name="max_time",
                type="string",
                placeholder="2023-12-31T23:59:59Z",
            ),
        ),
    ),
    _op(
        AccountOperation.GET_PENDING_TRANSACTIONS,
        name="Get Pending Transactions",
        description="Get pending transactions for account",
        action="Get pending transactions",
        path="/accounts/{address}/pending_transactions",
        parameters=(_ADDRESS,),
    ),
    _op(
        AccountOperation.SUBMIT_TRANSACTION,
        name="Submit Transaction",
        description="Submit a signed transaction",
        action="Submit transaction",
        method=HttpMethod.POST,
        path="/accounts/{address}/transactions",
        headers={**ACCEPT_JSON, **CONTENT_TYPE_JSON},
        parameters=(
            _ADDRESS,
            ParameterSpec(
                name="txn",
                display_name="Transaction Data",
                required=True,
                default="",
                location=ParameterLocation.BODY,
                description="The signed transaction data to submit",
                type_options={"rows": 4},
            ),
        ),
    ),
]
