"""Blockchain operations: blocks, transactions and network statistics."""

from enum import Enum

from helium_nodes.registry.models import (
    HttpMethod,
    OperationDescriptor,
    ParameterLocation,
    ParameterSpec,
    Resource,
)

from .common import CONTENT_TYPE_JSON, cursor, limit


class BlockchainOperation(str, Enum):
    LIST_BLOCKS = "listBlocks"
    GET_BLOCK = "getBlock"
    GET_BLOCK_TRANSACTIONS = "getBlockTransactions"
    GET_TRANSACTION = "getTransaction"
    GET_PENDING_TRANSACTIONS = "getPendingTransactions"
    BROADCAST_TRANSACTION = "broadcastTransaction"
    GET_NETWORK_STATS = "getNetworkStats"


def _height(description: str) -> ParameterSpec:
    return ParameterSpec(
        name="height",
        display_name="Block Height",
        type="number",
        required=True,
        default="",
        location=ParameterLocation.PATH,
        description=description,
    )


def _op(operation: BlockchainOperation, **kwargs) -> OperationDescriptor:
    return OperationDescriptor(
        resource=Resource.BLOCKCHAIN,
        operation=operation.value,
        headers=CONTENT_TYPE_JSON,
        **kwargs,
    )


DESCRIPTORS = [
    _op(
        BlockchainOperation.LIST_BLOCKS,
        name="List Blocks",
        description="Get recent blocks with pagination",
        action="List blocks",
        path="/blocks",
        parameters=(cursor(), limit(20)),
    ),
    _op(
        BlockchainOperation.GET_BLOCK,
        name="Get Block",
        description="Get specific block by height",
        action="Get block",
        path="/blocks/{height}",
        parameters=(_height("The block height to retrieve"),),
    ),
    _op(
        BlockchainOperation.GET_BLOCK_TRANSACTIONS,
        name="Get Block Transactions",
        description="Get transactions in a block",
        action="Get block transactions",
        path="/blocks/{height}/transactions",
        parameters=(_height("The block height to get transactions for"), cursor(), limit(20)),
    ),
    _op(
        BlockchainOperation.GET_TRANSACTION,
        name="Get Transaction",
        description="Get transaction details by hash",
        action="Get transaction",
        path="/transactions/{hash}",
        parameters=(
            ParameterSpec(
                name="hash",
                display_name="Transaction Hash",
                required=True,
                default="",
                location=ParameterLocation.PATH,
                description="The transaction hash to retrieve",
            ),
        ),
    ),
    _op(
        BlockchainOperation.GET_PENDING_TRANSACTIONS,
        name="Get Pending Transactions",
        description="Get pending transaction pool",
        action="Get pending transactions",
        path="/pending_transactions",
        parameters=(cursor(), limit(20)),
    ),
    _op(
        BlockchainOperation.BROADCAST_TRANSACTION,
        name="Broadcast Transaction",
        description="Broadcast signed transaction to network",
        action="Broadcast transaction",
        method=HttpMethod.POST,
        path="/transactions",
        parameters=(
            ParameterSpec(
                name="txn",
                display_name="Transaction Data",
                required=True,
                default="",
                location=ParameterLocation.BODY,
                description="The signed transaction data to broadcast",
            ),
        ),
    ),
    _op(
        BlockchainOperation.GET_NETWORK_STATS,
        name="Get Network Stats",
        description="Get current network statistics",
        action="Get network stats",
        path="/stats",
    ),
]
