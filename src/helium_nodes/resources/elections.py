"""Election and governance operations: consensus groups, proposals and votes."""

from enum import Enum

from helium_nodes.registry.models import (
    HttpMethod,
    OperationDescriptor,
    ParameterLocation,
    ParameterSpec,
    Resource,
)

from .common import CONTENT_TYPE_JSON, cursor, limit


class ElectionOperation(str, Enum):
    LIST_ELECTIONS = "listElections"
    GET_ELECTION = "getElection"
    GET_CURRENT_ELECTION = "getCurrentElection"
    SUBMIT_VOTE = "submitVote"
    GET_PROPOSAL_VOTES = "getProposalVotes"
    LIST_PROPOSALS = "listProposals"
    GET_PROPOSAL = "getProposal"


def _proposal_id(location: ParameterLocation) -> ParameterSpec:
    return ParameterSpec(
        name="proposalId",
        display_name="Proposal ID",
        required=True,
        default="",
        location=location,
        wire_name="proposal_id" if location == ParameterLocation.BODY else None,
        description="The ID of the governance proposal",
    )


def _op(operation: ElectionOperation, **kwargs) -> OperationDescriptor:
    return OperationDescriptor(
        resource=Resource.ELECTIONS,
        operation=operation.value,
        headers=CONTENT_TYPE_JSON,
        **kwargs,
    )


DESCRIPTORS = [
    _op(
        ElectionOperation.LIST_ELECTIONS,
        name="List Elections",
        description="Get consensus group elections",
        action="List elections",
        path="/elections",
        parameters=(cursor(), limit(100)),
    ),
    _op(
        ElectionOperation.GET_ELECTION,
        name="Get Election",
        description="Get specific election by block height",
        action="Get election",
        path="/elections/{height}",
        parameters=(
            ParameterSpec(
                name="height",
                display_name="Block Height",
                type="number",
                required=True,
                default=0,
                location=ParameterLocation.PATH,
                description="The block height of the election",
            ),
        ),
    ),
    _op(
        ElectionOperation.GET_CURRENT_ELECTION,
        name="Get Current Election",
        description="Get current consensus group",
        action="Get current election",
        path="/elections/current",
    ),
    _op(
        ElectionOperation.SUBMIT_VOTE,
        name="Submit Vote",
        description="Submit governance vote",
        action="Submit vote",
        method=HttpMethod.POST,
        path="/votes",
        parameters=(
            _proposal_id(ParameterLocation.BODY),
            ParameterSpec(
                name="vote",
                display_name="Vote",
                type="options",
                required=True,
                default="yes",
                location=ParameterLocation.BODY,
                options=[
                    {"name": "Yes", "value": "yes"},
                    {"name": "No", "value": "no"},
                    {"name": "Abstain", "value": "abstain"},
                ],
                description="The vote choice",
            ),
            ParameterSpec(
                name="signature",
                display_name="Signature",
                required=True,
                default="",
                location=ParameterLocation.BODY,
                description="Blockchain wallet signature for the vote",
            ),
        ),
    ),
    _op(
        ElectionOperation.GET_PROPOSAL_VOTES,
        name="Get Proposal Votes",
        description="Get votes for governance proposal",
        action="Get proposal votes",
        path="/votes/{proposalId}",
        parameters=(_proposal_id(ParameterLocation.PATH), cursor()),
    ),
    _op(
        ElectionOperation.LIST_PROPOSALS,
        name="List Proposals",
        description="Get active governance proposals",
        action="List proposals",
        path="/proposals",
        parameters=(
            ParameterSpec(
                name="status",
                display_name="Status",
                type="options",
                default="active",
                omit_values=("all",),
                options=[
                    {"name": "Active", "value": "active"},
                    {"name": "Pending", "value": "pending"},
                    {"name": "Closed", "value": "closed"},
                    {"name": "All", "value": "all"},
                ],
                description="Filter proposals by status",
            ),
            cursor(),
        ),
    ),
    _op(
        ElectionOperation.GET_PROPOSAL,
        name="Get Proposal",
        description="Get specific governance proposal",
        action="Get proposal",
        path="/proposals/{proposalId}",
        parameters=(_proposal_id(ParameterLocation.PATH),),
    ),
]
