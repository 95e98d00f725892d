"""Tests for the operation registry."""
import pytest

from helium_nodes.registry import (
    HttpMethod,
    OperationDescriptor,
    OperationRegistry,
    ParameterLocation,
    ParameterSpec,
    RegistryFrozenError,
    Resource,
    get_registry,
    operations_for,
    parameters_for,
)


EXPECTED_OPERATIONS = {
    "hotspots": [
        "listHotspots", "getHotspot", "getHotspotActivity", "getHotspotRewards",
        "getHotspotWitnesses", "getHotspotChallenged", "updateHotspot",
    ],
    "accounts": [
        "getAccount", "getAccountHotspots", "getAccountValidators", "getAccountActivity",
        "getAccountRewards", "getPendingTransactions", "submitTransaction",
    ],
    "validators": [
        "listValidators", "getValidator", "getValidatorActivity", "getValidatorRewards",
        "createValidator", "updateValidator", "unstakeValidator",
    ],
    "rewards": [
        "getRewardsSum", "getBlockRewardsByAccount", "getBlockRewardsByHotspot",
        "claimRewards", "getOraclePrice", "getRewardPredictions",
    ],
    "blockchain": [
        "listBlocks", "getBlock", "getBlockTransactions", "getTransaction",
        "getPendingTransactions", "broadcastTransaction", "getNetworkStats",
    ],
    "elections": [
        "listElections", "getElection", "getCurrentElection", "submitVote",
        "getProposalVotes", "listProposals", "getProposal",
    ],
}


class TestGlobalRegistry:
    """Test the registry built from the resource tables."""

    def test_resources_in_order(self):
        assert [r.value for r in get_registry().resources()] == list(EXPECTED_OPERATIONS)

    @pytest.mark.parametrize("resource", list(EXPECTED_OPERATIONS))
    def test_operations_for_resource(self, resource):
        names = [d.operation for d in operations_for(resource)]
        assert names == EXPECTED_OPERATIONS[resource]

    def test_total_operation_count(self):
        assert len(get_registry()) == sum(len(ops) for ops in EXPECTED_OPERATIONS.values())

    def test_unknown_resource_yields_empty(self):
        assert operations_for("miners") == []
        assert parameters_for("miners", "listMiners") == []

    def test_unknown_operation_yields_empty(self):
        assert parameters_for("hotspots", "deleteHotspot") == []
        assert get_registry().get("hotspots", "deleteHotspot") is None

    def test_parameters_in_declared_order(self):
        names = [p.name for p in parameters_for("accounts", "getAccountActivity")]
        assert names == ["address", "cursor", "limit", "filterTypes"]

    def test_operation_without_parameters(self):
        assert parameters_for("rewards", "getOraclePrice") == []
        assert parameters_for("elections", "getCurrentElection") == []

    def test_same_operation_name_in_two_resources(self):
        accounts = get_registry().get("accounts", "getPendingTransactions")
        blockchain = get_registry().get(Resource.BLOCKCHAIN, "getPendingTransactions")

        assert accounts.path == "/accounts/{address}/pending_transactions"
        assert blockchain.path == "/pending_transactions"

    def test_contains(self):
        registry = get_registry()
        assert ("validators", "unstakeValidator") in registry
        assert ("validators", "slashValidator") not in registry

    def test_global_registry_is_frozen(self):
        registry = get_registry()
        assert registry.frozen
        with pytest.raises(RegistryFrozenError):
            registry.register(
                OperationDescriptor(resource=Resource.HOTSPOTS, operation="x", name="X", path="/x")
            )

    def test_every_path_placeholder_has_a_path_parameter(self):
        for descriptor in get_registry():
            path_params = [p.name for p in descriptor.parameters_at(ParameterLocation.PATH)]
            assert sorted(path_params) == sorted(descriptor.path_fields)


class TestRegister:
    """Test registry validation on register."""

    def test_duplicate_operation_rejected(self):
        descriptor = OperationDescriptor(
            resource=Resource.HOTSPOTS, operation="ping", name="Ping", path="/ping"
        )
        registry = OperationRegistry([descriptor])

        with pytest.raises(ValueError, match="already registered"):
            registry.register(descriptor)

    def test_missing_path_parameter_rejected(self):
        descriptor = OperationDescriptor(
            resource=Resource.HOTSPOTS,
            operation="getThing",
            name="Get Thing",
            path="/things/{id}",
        )
        with pytest.raises(ValueError, match="no parameter for: id"):
            OperationRegistry().register(descriptor)

    def test_method_defaults_to_get(self):
        descriptor = OperationDescriptor(
            resource=Resource.REWARDS, operation="ping", name="Ping", path="/ping"
        )
        assert descriptor.method == HttpMethod.GET


class TestNodeProperties:
    """Test UI property generation."""

    def test_resource_selector(self):
        properties = get_registry().build_node_properties()
        resource = properties[0]

        assert resource["name"] == "resource"
        assert resource["type"] == "options"
        assert [o["value"] for o in resource["options"]] == list(EXPECTED_OPERATIONS)
        assert resource["default"] == "hotspots"

    def test_one_operation_selector_per_resource(self):
        properties = get_registry().build_node_properties()
        selectors = [p for p in properties if p["name"] == "operation"]

        assert len(selectors) == len(EXPECTED_OPERATIONS)
        hotspots = selectors[0]
        assert hotspots["displayOptions"] == {"show": {"resource": ["hotspots"]}}
        assert hotspots["default"] == "listHotspots"
        assert hotspots["options"][0]["action"] == "List hotspots"

    def test_shared_parameter_lists_all_operations(self):
        properties = get_registry().build_node_properties()
        address = [
            p for p in properties
            if p["name"] == "address" and p["displayOptions"]["show"]["resource"] == ["hotspots"]
        ]

        assert len(address) == 1
        assert address[0]["required"] is True
        assert address[0]["displayOptions"]["show"]["operation"] == [
            "getHotspot", "getHotspotActivity", "getHotspotRewards",
            "getHotspotWitnesses", "getHotspotChallenged", "updateHotspot",
        ]

    def test_options_and_type_options_carried(self):
        properties = get_registry().build_node_properties()
        bucket = next(p for p in properties if p["name"] == "bucket")
        txn = next(
            p for p in properties
            if p["name"] == "txn" and p["displayOptions"]["show"]["resource"] == ["accounts"]
        )

        assert [o["value"] for o in bucket["options"]] == ["hour", "day", "week", "month"]
        assert bucket["default"] == "day"
        assert txn["typeOptions"] == {"rows": 4}


class TestParameterSpec:
    """Test omission rules."""

    def test_none_and_empty_are_absent(self):
        spec = ParameterSpec(name="cursor", display_name="Cursor")
        assert spec.is_absent(None)
        assert spec.is_absent("")
        assert not spec.is_absent("abc")
        assert not spec.is_absent(0)

    def test_zero_is_unset(self):
        spec = ParameterSpec(name="limit", display_name="Limit", type="number", zero_is_unset=True)
        assert spec.is_absent(0)
        assert spec.is_absent(0.0)
        assert not spec.is_absent(5)
        assert not spec.is_absent(False)

    def test_omit_values(self):
        spec = ParameterSpec(name="status", display_name="Status", omit_values=("all",))
        assert spec.is_absent("all")
        assert not spec.is_absent("active")

    def test_always_send_keeps_zero_and_empty(self):
        spec = ParameterSpec(
            name="limit", display_name="Limit", zero_is_unset=True, always_send=True
        )
        assert not spec.is_absent(0)
        assert not spec.is_absent("")
        assert spec.is_absent(None)

    def test_wire_name(self):
        spec = ParameterSpec(name="minTime", display_name="Min Time", wire_name="min_time")
        assert spec.key == "min_time"
        assert ParameterSpec(name="cursor", display_name="Cursor").key == "cursor"
