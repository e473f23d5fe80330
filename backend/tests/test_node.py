import httpx
import pytest

from clio_adapter import node
from clio_adapter.constants import CREDENTIAL_NAME
from clio_adapter.exceptions import ParameterError, UnknownResourceError
from clio_adapter.models import ExecutionItem

from conftest import ok


class TestDescribe:
    def test_sixteen_resources(self):
        desc = node.describe()

        assert desc.name == "clio"
        assert desc.display_name == "Clio"
        assert desc.credentials == [{"name": CREDENTIAL_NAME, "required": True}]
        assert len(desc.resources) == 16
        assert len(node.RESOURCES) == 16

        selector = desc.properties[0]
        assert selector.name == "resource"
        assert {o["value"] for o in selector.options} == set(node.RESOURCES)

    def test_default_operation_is_offered(self):
        for resource in node.describe().resources:
            values = [op.value for op in resource.operations]
            assert resource.default_operation in values, resource.value

    def test_fields_belong_to_known_operations(self):
        for resource in node.describe().resources:
            values = {op.value for op in resource.operations}
            for f in resource.fields:
                assert f.resource == resource.value
                assert set(f.operations) <= values, (resource.value, f.name)

    def test_serializes(self):
        dumped = node.describe().model_dump()
        assert dumped["resources"][0]["operations"]


class TestExecute:
    @pytest.mark.asyncio
    async def test_runs_every_item_and_pairs_outputs(self, make_client):
        client, transport = make_client(lambda request: ok([{"id": 1}, {"id": 2}]))
        items = [ExecutionItem(parameters={"limit": 2}), ExecutionItem(parameters={"limit": 1})]

        out = await node.execute(client, "tasks", "listTasks", items)

        assert len(transport.requests) == 2
        assert [o.paired_item for o in out] == [0, 0, 1, 1]

    @pytest.mark.asyncio
    async def test_unknown_resource(self, echo_client):
        client, _ = echo_client
        with pytest.raises(UnknownResourceError, match="Unknown resource: invoices"):
            await node.execute(client, "invoices", "listInvoices", [ExecutionItem()])

    @pytest.mark.asyncio
    async def test_failure_propagates_by_default(self, echo_client):
        client, _ = echo_client
        with pytest.raises(ParameterError):
            await node.execute(client, "matters", "getMatter", [ExecutionItem()])

    @pytest.mark.asyncio
    async def test_continue_on_fail(self, make_client):
        def handler(request):
            if request.url.path.endswith("/2.json"):
                return httpx.Response(404, text="missing")
            return ok({"id": 1})

        client, _ = make_client(handler)
        items = [
            ExecutionItem(parameters={"matterId": 1}),
            ExecutionItem(parameters={"matterId": 2}),
            ExecutionItem(parameters={}),
        ]

        out = await node.execute(client, "matters", "getMatter", items, continue_on_fail=True)

        assert out[0].json_data == {"id": 1}
        assert out[0].paired_item == 0
        assert "missing" in out[1].json_data["error"]
        assert out[1].paired_item == 1
        assert out[2].json_data == {"error": "Required field 'matterId' is missing"}
        assert out[2].paired_item == 2
