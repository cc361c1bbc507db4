import pytest

from mockapi.codegen.core.schema import ObjectRole
from mockapi.models import Endpoint, EndpointCollection


class TestEndpoint:
    def test_from_dict(self):
        endpoint = Endpoint.from_dict(
            {
                "id": 7,
                "path": "/users",
                "method": "post",
                "headers": [{"key": "X-Trace", "value": "1"}],
                "response": {"status": 201, "body": "{}", "contentType": "text/json"},
                "request": {"body": '{"name": "x"}'},
            }
        )
        assert endpoint.id == "7"
        assert endpoint.method == "POST"
        assert endpoint.response.status == 201
        assert endpoint.response.content_type == "text/json"
        assert endpoint.headers[0].key == "X-Trace"
        assert endpoint.body_for(ObjectRole.REQUEST) == '{"name": "x"}'

    def test_parsed_bodies_are_serialized(self):
        endpoint = Endpoint.from_dict({"path": "/x", "response": {"body": {"a": 1}}})
        assert endpoint.response.body == '{"a": 1}'

    def test_missing_path(self):
        with pytest.raises(ValueError):
            Endpoint.from_dict({"method": "GET"})

    def test_no_request_body(self):
        endpoint = Endpoint(path="/x")
        assert endpoint.body_for(ObjectRole.REQUEST) is None
        assert endpoint.body_for(ObjectRole.RESPONSE) == ""

    def test_to_dict_round_trip(self):
        data = Endpoint(path="/x", method="put").to_dict()
        restored = Endpoint.from_dict(data)
        assert restored.to_dict() == data
        assert "request" not in data


class TestEndpointCollection:
    def test_from_dict(self):
        collection = EndpointCollection.from_dict(
            {"id": "c1", "name": "Shop", "endpoints": [{"path": "/a"}, {"path": "/b"}]}
        )
        assert collection.id == "c1"
        assert [e.path for e in collection.endpoints] == ["/a", "/b"]

    def test_defaults(self):
        assert EndpointCollection.from_dict({}).name == "Untitled"
