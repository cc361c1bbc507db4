import logging

import pytest

from mockapi.codegen.core.schema import Schema, SchemaKind
from mockapi.models import Endpoint, EndpointRequest, EndpointResponse

NUMBER = Schema.scalar(SchemaKind.NUMBER)
STRING = Schema.scalar(SchemaKind.STRING)
BOOLEAN = Schema.scalar(SchemaKind.BOOLEAN)


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Undo handlers installed by configure_logging so caplog keeps working."""
    yield
    logger = logging.getLogger("mockapi")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.propagate = True
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def user_schema():
    return Schema.object({"id": NUMBER, "name": STRING}, required=["id", "name"])


@pytest.fixture
def optional_user_schema():
    return Schema.object({"id": NUMBER, "name": STRING}, required=[])


@pytest.fixture
def tags_schema():
    return Schema.object(
        {"tags": Schema.array(Schema.scalar(SchemaKind.UNKNOWN))}, required=["tags"]
    )


@pytest.fixture
def users_endpoint():
    return Endpoint(
        id="ep1",
        path="/api/users",
        response=EndpointResponse(
            body='{"id": 1, "name": "John Doe", '
            '"addresses": [{"street": "123 Main St"}]}'
        ),
    )


@pytest.fixture
def login_endpoint():
    return Endpoint(
        id="ep2",
        path="/auth/login",
        method="post",
        response=EndpointResponse(body='{"token": "abc", "expiresIn": 3600}'),
        request=EndpointRequest(body='{"email": "a@example.com", "password": "x"}'),
    )
