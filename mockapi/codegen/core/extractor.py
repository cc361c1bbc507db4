"""
Schema extraction from endpoint bodies.

Infers schemas from example JSON and hoists every nested object into a
named, deduplicated ObjectDefinition with dependency edges.
"""

import json
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Dict, Iterable, List, Optional, Tuple

from ...logging_config import get_logger
from .naming import path_type_name, singularize, to_pascal_case
from .schema import (
    ObjectDefinition,
    ObjectRole,
    ObjectSource,
    Schema,
    SchemaKind,
)

if TYPE_CHECKING:
    from ...models import Endpoint

logger = get_logger(__name__)

DEFAULT_ROLES = frozenset({ObjectRole.RESPONSE, ObjectRole.REQUEST})


class ParseError(ValueError):
    """Raised when an endpoint body is not valid JSON."""

    def __init__(self, endpoint: "Endpoint", role: ObjectRole, reason: str):
        self.endpoint_id = endpoint.id
        self.path = endpoint.path
        self.role = role
        super().__init__(
            f"Invalid JSON in {role.value} body of {endpoint.method} {endpoint.path}: "
            f"{reason}"
        )


@dataclass
class ExtractionContext:
    """
    State for one extraction run.

    Holds the deduplication table and the disambiguation counter.
    ``extract_objects`` resets it on entry, so a reused context only ever
    holds the state of the latest run.
    """

    seen: Dict[Tuple[str, ObjectRole, str], ObjectDefinition] = field(
        default_factory=dict
    )
    counter: int = 0
    objects: List[ObjectDefinition] = field(default_factory=list)
    errors: List[ParseError] = field(default_factory=list)

    def reset(self):
        """Clear all state left by a previous run."""
        self.seen.clear()
        self.counter = 0
        self.objects.clear()
        self.errors.clear()

    def next_id(self, endpoint_id: str, role: ObjectRole, fingerprint: str) -> str:
        object_id = f"{endpoint_id}_{role.value}_{fingerprint[:12]}_{self.counter}"
        self.counter += 1
        return object_id


def infer_schema(value: Any) -> Schema:
    """
    Infer a schema from a parsed JSON value.

    Arrays take the shape of their first element; object properties are
    required when their example value is not null.
    """
    if value is None:
        return Schema.scalar(SchemaKind.NULL)

    if isinstance(value, list):
        if not value:
            return Schema.array(Schema.scalar(SchemaKind.UNKNOWN))
        return Schema.array(infer_schema(value[0]))

    if isinstance(value, dict):
        properties = {key: infer_schema(item) for key, item in value.items()}
        required = [key for key, item in value.items() if item is not None]
        return Schema.object(properties, required)

    # bool is an int subclass, check it first
    if isinstance(value, bool):
        return Schema.scalar(SchemaKind.BOOLEAN)
    if isinstance(value, (int, float)):
        return Schema.scalar(SchemaKind.NUMBER)
    if isinstance(value, str):
        return Schema.scalar(SchemaKind.STRING)

    return Schema.scalar(SchemaKind.UNKNOWN)


def parse_body(body: str, endpoint: "Endpoint", role: ObjectRole) -> Any:
    """Parse a body as JSON, raising ParseError on failure."""
    try:
        return json.loads(body)
    except (json.JSONDecodeError, TypeError) as e:
        raise ParseError(endpoint, role, str(e)) from e


def object_name(base: str, role: ObjectRole) -> str:
    """Build an object name from a base name and its role."""
    return f"{base}{role.suffix}"


def extract_objects(
    endpoints: Iterable["Endpoint"],
    roles: Optional[Iterable[ObjectRole]] = None,
    context: Optional[ExtractionContext] = None,
) -> List[ObjectDefinition]:
    """
    Extract object definitions from endpoint response and request bodies.

    Args:
        endpoints: Endpoints to read bodies from (not modified)
        roles: Which bodies to read; defaults to both
        context: Extraction state to record into; a fresh one by default.
            A passed instance is reset first; inspect ``errors`` afterwards.

    Returns:
        Object definitions in discovery order, parents before their
        nested objects
    """
    ctx = context if context is not None else ExtractionContext()
    ctx.reset()
    wanted = (
        frozenset(ObjectRole(r) for r in roles) if roles is not None else DEFAULT_ROLES
    )

    for endpoint in endpoints:
        for role in (ObjectRole.RESPONSE, ObjectRole.REQUEST):
            if role not in wanted:
                continue

            body = endpoint.body_for(role)
            if body is None or not body.strip():
                continue

            try:
                value = parse_body(body, endpoint, role)
            except ParseError as e:
                logger.warning("%s; skipping", e)
                ctx.errors.append(e)
                continue

            schema = infer_schema(value)
            if not schema.is_object:
                logger.debug(
                    "Skipping %s body of %s: root is %s, not object",
                    role.value,
                    endpoint.path,
                    schema.kind.value,
                )
                continue

            source = ObjectSource(
                endpoint_id=endpoint.id,
                path=endpoint.path,
                method=endpoint.method,
                role=role,
            )
            _process_schema(ctx, schema, path_type_name(endpoint.path), source)

    logger.info(
        "Extracted %d objects (%d bodies skipped)", len(ctx.objects), len(ctx.errors)
    )
    return list(ctx.objects)


def extract_value(
    value: Any,
    base_name: str = "Root",
    role: ObjectRole = ObjectRole.RESPONSE,
) -> List[ObjectDefinition]:
    """
    Extract object definitions from one parsed JSON document.

    The root is named ``{base_name}{role suffix}``; returns an empty list
    when the value is not an object.
    """
    schema = infer_schema(value)
    if not schema.is_object:
        return []

    ctx = ExtractionContext()
    source = ObjectSource(
        endpoint_id="inline", path=f"/{base_name}", method="GET", role=role
    )
    _process_schema(ctx, schema, to_pascal_case(base_name) or "Root", source)
    return list(ctx.objects)


def _process_schema(
    ctx: ExtractionContext, schema: Schema, base_name: str, source: ObjectSource
) -> ObjectDefinition:
    """Register an object schema and, recursively, its nested objects."""
    key = (source.endpoint_id, source.role, schema.fingerprint())
    if key in ctx.seen:
        return ctx.seen[key]

    object_id = ctx.next_id(source.endpoint_id, source.role, key[2])
    name = object_name(base_name, source.role)

    # Reserve our slot so parents precede their nested objects
    position = len(ctx.objects)
    ctx.objects.append(None)

    dependencies: List[str] = []
    properties: Dict[str, Schema] = {}

    for prop_name, prop in schema.properties.items():
        if prop.is_object and prop.has_properties():
            nested = _process_schema(ctx, prop, _nested_base(prop_name), source)
            prop = prop.with_ref(nested.name)
            _add_dependency(dependencies, nested.id)

        elif prop.is_array and _is_hoistable(prop.item_schema):
            nested = _process_schema(
                ctx, prop.item_schema, _nested_base(prop_name, plural=True), source
            )
            prop = Schema.array(prop.item_schema.with_ref(nested.name))
            _add_dependency(dependencies, nested.id)

        properties[prop_name] = prop

    definition = ObjectDefinition(
        id=object_id,
        name=name,
        schema=Schema.object(properties, schema.required),
        source=source,
        dependencies=tuple(dependencies),
    )

    ctx.objects[position] = definition
    ctx.seen[key] = definition
    logger.debug("Extracted %s (%s) from %s", name, object_id, source.path)
    return definition


def _is_hoistable(schema: Schema) -> bool:
    return schema.is_object and schema.has_properties()


def _nested_base(prop_name: str, plural: bool = False) -> str:
    base = to_pascal_case(prop_name) or "Item"
    return singularize(base) if plural else base


def _add_dependency(dependencies: List[str], object_id: str):
    if object_id not in dependencies:
        dependencies.append(object_id)
