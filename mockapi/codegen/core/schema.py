"""
Core schema representation for code generation.

Describes the structural shape of JSON values inferred from endpoint
bodies, and the named object definitions that generators work with.
"""

import hashlib
import json
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, FrozenSet, Mapping, Optional, Tuple


class SchemaKind(Enum):
    """Kinds of values a schema can describe."""

    OBJECT = "object"
    ARRAY = "array"
    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    NULL = "null"
    UNKNOWN = "unknown"


class ObjectRole(Enum):
    """Whether an object came from a request or a response body."""

    REQUEST = "request"
    RESPONSE = "response"

    @property
    def suffix(self) -> str:
        return "Request" if self is ObjectRole.REQUEST else "Response"


SCALAR_KINDS = frozenset({SchemaKind.STRING, SchemaKind.NUMBER, SchemaKind.BOOLEAN})


@dataclass(frozen=True)
class Schema:
    """
    Immutable structural description of a JSON value.

    ``properties`` is set only for objects and ``item_schema`` only for
    arrays. ``ref`` carries the name of the separately generated object
    assigned by the extractor and does not take part in structural identity.
    """

    kind: SchemaKind
    properties: Optional[Mapping[str, "Schema"]] = None
    item_schema: Optional["Schema"] = None
    required: FrozenSet[str] = field(default_factory=frozenset)
    ref: Optional[str] = None

    def __post_init__(self):
        if (self.properties is not None) != (self.kind is SchemaKind.OBJECT):
            raise ValueError("properties must be set exactly when kind is object")
        if (self.item_schema is not None) != (self.kind is SchemaKind.ARRAY):
            raise ValueError("item_schema must be set exactly when kind is array")
        if self.properties is not None:
            # Freeze into a plain dict copy so callers cannot mutate it later
            object.__setattr__(self, "properties", dict(self.properties))
        object.__setattr__(self, "required", frozenset(self.required))

    @classmethod
    def object(
        cls, properties: Mapping[str, "Schema"], required=(), ref: Optional[str] = None
    ) -> "Schema":
        return cls(
            SchemaKind.OBJECT, properties=properties, required=frozenset(required), ref=ref
        )

    @classmethod
    def array(cls, item_schema: "Schema") -> "Schema":
        return cls(SchemaKind.ARRAY, item_schema=item_schema)

    @classmethod
    def scalar(cls, kind: SchemaKind) -> "Schema":
        return cls(kind)

    @property
    def is_object(self) -> bool:
        return self.kind is SchemaKind.OBJECT

    @property
    def is_array(self) -> bool:
        return self.kind is SchemaKind.ARRAY

    def is_required(self, name: str) -> bool:
        return name in self.required

    def has_properties(self) -> bool:
        return bool(self.properties)

    def with_ref(self, ref: str) -> "Schema":
        """Return a copy of this schema pointing at a hoisted object."""
        return Schema(
            self.kind,
            properties=self.properties,
            item_schema=self.item_schema,
            required=self.required,
            ref=ref,
        )

    def to_dict(self, include_refs: bool = True) -> Dict[str, Any]:
        """Convert to a JSON-schema-like dictionary."""
        result: Dict[str, Any] = {"type": self.kind.value}

        if self.properties is not None:
            result["properties"] = {
                name: prop.to_dict(include_refs)
                for name, prop in self.properties.items()
            }
            result["required"] = sorted(self.required)

        if self.item_schema is not None:
            result["items"] = self.item_schema.to_dict(include_refs)

        if include_refs and self.ref:
            result["ref"] = self.ref

        return result

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Schema":
        """Build a schema from the dictionary form produced by ``to_dict``."""
        try:
            kind = SchemaKind(data.get("type", "unknown"))
        except ValueError:
            kind = SchemaKind.UNKNOWN

        if kind is SchemaKind.OBJECT:
            properties = {
                name: cls.from_dict(prop)
                for name, prop in (data.get("properties") or {}).items()
            }
            return cls.object(properties, data.get("required") or (), data.get("ref"))

        if kind is SchemaKind.ARRAY:
            items = data.get("items")
            item_schema = (
                cls.from_dict(items) if items else cls.scalar(SchemaKind.UNKNOWN)
            )
            schema = cls.array(item_schema)
            return schema.with_ref(data["ref"]) if data.get("ref") else schema

        return cls.scalar(kind)

    def fingerprint(self) -> str:
        """Structural hash, independent of hoisted names and key order."""
        canonical = json.dumps(self.to_dict(include_refs=False), sort_keys=True)
        return hashlib.sha1(canonical.encode("utf-8")).hexdigest()


@dataclass(frozen=True)
class ObjectSource:
    """Where an object definition was extracted from."""

    endpoint_id: str
    path: str
    method: str
    role: ObjectRole


@dataclass(frozen=True)
class ObjectDefinition:
    """A named, independently generatable object (DTO)."""

    id: str
    name: str
    schema: Schema
    source: ObjectSource
    dependencies: Tuple[str, ...] = ()

    def __post_init__(self):
        if not self.schema.is_object:
            raise ValueError(
                f"Object definition '{self.name}' requires an object schema, "
                f"got {self.schema.kind.value}"
            )
        object.__setattr__(self, "dependencies", tuple(self.dependencies))

    @property
    def role(self) -> ObjectRole:
        return self.source.role

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "schema": self.schema.to_dict(),
            "source": {
                "endpointId": self.source.endpoint_id,
                "path": self.source.path,
                "method": self.source.method,
                "type": self.source.role.value,
            },
            "dependencies": list(self.dependencies),
        }
