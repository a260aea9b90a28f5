"""Per-field metadata derived from model declarations.

Every ``DodoModel`` subclass gets an ordered table of ``FieldDescriptor``
objects, computed once from its pydantic field declarations. The table is what
``set``/``with_``/``to_wire`` consult: wire name, required/nullable flags and
the kind of value the field holds.
"""
from __future__ import annotations

import enum
import typing
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Dict, Optional, Tuple, Type, Union

from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError
from pydantic.fields import FieldInfo

from .errors import ModelError, ShapeMismatch

if TYPE_CHECKING:
    from .base import DodoModel


class FieldKind(str, enum.Enum):
    SCALAR = "scalar"
    MODEL = "model"
    LIST_OF_MODEL = "list_of_model"
    LIST_OF_SCALAR = "list_of_scalar"
    MAP_OF_SCALAR = "map_of_scalar"
    ENUM = "enum"
    UNION = "union"


_NONE_TYPE = type(None)


@dataclass(frozen=True)
class FieldDescriptor:
    """Static description of one model field.

    Attributes:
        name: Python attribute name
        wire_name: JSON key used on the wire
        kind: What the field holds
        required: Whether the field must be present
        nullable: Whether JSON null is an accepted value
        annotation: The declared annotation, used to validate single values
    """

    name: str
    wire_name: str
    kind: FieldKind
    required: bool
    nullable: bool
    annotation: Any = field(repr=False, compare=False)
    _adapter: Dict[str, TypeAdapter] = field(default_factory=dict, repr=False, compare=False)

    @classmethod
    def from_field_info(cls, name: str, info: FieldInfo) -> "FieldDescriptor":
        annotation = info.annotation
        inner, nullable = _strip_optional(annotation)
        return cls(
            name=name,
            wire_name=info.alias or name,
            kind=classify(inner, info.metadata),
            required=info.is_required(),
            nullable=nullable,
            annotation=_with_metadata(annotation, info.metadata),
        )

    @property
    def adapter(self) -> TypeAdapter:
        # TypeAdapter construction is not free; build it on first use only.
        adapter = self._adapter.get("value")
        if adapter is None:
            adapter = TypeAdapter(self.annotation)
            self._adapter["value"] = adapter
        return adapter

    def coerce(self, value: Any, model: str) -> Any:
        """Validate a single value against this field.

        Raises:
            ShapeMismatch: The value does not fit the declared type
        """
        if value is None and not self.nullable:
            raise ShapeMismatch(model, self.wire_name, "field is not nullable")
        try:
            return self.adapter.validate_python(value)
        except PydanticValidationError as exc:
            from .base import translate_validation_error

            raise translate_validation_error(model, exc, prefix=self.wire_name) from exc
        except ModelError as exc:
            raise exc.prefixed(self.wire_name) from exc


def _strip_optional(annotation: Any) -> Tuple[Any, bool]:
    if typing.get_origin(annotation) is typing.Annotated:
        inner, nullable = _strip_optional(typing.get_args(annotation)[0])
        return inner, nullable
    if typing.get_origin(annotation) is Union:
        args = typing.get_args(annotation)
        if _NONE_TYPE in args:
            rest = tuple(arg for arg in args if arg is not _NONE_TYPE)
            if len(rest) == 1:
                return rest[0], True
            return Union[rest], True  # type: ignore[return-value]
    return annotation, False


def _with_metadata(annotation: Any, metadata: list) -> Any:
    if not metadata:
        return annotation
    return typing.Annotated[(annotation, *metadata)]  # type: ignore[return-value]


def _is_model(tp: Any) -> bool:
    from .base import DodoModel

    return isinstance(tp, type) and issubclass(tp, DodoModel)


def _is_enum(tp: Any) -> bool:
    return isinstance(tp, type) and issubclass(tp, enum.Enum)


def classify(annotation: Any, metadata: Optional[list] = None) -> FieldKind:
    """Work out the ``FieldKind`` of an annotation with ``Optional`` removed."""
    from .unions import Variant

    if any(isinstance(item, Variant) for item in metadata or ()):
        return FieldKind.UNION
    origin = typing.get_origin(annotation)
    if origin is typing.Annotated:
        base, *extra = typing.get_args(annotation)
        return classify(base, extra)
    if origin is Union:
        if any(_is_model(arg) for arg in typing.get_args(annotation)):
            return FieldKind.UNION
        return FieldKind.SCALAR
    if origin in (list, typing.List, tuple):
        args = typing.get_args(annotation)
        element = args[0] if args else Any
        if classify(element) in (FieldKind.MODEL, FieldKind.UNION):
            return FieldKind.LIST_OF_MODEL
        return FieldKind.LIST_OF_SCALAR
    if origin in (dict, typing.Dict):
        return FieldKind.MAP_OF_SCALAR
    if _is_model(annotation):
        return FieldKind.MODEL
    if _is_enum(annotation):
        return FieldKind.ENUM
    return FieldKind.SCALAR


def describe_model(model_cls: Type["DodoModel"]) -> Tuple[FieldDescriptor, ...]:
    """Build the ordered descriptor table for a model class."""
    descriptors = tuple(
        FieldDescriptor.from_field_info(name, info)
        for name, info in model_cls.model_fields.items()
    )
    seen: Dict[str, str] = {}
    for descriptor in descriptors:
        if descriptor.wire_name in seen:
            raise TypeError(
                f"{model_cls.__name__}: wire name {descriptor.wire_name!r} is used by "
                f"both {seen[descriptor.wire_name]!r} and {descriptor.name!r}"
            )
        seen[descriptor.wire_name] = descriptor.name
    return descriptors


__all__ = ["FieldKind", "FieldDescriptor", "classify", "describe_model"]
