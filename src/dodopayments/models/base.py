"""Base model for the Dodo Payments SDK."""
from __future__ import annotations

from functools import lru_cache
from typing import Any, Dict, Iterator, List, Mapping, Tuple, Type, TypeVar

from pydantic import BaseModel, ConfigDict
from pydantic import ValidationError as PydanticValidationError

from .errors import (
    InvalidField,
    MissingRequiredField,
    ModelError,
    NoVariantMatched,
    ShapeMismatch,
    join_path,
)
from .fields import FieldDescriptor, describe_model

M = TypeVar("M", bound="DodoModel")


def _format_loc(loc: Tuple[Any, ...]) -> str:
    path = ""
    for part in loc:
        if isinstance(part, int):
            path = f"{path}[{part}]"
        else:
            path = join_path(path, str(part))
    return path


def translate_validation_error(model: str, exc: PydanticValidationError, prefix: str = "") -> ModelError:
    """Turn a pydantic ValidationError into the SDK's model error taxonomy.

    Missing fields win over other problems so that an absent required key is
    always reported as such, even when sibling fields are also malformed.
    """
    errors = exc.errors()
    chosen = next((err for err in errors if err["type"] == "missing"), errors[0])
    path = join_path(prefix, _format_loc(chosen["loc"]))
    if chosen["type"] == "missing":
        return MissingRequiredField(model, path)
    if chosen["type"] == "no_variant_matched":
        return NoVariantMatched(chosen.get("ctx", {}).get("candidates", {}), path)
    return ShapeMismatch(model, path, chosen["msg"])


@lru_cache(maxsize=None)
def _descriptors(model_cls: Type["DodoModel"]) -> Tuple[FieldDescriptor, ...]:
    return describe_model(model_cls)


@lru_cache(maxsize=None)
def _descriptor_index(model_cls: Type["DodoModel"]) -> Dict[str, FieldDescriptor]:
    index: Dict[str, FieldDescriptor] = {}
    for descriptor in _descriptors(model_cls):
        index[descriptor.name] = descriptor
        index[descriptor.wire_name] = descriptor
    return index


def _nested_models(value: Any, path: str) -> Iterator[Tuple[str, "DodoModel"]]:
    if isinstance(value, DodoModel):
        yield path, value
    elif isinstance(value, (list, tuple)):
        for index, item in enumerate(value):
            yield from _nested_models(item, f"{path}[{index}]")
    elif isinstance(value, dict):
        for key, item in value.items():
            yield from _nested_models(item, join_path(path, str(key)))


class DodoModel(BaseModel):
    """Base model with common configuration.

    Instances are immutable. ``with_``/``set`` return a new instance, and the
    set of explicitly assigned fields is tracked so that ``to_wire`` can tell
    an omitted field apart from one set to ``None``.

    Example:
        ```python
        cart = ProductCartItem(product_id="pdt_1", quantity=1)
        request = CheckoutSessionCreateParams.empty().set("product_cart", [cart])
        request.to_wire()  # {"product_cart": [{"product_id": "pdt_1", "quantity": 1}]}
        ```
    """

    model_config = ConfigDict(
        populate_by_name=True,
        extra="ignore",
        frozen=True,
    )

    def __init__(self, **data: Any) -> None:
        try:
            super().__init__(**data)
        except PydanticValidationError as exc:
            raise translate_validation_error(type(self).__name__, exc) from exc

    # Nested models are validated by pydantic-core directly, so their errors
    # keep the full location instead of escaping from a nested ``__init__``.
    __init__.__pydantic_base_init__ = True  # type: ignore[attr-defined]

    # ------------------------------------------------------------------ descriptors

    @classmethod
    def describe(cls) -> Tuple[FieldDescriptor, ...]:
        """Return the ordered field descriptor table for this model."""
        return _descriptors(cls)

    @classmethod
    def field_descriptor(cls, name: str) -> FieldDescriptor:
        """Look up a field by Python name or wire name.

        Raises:
            InvalidField: No such field on this model
        """
        descriptor = _descriptor_index(cls).get(name)
        if descriptor is None:
            raise InvalidField(cls.__name__, name, "unknown field")
        return descriptor

    # ------------------------------------------------------------------ construction

    @classmethod
    def empty(cls: Type[M]) -> M:
        """Create an instance with no fields set."""
        return cls.model_construct()

    @classmethod
    def from_wire(cls: Type[M], raw: Any) -> M:
        """Decode a JSON object received from the API.

        Raises:
            MissingRequiredField: A required key is absent
            ShapeMismatch: A value does not fit its declared type
            NoVariantMatched: A union field matched none of its shapes
        """
        if isinstance(raw, cls):
            return raw
        if not isinstance(raw, Mapping):
            raise ShapeMismatch(cls.__name__, "", f"expected an object, got {type(raw).__name__}")
        try:
            return cls.model_validate(raw)
        except PydanticValidationError as exc:
            raise translate_validation_error(cls.__name__, exc) from exc

    def with_(self: M, **changes: Any) -> M:
        """Return a copy with the given fields replaced.

        Keys may be Python names or wire names. Each value is validated against
        its field before the copy is built; the receiver is left untouched.

        Raises:
            InvalidField: Unknown field, or a value of the wrong shape
        """
        model = type(self).__name__
        updates: Dict[str, Any] = {}
        for key, value in changes.items():
            descriptor = self.field_descriptor(key)
            try:
                updates[descriptor.name] = descriptor.coerce(value, model)
            except ModelError as exc:
                raise InvalidField(model, exc.path or descriptor.wire_name, exc.reason) from exc

        fields_set = set(self.model_fields_set) | set(updates)
        values: Dict[str, Any] = {}
        for descriptor in self.describe():
            if descriptor.name in updates:
                values[descriptor.name] = updates[descriptor.name]
            elif descriptor.name in self.__dict__:
                values[descriptor.name] = self.__dict__[descriptor.name]
        return type(self).model_construct(_fields_set=fields_set, **values)

    def set(self: M, name: str, value: Any) -> M:
        """Return a copy with one field replaced. See ``with_``."""
        return self.with_(**{name: value})

    # ------------------------------------------------------------------ serialization

    def missing_fields(self) -> List[str]:
        """Wire paths of required fields that are not set, at any depth."""
        missing: List[str] = []
        for descriptor in self.describe():
            if descriptor.name not in self.model_fields_set:
                if descriptor.required:
                    missing.append(descriptor.wire_name)
                continue
            value = self.__dict__.get(descriptor.name)
            for path, nested in _nested_models(value, descriptor.wire_name):
                missing.extend(join_path(path, field) for field in nested.missing_fields())
        return missing

    def to_wire(self) -> Dict[str, Any]:
        """Encode for transmission.

        Unset fields are left out, fields explicitly set to ``None`` are sent
        as ``null``.

        Raises:
            MissingRequiredField: A required field was never set
        """
        missing = self.missing_fields()
        if missing:
            raise MissingRequiredField(type(self).__name__, missing[0])
        return self.model_dump(mode="json", by_alias=True, exclude_unset=True)


__all__ = ["DodoModel", "translate_validation_error"]
