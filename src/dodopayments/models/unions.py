"""Resolution of fields that accept one of several model shapes.

Some API fields take one of a few structurally different objects, e.g. a
payment's ``customer`` is either a reference to an existing customer or the
details of a new one. Declare such a field as::

    CustomerRequest = Annotated[Union[AttachExistingCustomer, NewCustomer], Variant()]

Candidates are tried in the declared order and the first one whose
``from_wire`` succeeds wins. Shapes that overlap are therefore settled by
declaration order: ``{"customer_id": "cus_1", "email": "a@b.c"}`` decodes as
``AttachExistingCustomer``. When the wire object carries a tag field, pass its
name as ``discriminator`` and the candidates whose ``Literal`` tag matches are
tried first.
"""
from __future__ import annotations

import enum
import typing
from typing import Any, Dict, FrozenSet, Mapping, Optional, Sequence, Tuple, Type

from pydantic import GetCoreSchemaHandler
from pydantic_core import PydanticCustomError, core_schema

from .base import DodoModel
from .errors import MissingRequiredField, NoVariantMatched, ShapeMismatch


def tag_values(candidate: Type[DodoModel], discriminator: str) -> FrozenSet[str]:
    """Values of ``discriminator`` that identify ``candidate``."""
    for name, info in candidate.model_fields.items():
        if discriminator not in (name, info.alias):
            continue
        annotation = info.annotation
        if typing.get_origin(annotation) is typing.Literal:
            return frozenset(str(arg) for arg in typing.get_args(annotation))
        if isinstance(annotation, type) and issubclass(annotation, enum.Enum):
            return frozenset(member.value for member in annotation)
    return frozenset()


def _ordered(
    candidates: Sequence[Type[DodoModel]],
    raw: Any,
    discriminator: Optional[str],
) -> Tuple[Type[DodoModel], ...]:
    if discriminator is None or not isinstance(raw, Mapping) or discriminator not in raw:
        return tuple(candidates)
    tag = raw[discriminator]
    if not isinstance(tag, str):
        return tuple(candidates)
    tagged = [c for c in candidates if tag in tag_values(c, discriminator)]
    return tuple(tagged) + tuple(c for c in candidates if c not in tagged)


def resolve_variant(
    candidates: Sequence[Type[DodoModel]],
    raw: Any,
    discriminator: Optional[str] = None,
) -> DodoModel:
    """Decode ``raw`` as the first candidate that accepts it.

    Args:
        candidates: Model types in declaration order
        raw: Decoded JSON value, or an already built candidate instance
        discriminator: Optional wire key carrying a type tag

    Returns:
        An instance of the matching candidate

    Raises:
        NoVariantMatched: Every candidate rejected the value
    """
    for candidate in candidates:
        if isinstance(raw, candidate):
            return raw

    failures: Dict[str, str] = {}
    for candidate in _ordered(candidates, raw, discriminator):
        try:
            return candidate.from_wire(raw)
        except (MissingRequiredField, ShapeMismatch, NoVariantMatched) as exc:
            failures[candidate.__name__] = exc.message
    raise NoVariantMatched(failures)


class Variant:
    """``Annotated`` marker that routes a ``Union`` of models through ``resolve_variant``."""

    def __init__(self, discriminator: Optional[str] = None):
        self.discriminator = discriminator

    def __repr__(self) -> str:
        if self.discriminator:
            return f"Variant(discriminator={self.discriminator!r})"
        return "Variant()"

    def __get_pydantic_core_schema__(
        self, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        candidates = tuple(typing.get_args(source_type)) or (source_type,)
        discriminator = self.discriminator

        def resolve(value: Any) -> Any:
            try:
                return resolve_variant(candidates, value, discriminator)
            except NoVariantMatched as exc:
                # Re-raised as a pydantic error so the field location is recorded.
                raise PydanticCustomError(
                    "no_variant_matched",
                    "{reason}",
                    {"reason": exc.reason, "candidates": exc.candidates},
                ) from exc

        return core_schema.no_info_before_validator_function(resolve, handler(source_type))


__all__ = ["Variant", "resolve_variant", "tag_values"]
