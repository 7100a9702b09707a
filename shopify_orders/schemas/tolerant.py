"""
Tolerant decoding for fields the Shopify REST API serializes inconsistently.

Older orders and some API versions send shapes that do not match the
documented schema. Each routine here receives the raw, untyped JSON value
(the envelope) from a `mode="before"` validator, classifies its shape and
returns the one canonical value the model stores:

- ``line_items[].properties``: absent, null, ``{}``, a single object or an
  array of objects. Always ends up as ``list[NoteAttribute]``.
- ``shipping_lines[].requested_fulfillment_service_id``: null, a number or a
  string. Always ends up as ``str``.

Anything outside those shapes raises ``ValueError`` so pydantic reports it
as a validation error; nothing is defaulted silently.
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import Any, List, Tuple, Union

from pydantic import TypeAdapter

from shopify_orders.schemas.common_schemas import NoteAttribute

_note_attribute_list = TypeAdapter(List[NoteAttribute])


@dataclass(frozen=True)
class EmptyProperties:
    pass


@dataclass(frozen=True)
class SingleProperty:
    attribute: NoteAttribute


@dataclass(frozen=True)
class ManyProperties:
    attributes: Tuple[NoteAttribute, ...]


PropertyShape = Union[EmptyProperties, SingleProperty, ManyProperties]


def classify_properties(envelope: Any) -> PropertyShape:
    """
    Classify the raw ``properties`` value of a line item.

    Args:
        envelope: JSON value as received (None, list, dict or a NoteAttribute)

    Returns:
        PropertyShape: The recognized shape

    Raises:
        ValueError: If the value is not one of the recognized shapes or its
            entries are not valid name/value objects
    """
    if envelope is None:
        return EmptyProperties()

    if isinstance(envelope, (list, tuple)):
        # A null entry decodes to a blank attribute, not an error
        entries = [NoteAttribute() if entry is None else entry for entry in envelope]
        return ManyProperties(tuple(_note_attribute_list.validate_python(entries)))

    if isinstance(envelope, (dict, NoteAttribute)):
        attribute = NoteAttribute.model_validate(envelope)
        # Legacy orders send {} where an empty array is meant
        if attribute.is_empty():
            return EmptyProperties()
        return SingleProperty(attribute)

    raise ValueError(f"properties must be an array or an object, got {type(envelope).__name__}")


def collapse_properties(shape: PropertyShape) -> List[NoteAttribute]:
    """Reduce a classified shape to the canonical list form."""
    if isinstance(shape, EmptyProperties):
        return []
    if isinstance(shape, SingleProperty):
        return [shape.attribute]
    if isinstance(shape, ManyProperties):
        return list(shape.attributes)
    raise TypeError(f"Unknown property shape: {shape!r}")


def normalize_properties(envelope: Any) -> List[NoteAttribute]:
    return collapse_properties(classify_properties(envelope))


def normalize_service_id(envelope: Any) -> str:
    """
    Render ``requested_fulfillment_service_id`` as a string.

    Null becomes ``""``; numbers use their plain textual form, so ``42`` and
    ``42.0`` both become ``"42"``; strings pass through unchanged.

    Raises:
        ValueError: For booleans, objects and arrays
    """
    if envelope is None:
        return ""
    if isinstance(envelope, str):
        return envelope
    # bool is an int subclass, reject it before the numeric branches
    if isinstance(envelope, bool):
        raise ValueError("requested_fulfillment_service_id must be a string, a number or null, got bool")
    if isinstance(envelope, int):
        return str(envelope)
    if isinstance(envelope, float):
        if envelope.is_integer():
            return str(int(envelope))
        return repr(envelope)
    if isinstance(envelope, Decimal):
        return format(envelope.normalize(), "f")

    raise ValueError(
        f"requested_fulfillment_service_id must be a string, a number or null, got {type(envelope).__name__}"
    )
