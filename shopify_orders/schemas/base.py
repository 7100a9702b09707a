"""
Base model and decode entry point shared by every Shopify REST schema.
"""

import logging
from typing import Any, Dict, Type, TypeVar, Union

from pydantic import BaseModel, ConfigDict, ValidationError

from shopify_orders.utils.error_handler import DecodeError

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


class ShopifyModel(BaseModel):
    """Base for REST resources: unknown keys are ignored, `None` is never sent."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    def to_payload(self) -> Dict[str, Any]:
        """
        Dump the model into a JSON-ready dict for a request body.

        Fields left as None are omitted, so the API keeps its current value.
        """
        return self.model_dump(mode="json", exclude_none=True)


def decode_record(model: Type[ModelT], raw: Union[bytes, str]) -> ModelT:
    """
    Decode raw JSON bytes into `model`.

    Args:
        model: Pydantic model class to decode into
        raw: Raw JSON document

    Returns:
        The decoded model instance

    Raises:
        DecodeError: If the JSON is malformed or does not fit the model
    """
    try:
        return model.model_validate_json(raw)
    except ValidationError as e:
        logger.error(f"Failed to decode {model.__name__}: {e.error_count()} errors")
        raise DecodeError(
            f"Invalid {model.__name__} payload: {e}",
            model=model.__name__,
            errors=e.errors(include_url=False, include_context=False),
        ) from e
