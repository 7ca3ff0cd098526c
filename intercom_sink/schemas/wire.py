"""
Primitive wire types shared by the Intercom payload schemas.

Intercom sends every instant as integer seconds since the Unix epoch and
wraps some collections in a ``{"type": "<x>.list", "<field>": [...]}`` object.
These helpers decode both shapes into plain Python values and encode them
back to the same wire form.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Annotated, Any, Optional

from pydantic import (
    BaseModel,
    BeforeValidator,
    ConfigDict,
    Field,
    PlainSerializer,
    PlainValidator,
    StrictInt,
    ValidationError,
    WrapSerializer,
    create_model,
)

logger = logging.getLogger(__name__)


class WireModel(BaseModel):
    """Base for decoded payload entities: immutable, unknown keys ignored."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")


def _decode_epoch_seconds(value: Any) -> datetime:
    if isinstance(value, datetime):
        if value.tzinfo is None:
            raise ValueError("datetime must be timezone-aware")
        if value.microsecond:
            raise ValueError("timestamp must be a whole number of seconds")
        return value.astimezone(timezone.utc)
    # bool is an int subclass; JSON true/false is not a timestamp
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError("timestamp must be an integer number of seconds")
    try:
        return datetime.fromtimestamp(value, tz=timezone.utc)
    except (OverflowError, OSError, ValueError) as e:
        raise ValueError(f"timestamp {value} is out of range") from e


def _encode_epoch_seconds(value: datetime) -> int:
    return int(value.timestamp())


EpochSeconds = Annotated[
    datetime,
    PlainValidator(_decode_epoch_seconds),
    PlainSerializer(_encode_epoch_seconds, return_type=int),
]
"""UTC instant carried on the wire as integer epoch seconds."""

OptionalEpochSeconds = Annotated[Optional[EpochSeconds], Field(default=None)]
"""Like ``EpochSeconds`` but absent or null decodes to ``None``."""

# Integer widths used by the upstream schema
Int8 = Annotated[StrictInt, Field(ge=-(2**7), le=2**7 - 1)]
UInt8 = Annotated[StrictInt, Field(ge=0, le=2**8 - 1)]
Int32 = Annotated[StrictInt, Field(ge=-(2**31), le=2**31 - 1)]
UInt32 = Annotated[StrictInt, Field(ge=0, le=2**32 - 1)]


def wrapped_list(item_type: type[BaseModel], field: str, list_type: str) -> Any:
    """
    Build a list type that decodes Intercom's wrapped collection shape.

    The wire value is expected to be ``{"type": <str>, <field>: [items]}``.
    When it is anything else (a bare list, a missing key, an element that
    fails to decode) the whole collection decodes to ``[]`` instead of failing
    the enclosing model. A missing or null value also decodes to ``[]``.

    Encoding always writes the wrapper back, using ``list_type`` as the type
    discriminator, so a decoded value re-decodes to itself.

    Args:
        item_type: Model each element decodes as.
        field: Name of the list key inside the wrapper.
        list_type: Discriminator written when encoding (e.g. ``"tag.list"``).

    Returns:
        An ``Annotated[list[item_type], ...]`` usable as a field type.
    """
    wrapper = create_model(
        f"{item_type.__name__}Wrapper",
        __base__=WireModel,
        type=(str, ...),
        **{field: (list[item_type], ...)},
    )

    def _decode(value: Any) -> Any:
        if value is None:
            return []
        # Already-decoded items of exactly item_type (Python callers building models)
        if isinstance(value, list) and all(
            type(item) is item_type for item in value
        ):
            return value
        try:
            decoded = wrapper.model_validate(value)
        except ValidationError as e:
            logger.warning(
                "Discarding malformed '%s' collection (%d error(s)): %s",
                field,
                e.error_count(),
                e.errors(include_url=False, include_input=False),
            )
            return []
        return getattr(decoded, field)

    def _encode(items: Any, handler: Any) -> dict[str, Any]:
        return {"type": list_type, field: handler(items)}

    return Annotated[
        list[item_type],
        BeforeValidator(_decode),
        WrapSerializer(_encode),
        Field(default_factory=list),
    ]
