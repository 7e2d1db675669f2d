from decimal import Decimal
from typing import Annotated, Any, Optional
from pydantic import BaseModel, BeforeValidator, ConfigDict
from pydantic.alias_generators import to_camel


class RequestModel(BaseModel):
    """Incoming JSON bodies and query strings: camelCase keys, nothing extra."""
    model_config = ConfigDict(alias_generator=to_camel, extra="forbid")


class ResponseModel(BaseModel):
    """Outgoing payloads, built from ORM rows or dicts and emitted in camelCase."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)


def _decimal_to_str(value: Any) -> Optional[str]:
    """
    Numeric columns are sent as strings, the way PostgreSQL returns them.
    SQLite pads to a fixed scale, so trailing zeros are dropped.
    """
    if value is None:
        return None
    if not isinstance(value, Decimal):
        value = Decimal(str(value))
    return format(value.normalize(), "f")


DecimalStr = Annotated[Optional[str], BeforeValidator(_decimal_to_str)]
