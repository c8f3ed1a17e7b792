"""
Base schema: camelCase on the wire (what the web client reads), snake_case accepted on input too.
"""
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


def strip_required(v: str, field: str = "value") -> str:
    v = (v or "").strip()
    if not v:
        raise ValueError(f"{field} must not be empty")
    return v
