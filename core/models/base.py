# =============================================================================
# core/models/base.py - Shared Schema Configuration
# =============================================================================
# The public JSON contract uses camelCase keys (imageUrl, shortSpecs, ...).
# Models are declared in snake_case and serialized through an alias
# generator; inputs accept either spelling.
# =============================================================================

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base model that reads and writes camelCase JSON."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


def reject_explicit_nulls(model: BaseModel, fields: tuple[str, ...]) -> BaseModel:
    """
    Fail validation when a partial update sends null for a NOT NULL column.

    Omitted fields are fine; only keys present in the payload are checked.
    """
    nulls = [
        to_camel(name) for name in fields
        if name in model.model_fields_set and getattr(model, name) is None
    ]
    if nulls:
        raise ValueError(f"{', '.join(nulls)} cannot be null")
    return model
