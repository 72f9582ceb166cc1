# norwedfilm/schemas/base.py
from typing import Any, Type

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """
    Base for every API shape. Fields are snake_case in Python and
    camelCase on the wire; either spelling is accepted on input.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
        use_enum_values=True,
        str_strip_whitespace=True,
    )


def to_json(schema: Type[BaseModel], obj: Any) -> Any:
    """
    Wire form (camelCase, JSON types) of an ORM object or a list of them,
    as stored in the query cache.
    """
    if isinstance(obj, list):
        return [to_json(schema, item) for item in obj]
    return schema.model_validate(obj).model_dump(mode="json", by_alias=True)
