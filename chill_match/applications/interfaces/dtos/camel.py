from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Accepts snake or camel case keys, serializes in camel case"""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)
