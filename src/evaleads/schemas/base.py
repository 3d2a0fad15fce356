"""
Base schema classes
"""
from pydantic import BaseModel as PydanticBaseModel, ConfigDict


class BaseSchema(PydanticBaseModel):
    """Base schema with common configuration"""

    model_config = ConfigDict(populate_by_name=True)


class RequestSchema(BaseSchema):
    """Base for inbound payloads; unknown fields are dropped"""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")
