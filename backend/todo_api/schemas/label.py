"""Label request/response schemas."""

from pydantic import BaseModel, ConfigDict, Field

LABEL_NAME_MAX_LENGTH = 255


class CreateLabel(BaseModel):
    """Label creation payload."""

    name: str = Field(min_length=1, max_length=LABEL_NAME_MAX_LENGTH)


class LabelRead(BaseModel):
    """Serialized label."""

    model_config = ConfigDict(from_attributes=True, frozen=True)

    id: int
    name: str
