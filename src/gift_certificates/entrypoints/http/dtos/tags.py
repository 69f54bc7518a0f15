from pydantic import BaseModel, ConfigDict, Field


class TagResponseDTO(BaseModel):
    id: int
    name: str


class TagCreateDTO(BaseModel):
    """Request payload for creating a tag."""

    name: str = Field(
        description="Unique tag name",
        examples=["wellness"],
        max_length=50,
    )

    model_config = ConfigDict(extra="forbid")


class TagListResponseDTO(BaseModel):
    tags: list[TagResponseDTO]
    page: int
    page_size: int
