"""Exercise schemas."""

from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator

from app.core.constants import (
    DEFAULT_REST_TIME_SECONDS,
    EXERCISE_DESCRIPTION_MAX,
    EXERCISE_NAME_MAX,
    EXTERNAL_LINK_MAX,
    EXTERNAL_LINK_NAME_MAX,
    MAX_REST_TIME_SECONDS,
)
from app.schemas.muscle_group import MuscleGroupRead


def _blank_to_none(value: str | None) -> str | None:
    if value is None:
        return None
    value = value.strip()
    return value or None


class ExerciseBase(BaseModel):
    name: str = Field(..., min_length=1, max_length=EXERCISE_NAME_MAX)
    description: str | None = Field(None, max_length=EXERCISE_DESCRIPTION_MAX)
    external_link: str | None = Field(None, max_length=EXTERNAL_LINK_MAX)
    external_link_name: str | None = Field(None, max_length=EXTERNAL_LINK_NAME_MAX)
    rest_time_seconds: int = Field(default=DEFAULT_REST_TIME_SECONDS, ge=0, le=MAX_REST_TIME_SECONDS)


class ExerciseCreate(ExerciseBase):
    muscle_group_ids: list[UUID] = Field(..., min_length=1)

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Exercise name is required")
        return v

    @field_validator("description", "external_link", "external_link_name")
    @classmethod
    def strip_optional(cls, v: str | None) -> str | None:
        return _blank_to_none(v)


class ExerciseUpdate(BaseModel):
    name: str | None = Field(None, min_length=1, max_length=EXERCISE_NAME_MAX)
    description: str | None = Field(None, max_length=EXERCISE_DESCRIPTION_MAX)
    external_link: str | None = Field(None, max_length=EXTERNAL_LINK_MAX)
    external_link_name: str | None = Field(None, max_length=EXTERNAL_LINK_NAME_MAX)
    rest_time_seconds: int | None = Field(None, ge=0, le=MAX_REST_TIME_SECONDS)
    hidden: bool | None = None
    muscle_group_ids: list[UUID] | None = Field(None, min_length=1)

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str | None) -> str | None:
        if v is None:
            return None
        v = v.strip()
        if not v:
            raise ValueError("Exercise name is required")
        return v

    @field_validator("description", "external_link", "external_link_name")
    @classmethod
    def strip_optional(cls, v: str | None) -> str | None:
        return _blank_to_none(v)


class ExerciseRead(ExerciseBase):
    model_config = ConfigDict(from_attributes=True)
    id: UUID
    hidden: bool = False
    muscle_groups: list[MuscleGroupRead] = []
