"""Muscle group schemas."""

from uuid import UUID

from pydantic import BaseModel, ConfigDict


class MuscleGroupRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    id: UUID
    name: str
