"""Account schemas: profile/email/password updates and the data export document."""

from datetime import date, datetime
from uuid import UUID

from pydantic import BaseModel, Field

from app.core.constants import MIN_PASSWORD_LENGTH


class PasswordUpdate(BaseModel):
    new_password: str
    confirm_password: str

    def problem(self) -> str | None:
        """User-facing validation message, or None when the passwords are acceptable."""
        if self.new_password != self.confirm_password:
            return "Passwords do not match"
        if len(self.new_password) < MIN_PASSWORD_LENGTH:
            return f"Password must be at least {MIN_PASSWORD_LENGTH} characters"
        return None


class EmailUpdate(BaseModel):
    email: str = Field(..., min_length=3, max_length=320, pattern=r"^[^@\s]+@[^@\s]+$")


class ProfileUpdate(BaseModel):
    username: str = Field(..., max_length=100)


class AccountMessage(BaseModel):
    message: str


class ExportProfile(BaseModel):
    id: UUID
    email: str | None = None
    username: str | None = None


class ExportExercise(BaseModel):
    id: UUID
    name: str
    muscle_groups: list[str]
    hidden: bool
    description: str | None = None
    external_link: str | None = None
    external_link_name: str | None = None
    rest_time_seconds: int


class ExportScheduleEntry(BaseModel):
    day_of_week: int
    muscle_group: str | None = None


class ExportSet(BaseModel):
    set_number: int
    weight: float
    reps: int


class ExportWorkoutExercise(BaseModel):
    exercise_id: UUID
    exercise_name: str | None = None
    weight: float
    reps: int
    sets: int
    uses_individual_sets: bool
    total_weight: float
    individual_sets: list[ExportSet] = []


class ExportSession(BaseModel):
    date: date
    exercises: list[ExportWorkoutExercise]


class AccountExport(BaseModel):
    exported_at: datetime
    profile: ExportProfile
    exercises: list[ExportExercise]
    schedule: list[ExportScheduleEntry]
    sessions: list[ExportSession]
