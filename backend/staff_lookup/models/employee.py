"""Employee models for roster data and search suggestions."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class EmployeeSummary(BaseModel):
    """Minimal employee info for listings."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str | None = None
    title: str | None = None
    department: str | None = None
    unit: str | None = None
    location: str | None = None
    email: str | None = None


class EmployeeDetail(EmployeeSummary):
    """Full employee record as held in the roster."""

    first_name: str | None = None
    last_name: str | None = None
    manager: str | None = None
    company: str | None = None
    phone: str | None = None
    office: str | None = None
    division: str | None = None
    start_date: str | None = None

    def summary(self) -> EmployeeSummary:
        return EmployeeSummary(
            id=self.id,
            name=self.name,
            title=self.title,
            department=self.department,
            unit=self.unit,
            location=self.location,
            email=self.email,
        )


class Suggestion(BaseModel):
    """Projection of a roster record shown while the user is typing."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str | None = None

    @classmethod
    def from_record(cls, record: EmployeeSummary) -> Suggestion:
        return cls(id=record.id, name=record.name)
