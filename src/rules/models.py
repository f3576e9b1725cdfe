from pydantic import BaseModel, Field, field_validator


class ProjectRules(BaseModel):
    slug: str
    rules_version: str

class TripRules(BaseModel):
    min_destination_length: int = Field(default=4, ge=1)
    headline_max_destination_length: int = Field(default=14, ge=1)

class CalendarRules(BaseModel):
    month_abbreviations: list[str]
    date_joiner: str = " de "
    range_separator: str = " - "

    @field_validator("month_abbreviations")
    @classmethod
    def twelve_months(cls, value: list[str]) -> list[str]:
        if len(value) != 12:
            raise ValueError(f"expected 12 month abbreviations, got {len(value)}")
        return value

class LinkRules(BaseModel):
    allowed_schemes: list[str] = Field(default_factory=lambda: ["http", "https"])

class Rules(BaseModel):
    project: ProjectRules
    trip: TripRules
    calendar: CalendarRules
    links: LinkRules
