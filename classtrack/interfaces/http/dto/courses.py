from __future__ import annotations

import re
from datetime import time
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic_core import PydanticCustomError

from classtrack.domain.courses.entities import WEEKDAYS, CourseData
from classtrack.shared.utils import sanitize_input

_COLOR_RE = re.compile(r"^#[0-9a-fA-F]{3}([0-9a-fA-F]{3})?$")


class CourseRequestDTO(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    course_code: str = Field(alias="courseCode", max_length=32)
    course_title: str = Field(alias="courseTitle", max_length=200)
    instructor: str | None = Field(None, max_length=120)
    color_code: str | None = Field(None, alias="colorCode", max_length=16)
    schedule_day: str | None = Field(None, alias="scheduleDay")
    time_start: time | None = Field(None, alias="timeStart")
    time_end: time | None = Field(None, alias="timeEnd")

    @field_validator("course_code", "course_title", mode="before")
    @classmethod
    def required_text(cls, value: Any) -> str:
        text = sanitize_input(value) if value is not None else ""
        if not text:
            raise PydanticCustomError("missing", "Field required", {})
        return text

    @field_validator("instructor", "color_code", "schedule_day", mode="before")
    @classmethod
    def optional_text(cls, value: Any) -> str | None:
        if value is None:
            return None
        return sanitize_input(value) or None

    @field_validator("time_start", "time_end", mode="before")
    @classmethod
    def blank_time(cls, value: Any) -> Any:
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @field_validator("color_code")
    @classmethod
    def validate_color(cls, value: str | None) -> str | None:
        if value is not None and not _COLOR_RE.match(value):
            raise PydanticCustomError(
                "color_invalid", "Color must be a hex value like #4f46e5", {}
            )
        return value

    @field_validator("schedule_day")
    @classmethod
    def validate_day(cls, value: str | None) -> str | None:
        if value is None:
            return None
        day = value.capitalize()
        if day not in WEEKDAYS:
            raise PydanticCustomError(
                "schedule_day_invalid", "Schedule day must be a weekday name", {}
            )
        return day

    @model_validator(mode="after")
    def validate_time_range(self) -> "CourseRequestDTO":
        if self.time_start and self.time_end and self.time_end <= self.time_start:
            raise PydanticCustomError(
                "time_range_invalid", "Course must end after it starts", {}
            )
        return self

    def to_data(self) -> CourseData:
        return CourseData(
            course_code=self.course_code,
            course_title=self.course_title,
            instructor=self.instructor,
            color_code=self.color_code,
            schedule_day=self.schedule_day,
            time_start=self.time_start,
            time_end=self.time_end,
        )
