"""Course record model returned by every adapter."""

from typing import Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from course_scraper.models.language import LanguageCode

Programme = Union[List[str], Dict[str, List[str]]]


class CourseRecord(BaseModel):
    """Normalized, platform-agnostic course metadata.

    ``programme`` is either a flat list of syllabus items or an outline
    mapping section titles to their items, depending on the platform.
    Serialized field names follow the public record format, so the
    duration is exposed as ``durationMinutes``.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    title: Optional[str] = None
    platform: str
    url: str
    organization: Optional[str] = None
    brief: Optional[str] = None
    programme: Programme = Field(default_factory=list)
    duration_minutes: Optional[str] = Field(
        default=None, alias="durationMinutes", pattern=r"^\d{2,}:\d{2}$"
    )
    instructors: List[str] = Field(default_factory=list)
    languages: List[LanguageCode] = Field(default_factory=list)

    def to_dict(self) -> dict:
        """Convert to a JSON-compatible dictionary."""
        return self.model_dump(mode="json", by_alias=True)

    def to_json(self, indent: Optional[int] = None) -> str:
        """Serialize to JSON text."""
        return self.model_dump_json(by_alias=True, indent=indent)
