"""openSAP courses.

Most of the course facts live in a single rendered markdown block, so the
programme and the duration are carved out of its lines after extraction.
"""

from typing import List, Optional

from course_scraper.adapters.base import PlatformAdapter, RawFields
from course_scraper.models.extraction import Layout, PlatformConfig, every, first, lines

CHARACTERISTICS = "Course Characteristics"
CONTENT = "Course Content"
AUDIENCE = "Target Audience"

CONFIG = PlatformConfig(
    name="OpenSap",
    layouts={
        "course": Layout(
            name="course",
            fields={
                "title": first('//div[@class="header-title"]'),
                "brief": first('//div[@class="RenderedMarkdown"]/p[1]'),
                "details": lines("//div[@class='RenderedMarkdown']"),
                "programme": every("//ul[@class='list-unstyled']/li/h4"),
                "instructors": every('//div[@id="teachers"]//div/h4/a/text()', limit=3),
                "languages": every('//span[@class="shortinfo"][2]/span[2]'),
            },
        ),
    },
    organization="OpenSap",
    check_url=False,
    user_agent=True,
)


def section(details: List[str], start: str, *ends: str) -> List[str]:
    """Lines between a heading and the next of the given headings.

    Args:
        details: Rendered lines of the markdown block
        start: Heading opening the section
        ends: Headings that may close it

    Returns:
        Lines of the section, empty if the heading is absent
    """
    if start not in details:
        return []
    begin = details.index(start) + 1
    for end in range(begin, len(details)):
        if details[end] in ends:
            return details[begin:end]
    return details[begin:]


def labelled(entries: List[str], label: str) -> Optional[str]:
    """Value of the first "Label: value" line."""
    for line in entries:
        if line.startswith(label):
            return line[len(label):].lstrip(":").strip() or None
    return None


class OpenSapAdapter(PlatformAdapter):
    """Adapter deriving programme and duration from the course description."""

    def refine(self, raw: RawFields) -> RawFields:
        raw = dict(raw)
        details = raw.pop("details", None) or []

        content = section(details, CONTENT, AUDIENCE, CHARACTERISTICS)
        if content:
            raw["programme"] = content
        raw["programme"] = [item.strip().rstrip(":") for item in raw.get("programme") or []]

        characteristics = section(details, CHARACTERISTICS, CONTENT, AUDIENCE)
        raw["duration"] = labelled(characteristics, "Duration")
        raw["pace"] = labelled(characteristics, "Effort")
        return raw
