"""Edraak courses and specializations."""

from course_scraper.models import LanguageCode, Locator
from course_scraper.models.extraction import Layout, PlatformConfig, every, first

TITLE = first('//h1[@class="heroTitle"]')
BRIEF = every('//p[@class="descriptionParagraph"]')
PROGRAMME = every(
    '//h4[@class="syllabusItemTitle"]',
    '//div[@class="programSectionContent"]/div/div/ul/li/span',
)
INSTRUCTORS = every('//span[@class="teacherName"]')

CONFIG = PlatformConfig(
    name="Edraak",
    layouts={
        "course": Layout(
            name="course",
            fields={
                "title": TITLE,
                "organization": first('//h4[@class="organizationName"]'),
                "brief": BRIEF,
                "programme": PROGRAMME,
                "instructors": INSTRUCTORS,
            },
        ),
        # Specializations show the partner logo instead of its name
        "specialization": Layout(
            name="specialization",
            fields={
                "title": TITLE,
                "organization": first(
                    '//h4[@class="organizationName"]',
                    Locator('//img[@class="logoImg"]', attribute="alt"),
                ),
                "brief": BRIEF,
                "programme": PROGRAMME,
                "instructors": INSTRUCTORS,
            },
        ),
    },
    variants=(("/specialization", "specialization"),),
    languages=(LanguageCode.ENGLISH, LanguageCode.ARABIC),
)
