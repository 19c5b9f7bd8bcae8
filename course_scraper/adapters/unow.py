"""Unow course pages."""

from course_scraper.models import LanguageCode
from course_scraper.models.extraction import Layout, PlatformConfig, every, first

HERO = '//div[@class="main-block__content course-hero__content"]'

CONFIG = PlatformConfig(
    name="Unow",
    layouts={
        "course": Layout(
            name="course",
            fields={
                "title": first(HERO + "//h1"),
                "brief": every(
                    '//div[@class="unow-block__content course-grid pb-0"]/div/p',
                    HERO + "//p[1]",
                ),
                "programme": every('//h4[@class="course-program-detail__title"]'),
                "duration": every('//ul[@class="course-offers__details"]/li', pattern=r"Durée"),
                "instructors": every('//h3[@class="unow-heading-4 mt-0"]'),
            },
        ),
    },
    organization="Unow",
    languages=(LanguageCode.FRENCH,),
)
