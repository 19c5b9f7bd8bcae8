"""PluralSight course pages."""

from course_scraper.models import LanguageCode
from course_scraper.models.extraction import Layout, PlatformConfig, every, first, outline

CONFIG = PlatformConfig(
    name="PluralSight",
    layouts={
        "course": Layout(
            name="course",
            fields={
                "title": first(
                    '//div[@id="course-page-hero"]/h1',
                    '//div[@id="course-hero"]/div/h1',
                ),
                "brief": first(
                    '//div[@class="course-content-about"]/p',
                    '//div[@id="course-hero"]/div[@class="course-info"]/p',
                ),
                "programme": outline(
                    '//div[@class="toc-title"]',
                    items=(
                        '//div[@class="toc-item"][{index}]/div[2]/ul/li/a/span[@class="accordion-content__row__title"]',
                    ),
                ),
                "duration": first(
                    '//aside[@class="course-content-right show-for-large-up"]/div[2]/div[4]/div[2]/text()',
                    "//aside/div[2]/div[4]/div[2]/text()",
                ),
                "instructors": every(
                    '//div[@class="author-name"]',
                    '//div[@class="course-authors-list"]/span/span',
                    pattern=r"^\s*(?:by\s+)?(.+)",
                ),
            },
        ),
    },
    organization="PluralSight",
    languages=(LanguageCode.ENGLISH,),
    check_url=False,
    user_agent=True,
)
