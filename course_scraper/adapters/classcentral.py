"""Class Central course listings."""

from course_scraper.models.extraction import Layout, PlatformConfig, every, first

TRUNCATED = '//div[@class="truncatable-area is-truncated wysiwyg text-1 line-wide"]'
EXPANDED = '//div[@class="wysiwyg text-1 line-wide"]'

CONFIG = PlatformConfig(
    name="Class Central",
    layouts={
        "course": Layout(
            name="course",
            fields={
                "title": first('//h1[@class="head-2 medium-up-head-1 small-down-margin-bottom-xsmall"]'),
                "organization": first('//a[@class="link-gray-underline text-1"]'),
                "brief": first(TRUNCATED, EXPANDED),
                "programme": every(TRUNCATED + "/ul/li", EXPANDED + "/ul/li"),
                "duration": every('//div[@id="details-contents"]/ul/li/div[2]/span', pattern=r"hours?"),
                "instructors": every(
                    '//div[@class="course-noncollapsable-section small-down-padding-medium padding-vert-medium"]/p'
                ),
            },
        ),
    },
    detect_languages=True,
    check_url=False,
    user_agent=True,
)
