"""Udemy course landing pages."""

from course_scraper.models.extraction import Layout, PlatformConfig, every, first, outline

CONFIG = PlatformConfig(
    name="Udemy",
    layouts={
        "course": Layout(
            name="course",
            fields={
                "title": first('//h1[@data-purpose="lead-title"]'),
                "brief": every('//div[@data-purpose="safely-set-inner-html:description:description"]/p'),
                "programme": outline(
                    '//span[@class="section--section-title--svpHP"]',
                    items=(
                        '//div[@data-purpose="course-curriculum"]/div[2]/div[{index}]'
                        "/div[2]/div/ul/li/div/div/div/div/span",
                    ),
                    wait=True,
                ),
                # Total length such as "22h 13m"
                "duration": first('//span[@class="curriculum--content-length--V3vIz"]/span/span', wait=True),
                "instructors": every('//span[@class="instructor-links--names--fJWai"]/a'),
                "languages": every('//div[@data-purpose="lead-course-locale"]/text()'),
            },
        ),
    },
    organization="Udemy",
    check_url=False,
    user_agent=True,
    trim_brief_at_colon=True,
)
