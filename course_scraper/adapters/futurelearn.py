"""FutureLearn course pages."""

from course_scraper.models.extraction import Layout, PlatformConfig, every, first

STICKY_BANNER = '//div[@id="sticky-banner-start"]/ul'

CONFIG = PlatformConfig(
    name="FutureLearn",
    layouts={
        "course": Layout(
            name="course",
            fields={
                "title": first('//div[@id="section-page-header"]//div/h1'),
                "organization": first('//section[@id="section-creators"]/div//div/h2'),
                "brief": every('//section[@id="section-overview"]/div/div/div'),
                "programme": every(
                    '//section[@id="section-syllabus"]//div/ul/li/div[2]/div/div/div/div/div/div/div/h3',
                    '//section[@id="section-topics"]/div/div[2]/ul/li',
                ),
                "duration": first(STICKY_BANNER + "/li[1]/div[2]/span"),
                "pace": first(STICKY_BANNER + "/li[3]/div[2]/span"),
                "instructors": every('//section[@id="section-educators"]//div/h3/a/span'),
            },
        ),
    },
)
