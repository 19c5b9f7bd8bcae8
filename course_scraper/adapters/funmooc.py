"""FUN-MOOC course pages."""

from course_scraper.models import Locator
from course_scraper.models.extraction import Layout, PlatformConfig, every, first

PLAN = '//section[@class="course-detail__row course-detail__plan"]'
SUBHEADER = "//div[@class='subheader__content']/div[2]/ul"

CONFIG = PlatformConfig(
    name="Fun-Mooc",
    layouts={
        "course": Layout(
            name="course",
            fields={
                "title": first("//h1[@class='subheader__title']"),
                # Organizations are exposed as microdata on the partner links
                "organization": every(Locator("//a/meta[@property='name']", attribute="content")),
                "brief": every("//*[@id='site-content']/div[2]/div[1]/div/div[1]/div[1]/div/div/p"),
                "programme": every(
                    '//div[@class="nested-item nested-item--accordion nested-item--0"]/ul/li/div',
                    PLAN + "/ul/li",
                    PLAN + "/div",
                ),
                # "Durée : 10 heures"
                "duration": first(SUBHEADER + "/li[2]/span"),
                "instructors": every("//section/div/div/div/div/a/h3", limit=3),
                # "Langues : Français, Anglais"
                "languages": first(SUBHEADER + "/div/li/span"),
            },
        ),
    },
)
