"""Google SkillShop courses."""

from course_scraper.models.extraction import Layout, PlatformConfig, every, first

CONFIG = PlatformConfig(
    name="SkillShop",
    layouts={
        "course": Layout(
            name="course",
            fields={
                "title": first('//div[@class="course__header"]/div/h1'),
                "brief": every('//div[@class="course__description postcontent"]'),
                "programme": every('//h2[@class="u-headingsection--activity activitysection__name"]/text()[1]'),
                # "45 mins" or "1.5 hrs"
                "duration": first(
                    '//ul[@class="activityheading__meta activitymeta activitymeta--heading"]/li[3]/text()[2]'
                ),
            },
        ),
    },
    organization="SkillShop",
    detect_languages=True,
    check_url=False,
    user_agent=True,
)
