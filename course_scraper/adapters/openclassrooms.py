"""OpenClassrooms courses and paths."""

from course_scraper.models.extraction import Layout, PlatformConfig, every, first

PATH_DESCRIPTION = '//*[@id="path_details_description"]/div/div'

COURSE = Layout(
    name="course",
    fields={
        "title": first("//*[@id='course-header']/div[1]/div/div/div/a/h1"),
        "brief": every("//*[@id='mainContent']/article/div[3]/div/div/div/div[2]/div/section/div/div[1]/p"),
        "programme": every("//div[@class='course-part-summary__title']/h3"),
        "duration": first("//*[@id='course-header']/div[2]/div/div/div/div/div[1]/ul/li[1]/span"),
        "instructors": every("//div[@itemprop='name']"),
    },
)

PATH = Layout(
    name="path",
    fields={
        "title": first(
            '//*[@id="path_details_screen"]/section[1]/div[1]/div/div[1]/div/h1',
            wait=True,
        ),
        "brief": every(PATH_DESCRIPTION + "/p"),
        # Project lists come as one block per list, one project per line
        "programme": every(
            PATH_DESCRIPTION + "/ol",
            PATH_DESCRIPTION + "/ul",
            PATH_DESCRIPTION + "/ul[1]",
            split_lines=True,
        ),
        "duration": first(
            '//*[@id="path_details_screen"]/section[1]/div[1]/div/div[1]/div/div/div[1]/div[2]/div/div/div/span/p'
        ),
    },
)

CONFIG = PlatformConfig(
    name="OpenClassrooms",
    layouts={"course": COURSE, "path": PATH},
    variants=(("/paths/", "path"), ("/courses/", "course")),
    organization="OpenClassrooms",
    detect_languages=True,
    trim_brief_at_colon=True,
)
