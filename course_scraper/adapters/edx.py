"""edX course pages."""

from course_scraper.models.extraction import Layout, PlatformConfig, every, first

INFO_CONTENT = '//div[@class="course-about desktop course-info-content"]'

# Language and institution share one list of "Label: value" items
DETAILS = INFO_CONTENT + "/div[4]/div//ul/li"

CONFIG = PlatformConfig(
    name="edX",
    layouts={
        "course": Layout(
            name="course",
            fields={
                "title": first(INFO_CONTENT + "//div[1]/h1"),
                "organization": every(DETAILS, pattern=r"Institution:\s*(.+)"),
                "brief": every('//div[@class="mt-2 lead-sm html-data"]'),
                "programme": every('//div[@class="mt-2 html-data"]/ul/li'),
                # "6 weeks" followed by the weekly effort, e.g. "4-6 hours per week"
                "duration": first(INFO_CONTENT + "/div[2]/div/div[1]/div/div/div[1]/div/div[1]"),
                "instructors": every('//div[@class="instructor-card px-4 py-3.5 rounded"]/div/h3', wait=True),
                "languages": every(DETAILS, pattern=r"Languages?:\s*(.+)"),
            },
        ),
    },
)
