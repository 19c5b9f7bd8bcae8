"""Coursera: courses, specializations and professional certificates."""

from course_scraper.models.extraction import Disclosure, Layout, PlatformConfig, every, first, summary

LANGUAGE_DIALOG = Disclosure(
    trigger="//div[2]/div/button/span/span",
    fields=("languages",),
)

TITLE = first("//h1[@data-e2e='hero-title']")
INSTRUCTORS = every('//a[@data-track-component="hero_instructor"]/span', limit=3)
LANGUAGES = first("//*[@role='dialog']/div[2]/div[2]/p[2]")
# Duration cards read "3 months at 10 hours a week" or "14 hours to complete"
DURATION = every(
    "//div[@class='cds-119 cds-Typography-base css-h1jogs cds-121']",
    pattern=r"\b(?:hours?|weeks?|months?)\b",
)

COURSE = Layout(
    name="course",
    fields={
        "title": TITLE,
        "organization": first("//*[@id='modules']/div/div/div/div[3]/div/div[2]/div[2]/div/div[2]/a/span"),
        "brief": every(
            "//*[@id='modules']/div/div/div/div[1]/div/div/div/div[1]/div/p[1]",
            "//*[@id='courses']/div/div/div/div[1]/div/div/div/div[1]/div/div/div/div/p[1]/span/span",
        ),
        "programme": summary(
            "//div[@data-testid='accordion-item']/div/div/div/div/button/span/span/span/h3",
            "//div[@data-testid='accordion-item']/div/div/div/div[1]/div/h3/a",
            items=(
                '//div[@data-testid="accordion-item"][{index}]/div/div/div/div/div/div/div/div/div/p',
                '//div[@data-testid="accordion-item"][{index}]/div/div/div/div[2]/div/div/div/div/div/div[1]/ul/li',
            ),
        ),
        "duration": DURATION,
        "instructors": INSTRUCTORS,
        "languages": LANGUAGES,
    },
    disclosures=(LANGUAGE_DIALOG,),
)

SPECIALIZATION = Layout(
    name="specialization",
    fields={
        "title": TITLE,
        "organization": first("//*[@id='courses']/div/div/div/div[3]/div/div[2]/div[2]/div/div[2]/a/span"),
        "brief": every(
            "//*[@id='courses']/div/div/div/div[1]/div/div/div/div[1]/div/div/div/div/p[1]/span/span",
        ),
        "programme": every("//*[@data-e2e='sdp-course-list-link']"),
        "duration": DURATION,
        "instructors": INSTRUCTORS,
        "languages": LANGUAGES,
    },
    disclosures=(LANGUAGE_DIALOG,),
)

CONFIG = PlatformConfig(
    name="Coursera",
    layouts={
        "course": COURSE,
        "specialization": SPECIALIZATION,
        "certificate": SPECIALIZATION,
    },
    variants=(
        ("/specializations/", "specialization"),
        ("/learn/", "course"),
        ("/professional-certificates/", "certificate"),
    ),
)
