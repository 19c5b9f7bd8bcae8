import pytest

from course_scraper.adapters import OpenSapAdapter, PlatformAdapter, coursera, edraak, funmooc, opensap
from course_scraper.adapters.opensap import labelled, section
from course_scraper.models import LanguageCode
from tests.fakes import FakeBrowser, FakeSession, FakeValidator


def paths(layout, name):
    return [locator.path for locator in layout.fields[name].locators]


def adapter_for(config, page, adapter_class=PlatformAdapter):
    return adapter_class(config, browser_service=FakeBrowser(page), validator=FakeValidator())


@pytest.mark.asyncio
async def test_coursera_course_page():
    layout = coursera.COURSE
    item_templates = layout.fields["programme"].items
    page = FakeSession(
        texts={
            paths(layout, "title")[0]: ["Machine Learning"],
            paths(layout, "organization")[0]: ["Stanford University"],
            paths(layout, "brief")[0]: ["Learn the fundamentals."],
            paths(layout, "programme")[0]: ["Supervised learning", "Advice for applying"],
            item_templates[0].replace("{index}", "1"): ["Linear regression.", "Gradient descent"],
            item_templates[1].replace("{index}", "2"): ["Bias and variance"],
            paths(layout, "duration")[0]: ["Beginner level", "3 months at 10 hours a week", "Flexible schedule"],
            paths(layout, "instructors")[0]: ["Andrew Ng", "Andrew Ng", "Geoff Ladwig", "Aarti Bagul", "Eddy Shyu"],
        },
        revealed={coursera.LANGUAGE_DIALOG.trigger: {paths(layout, "languages")[0]: ["English, Français, العربية"]}},
    )
    adapter = adapter_for(coursera.CONFIG, page)

    record = await adapter.scrape("https://www.coursera.org/learn/machine-learning")

    assert record.title == "Machine Learning"
    assert record.organization == "Stanford University"
    assert record.programme == [
        "Supervised learning : Linear regression. Gradient descent",
        "Advice for applying : Bias and variance",
    ]
    assert record.duration_minutes == "120:00"
    assert record.instructors == ["Andrew Ng", "Geoff Ladwig", "Aarti Bagul"]
    assert record.languages == [LanguageCode.ENGLISH, LanguageCode.FRENCH, LanguageCode.ARABIC]


@pytest.mark.asyncio
async def test_coursera_specialization_lists_courses():
    layout = coursera.SPECIALIZATION
    page = FakeSession(texts={
        paths(layout, "title")[0]: ["Deep Learning"],
        paths(layout, "programme")[0]: ["Neural Networks", "Improving Deep Neural Networks"],
    })
    adapter = adapter_for(coursera.CONFIG, page)

    record = await adapter.scrape("https://www.coursera.org/specializations/deep-learning")

    assert record.programme == ["Neural Networks", "Improving Deep Neural Networks"]
    assert record.languages == []


@pytest.mark.asyncio
async def test_edraak_specialization_organization_from_logo():
    page = FakeSession(
        texts={'//h1[@class="heroTitle"]': ["علم البيانات"]},
        attributes={('//img[@class="logoImg"]', "alt"): ["Queen Rania Foundation"]},
    )
    adapter = adapter_for(edraak.CONFIG, page)

    record = await adapter.scrape("https://www.edraak.org/en/specialization/data-science/")

    assert record.organization == "Queen Rania Foundation"
    assert record.languages == [LanguageCode.ENGLISH, LanguageCode.ARABIC]
    assert record.duration_minutes is None


@pytest.mark.asyncio
async def test_funmooc_reads_metadata_and_french_labels():
    subheader = "//div[@class='subheader__content']/div[2]/ul"
    page = FakeSession(
        texts={
            "//h1[@class='subheader__title']": ["Introduction à la statistique"],
            subheader + "/li[2]/span": ["Durée : 10 heures"],
            subheader + "/div/li/span": ["Langues : Français, Anglais"],
        },
        attributes={("//a/meta[@property='name']", "content"): ["Université de Lyon", "Inria"]},
    )
    adapter = adapter_for(funmooc.CONFIG, page)

    record = await adapter.scrape("https://www.fun-mooc.fr/fr/cours/introduction-a-la-statistique/")

    assert record.organization == "Université de Lyon, Inria"
    assert record.duration_minutes == "10:00"
    assert record.languages == [LanguageCode.FRENCH, LanguageCode.ENGLISH]


DETAILS = "\n".join([
    "In this course you will discover SAP BTP.",
    "Course Characteristics",
    "Duration: 6 weeks",
    "Effort: 3-4 hours per week",
    "Course Content",
    "Week 1: Getting Started",
    "",
    "Week 2: Extensions",
    "Target Audience",
    "Developers",
])


def test_section_and_labelled_lines():
    details = [line for line in DETAILS.split("\n") if line]

    assert section(details, "Course Content", "Target Audience") == ["Week 1: Getting Started", "Week 2: Extensions"]
    assert section(details, "Missing heading") == []
    assert labelled(section(details, "Course Characteristics", "Course Content"), "Effort") == "3-4 hours per week"


@pytest.mark.asyncio
async def test_opensap_carves_programme_and_duration():
    page = FakeSession(
        texts={
            '//div[@class="header-title"]': ["Build Apps with SAP BTP"],
            '//div[@class="RenderedMarkdown"]/p[1]': ["In this course you will discover SAP BTP."],
            "//ul[@class='list-unstyled']/li/h4": ["Fallback week:"],
            '//span[@class="shortinfo"][2]/span[2]': ["English"],
        },
        blocks={"//div[@class='RenderedMarkdown']": DETAILS},
    )
    adapter = adapter_for(opensap.CONFIG, page, OpenSapAdapter)

    record = await adapter.scrape("https://open.sap.com/courses/btp1")

    assert record.programme == ["Week 1: Getting Started", "Week 2: Extensions"]
    assert record.duration_minutes == "24:00"
    assert record.organization == "OpenSap"
    assert record.languages == [LanguageCode.ENGLISH]


@pytest.mark.asyncio
async def test_opensap_programme_fallback_strips_colons():
    page = FakeSession(texts={"//ul[@class='list-unstyled']/li/h4": ["Week 1:", "Week 2:"]})
    adapter = adapter_for(opensap.CONFIG, page, OpenSapAdapter)

    record = await adapter.scrape("https://open.sap.com/courses/old")

    assert record.programme == ["Week 1", "Week 2"]
    assert record.duration_minutes is None
