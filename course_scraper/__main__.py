"""Allow ``python -m course_scraper``."""

from course_scraper.cli import main

if __name__ == "__main__":
    main()
