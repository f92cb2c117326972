"""Allow ``python -m content_scrape``."""
from content_scrape.cli import cli

if __name__ == "__main__":
    cli()
