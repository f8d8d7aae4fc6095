"""Tweet data model."""

from pydantic import BaseModel


class RecentTweet(BaseModel):
    """A timeline entry scraped from a Twitter profile page."""

    text: str
    date: str = ""
