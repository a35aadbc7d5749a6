"""Data models for SciJournal Digest."""

from enum import Enum

from pydantic import BaseModel, Field


class FeedType(str, Enum):
    """Feed flavour, selects the date extraction policy."""
    STANDARD = "standard"            # RSS 2.0 / Atom / RDF
    SCIENCEDIRECT = "sciencedirect"  # 日期写在 description HTML 里


class FeedSource(BaseModel):
    """一个期刊订阅源."""

    journal_name: str = Field(alias="journalName")
    url: str
    type: FeedType = FeedType.STANDARD

    class Config:
        populate_by_name = True
        use_enum_values = True


class Article(BaseModel):
    """Normalized article record; `link` is the identity key."""

    title: str = "No Title"
    link: str = ""
    description: str = ""        # 纯文本 (已去除 HTML)
    publication_date: str = Field(alias="publicationDate")

    class Config:
        populate_by_name = True


class ArticleGroup(BaseModel):
    """Articles of one journal, newest first."""

    journal_name: str = Field(alias="journalName")
    articles: list[Article] = []

    class Config:
        populate_by_name = True


class FeedTestResult(BaseModel):
    """Outcome of probing a single feed URL."""

    success: bool
    article_count: int = Field(0, alias="articleCount")
    message: str = ""
    sample_titles: list[str] = Field(default_factory=list, alias="sampleTitles")

    class Config:
        populate_by_name = True


class ArticlePage(BaseModel):
    """One page of a journal's articles after search filtering."""

    journal_name: str = Field(alias="journalName")
    page: int
    per_page: int = Field(alias="perPage")
    total: int
    total_pages: int = Field(alias="totalPages")
    articles: list[Article] = []

    class Config:
        populate_by_name = True
