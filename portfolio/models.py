"""
Content records for the portfolio

Each pydantic model mirrors one part of the JSON fragments served from the
data directory (or URL). Records are frozen: once the loader publishes a
``PortfolioContent`` nothing downstream can change it.

Normalisation rules shared by every record:
- ``null`` values are dropped so the field default applies (strings -> "")
- numbers given for string fields are coerced to strings
- unknown keys are ignored
"""
from __future__ import annotations
from typing import Any, Iterable, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

ItemId = Union[int, str]


class _Record(BaseModel):
    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        populate_by_name=True,
        coerce_numbers_to_str=True,
    )

    @model_validator(mode="before")
    @classmethod
    def _drop_nulls(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return {k: v for k, v in data.items() if v is not None}
        return data


class Contact(_Record):
    email: str = ""
    phone: str = ""
    address: str = ""
    github: str = ""
    linkedin: str = ""


class Skill(_Record):
    name: str = ""
    level: int = Field(0, ge=0, le=100, description="Proficiency, 0..100")


class Project(_Record):
    id: ItemId
    title: str = ""
    description: str = ""
    technologies: Tuple[str, ...] = ()
    image: Optional[str] = Field(None, description="Cover image URL")
    link: Optional[str] = Field(None, description="Where 'View project' points")

    @field_validator("image", "link")
    @classmethod
    def _blank_is_absent(cls, v: Optional[str]) -> Optional[str]:
        if v is None or not v.strip():
            return None
        return v.strip()


class Article(_Record):
    id: ItemId
    title: str = ""
    date: str = ""
    read_time: str = Field("", alias="readTime")
    excerpt: str = ""
    content: str = Field("", description="Marked-up article body")


class About(_Record):
    text: str = ""


class GeneralInfo(_Record):
    name: str = ""
    tagline: str = ""
    bio: str = ""
    contact: Contact = Field(default_factory=Contact)


def duplicate_ids(items: Iterable[Any]) -> list:
    seen, dupes = set(), []
    for item in items:
        if item.id in seen and item.id not in dupes:
            dupes.append(item.id)
        seen.add(item.id)
    return dupes


class PortfolioContent(_Record):
    name: str = ""
    tagline: str = ""
    bio: str = ""
    contact: Contact = Field(default_factory=Contact)
    skills: Tuple[Skill, ...] = ()
    projects: Tuple[Project, ...] = ()
    articles: Tuple[Article, ...] = ()
    about: About = Field(default_factory=About)

    @model_validator(mode="after")
    def _unique_ids(self) -> "PortfolioContent":
        for label, items in (("project", self.projects), ("article", self.articles)):
            dupes = duplicate_ids(items)
            if dupes:
                raise ValueError(f"duplicate {label} ids: {dupes}")
        return self

    def article(self, article_id: ItemId) -> Optional[Article]:
        return next((a for a in self.articles if a.id == article_id), None)

    def has_article(self, article_id: ItemId) -> bool:
        return self.article(article_id) is not None
