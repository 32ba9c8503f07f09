"""Frontmatter schemas for the content collections."""

from __future__ import annotations

from datetime import date, datetime
from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator


class EntryMetadata(BaseModel):
    """Fields shared by every collection entry.

    Unknown frontmatter keys are kept so that site-specific fields survive a
    round trip through the catalog.
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    title: str = ""
    lang: Optional[str] = None
    description: str = ""
    draft: bool = False

    # Navigation, filled in for list views
    prev_slug: str = Field(default="", alias="prevSlug")
    prev_title: str = Field(default="", alias="prevTitle")
    next_slug: str = Field(default="", alias="nextSlug")
    next_title: str = Field(default="", alias="nextTitle")

    @field_validator("lang", mode="before")
    @classmethod
    def _lang_as_text(cls, value):
        if value is None:
            return None
        return str(value)


class PostMetadata(EntryMetadata):
    """Blog post frontmatter."""

    published: Union[datetime, date]
    updated: Optional[Union[datetime, date]] = None
    pinned: bool = False
    priority: Optional[int] = None
    tags: List[str] = Field(default_factory=list)
    category: Optional[str] = None
    image: str = ""

    @field_validator("tags", mode="before")
    @classmethod
    def _tags_as_list(cls, value):
        if value is None:
            return []
        if isinstance(value, str):
            return [value]
        return [str(tag) for tag in value]

    @field_validator("category", mode="before")
    @classmethod
    def _category_as_text(cls, value):
        if value is None or value == "":
            return None
        return str(value)


class SpecMetadata(EntryMetadata):
    """Specification page frontmatter."""

    published: Optional[Union[datetime, date]] = None
    updated: Optional[Union[datetime, date]] = None


__all__ = ["EntryMetadata", "PostMetadata", "SpecMetadata"]
