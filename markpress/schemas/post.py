import datetime
from enum import Enum
from typing import Any, Dict, FrozenSet, Iterable, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Author(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1)
    picture: str


class OgImage(BaseModel):
    model_config = ConfigDict(frozen=True)

    url: str


class PostField(str, Enum):
    SLUG = "slug"
    TITLE = "title"
    DESCRIPTION = "description"
    DATE = "date"
    AUTHOR = "author"
    PATH = "path"
    COVER_IMAGE = "coverImage"
    OG_IMAGE = "ogImage"
    CONTENT = "content"


FieldSpec = Union[PostField, str]

INDEX_FIELDS = frozenset(
    {
        PostField.SLUG,
        PostField.TITLE,
        PostField.DESCRIPTION,
        PostField.DATE,
        PostField.AUTHOR,
        PostField.COVER_IMAGE,
    }
)
POST_PAGE_FIELDS = frozenset(PostField)


def normalize_fields(fields: Iterable[FieldSpec]) -> FrozenSet[PostField]:
    """Coerce field names to PostField, rejecting names that are not post fields."""
    if isinstance(fields, str):
        fields = [fields]
    try:
        return frozenset(PostField(f) for f in fields)
    except ValueError as e:
        raise ValueError(f"Unknown post field: {e}") from e


def _convert_date(value):
    if isinstance(value, (datetime.date, datetime.datetime)):
        return value.isoformat()
    return value


class Post(BaseModel):
    """A fully loaded post. Only the loader builds these; pages get PartialPost."""

    model_config = ConfigDict(frozen=True)

    slug: str = Field(min_length=1)
    title: str = Field(min_length=1)
    description: str
    date: str = Field(min_length=1)
    author: Author
    coverImage: str
    path: str
    ogImage: OgImage
    content: str = ""

    @field_validator("date", mode="before")
    @classmethod
    def _date_to_iso(cls, value):
        return _convert_date(value)

    @field_validator("date")
    @classmethod
    def _date_is_iso(cls, value: str) -> str:
        try:
            datetime.datetime.fromisoformat(value.replace("Z", "+00:00"))
        except ValueError:
            raise ValueError(f"not an ISO-8601 date: {value!r}") from None
        return value

    def select(self, fields: Iterable[FieldSpec]) -> "PartialPost":
        wanted = normalize_fields(fields)
        return PartialPost(**{field.value: getattr(self, field.value) for field in wanted})


class PartialPost(BaseModel):
    """A post with only the requested fields set; the rest stay unset."""

    model_config = ConfigDict(frozen=True)

    slug: Optional[str] = None
    title: Optional[str] = None
    description: Optional[str] = None
    date: Optional[str] = None
    author: Optional[Author] = None
    coverImage: Optional[str] = None
    path: Optional[str] = None
    ogImage: Optional[OgImage] = None
    content: Optional[str] = None

    @property
    def selected_fields(self) -> FrozenSet[PostField]:
        return frozenset(PostField(name) for name in self.model_fields_set)

    def to_props(self) -> Dict[str, Any]:
        return self.model_dump(exclude_unset=True)

    def with_content(self, content: str) -> "PartialPost":
        return self.model_copy(update={"content": content})
