from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel

SnippetType = Literal["text", "voice", "image"]

STAT_KEYS = ("body", "intelligence", "reflexes", "technical", "cool")

STAT_LABELS = {
    "body": "肉體",
    "intelligence": "智力",
    "reflexes": "反應",
    "technical": "技術",
    "cool": "酷勁",
}


class StatBlock(BaseModel):
    """Five-attribute stat vector. Used both for deltas and for totals."""

    model_config = ConfigDict(frozen=True)

    # Missing fields on a delta count as zero
    body: int = 0
    intelligence: int = 0
    reflexes: int = 0
    technical: int = 0
    cool: int = 0

    @field_validator(*STAT_KEYS, mode="before")
    @classmethod
    def _null_is_zero(cls, value):
        return 0 if value is None else value

    def __add__(self, other: "StatBlock") -> "StatBlock":
        return StatBlock(**{key: getattr(self, key) + getattr(other, key) for key in STAT_KEYS})

    def as_dict(self) -> dict[str, int]:
        return {key: getattr(self, key) for key in STAT_KEYS}


BASELINE_STATS = StatBlock(body=10, intelligence=10, reflexes=10, technical=10, cool=10)


class SnippetDraft(BaseModel):
    """Classified input waiting to be logged (no id or timestamp yet)."""

    event_name: str
    stat_changes: StatBlock = Field(default_factory=StatBlock)
    comment: str = ""
    type: SnippetType = "text"
    media_url: Optional[str] = None

    @model_validator(mode="after")
    def _media_only_for_images(self) -> "SnippetDraft":
        if self.media_url is not None and self.type != "image":
            raise ValueError(f"media_url is only allowed on image snippets, not {self.type}")
        return self


class Snippet(BaseModel):
    """
    One logged life event with its stat delta.

    Immutable once created. Serialized with camelCase names
    (eventName, statChanges, mediaUrl) in the local blob.
    """

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    id: str
    event_name: str
    timestamp: int = Field(..., description="Creation instant in epoch milliseconds")
    stat_changes: StatBlock = Field(default_factory=StatBlock)
    comment: str = ""
    type: SnippetType = "text"
    media_url: Optional[str] = None

    @classmethod
    def from_draft(cls, draft: SnippetDraft, snippet_id: str, timestamp: int) -> "Snippet":
        return cls(
            id=snippet_id,
            event_name=draft.event_name,
            timestamp=timestamp,
            stat_changes=draft.stat_changes,
            comment=draft.comment,
            type=draft.type,
            media_url=draft.media_url,
        )


class MediaPayload(BaseModel):
    """Inline media handed to the classifier (base64 data, no data: prefix)."""

    mime_type: str
    data: str

    def to_data_url(self) -> str:
        return f"data:{self.mime_type};base64,{self.data}"


class Classification(BaseModel):
    """Classifier output: the fields a SnippetDraft needs beyond its type."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    event_name: str = Field(..., min_length=1)
    stat_changes: StatBlock = Field(default_factory=StatBlock)
    comment: str = ""

    def to_draft(self, snippet_type: SnippetType, media_url: Optional[str] = None) -> SnippetDraft:
        return SnippetDraft(
            event_name=self.event_name,
            stat_changes=self.stat_changes,
            comment=self.comment,
            type=snippet_type,
            media_url=media_url,
        )
