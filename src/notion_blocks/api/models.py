"""Pydantic models for Notion blocks and block-children listings.

See: https://developers.notion.com/reference/block
"""

import logging
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, List, Optional, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    field_validator,
    model_serializer,
    model_validator,
)

logger = logging.getLogger(__name__)

BLOCK_OBJECT = "block"


class NotionModel(BaseModel):
    """Base for wire objects: keeps unknown keys, omits absent fields on dump."""

    model_config = ConfigDict(extra="allow")

    @model_serializer(mode="wrap")
    def serialize_payload(self, handler):
        return omit_absent(self, handler(self))


def omit_absent(model: BaseModel, data: Dict[str, Any]) -> Dict[str, Any]:
    """Drop unset declared fields; extra keys are kept as decoded, nulls included."""
    fields = type(model).model_fields
    return {
        key: value for key, value in data.items() if not (key in fields and value is None)
    }


def as_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Read naive timestamps as UTC so they always encode with an offset."""
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class BlockType(str, Enum):
    PARAGRAPH = "paragraph"
    HEADING_1 = "heading_1"
    HEADING_2 = "heading_2"
    HEADING_3 = "heading_3"
    BULLETED_LIST_ITEM = "bulleted_list_item"
    NUMBERED_LIST_ITEM = "numbered_list_item"
    TO_DO = "to_do"
    TOGGLE = "toggle"
    CHILD_PAGE = "child_page"
    CHILD_DATABASE = "child_database"
    CALLOUT = "callout"
    QUOTE = "quote"
    CODE = "code"
    EMBED = "embed"
    IMAGE = "image"
    VIDEO = "video"
    FILE = "file"
    PDF = "pdf"
    BOOKMARK = "bookmark"
    EQUATION = "equation"
    UNSUPPORTED = "unsupported"


# Each supported type stores its payload under a field of the same name.
VARIANT_FIELDS = tuple(t.value for t in BlockType if t is not BlockType.UNSUPPORTED)


class FileType(str, Enum):
    FILE = "file"
    EXTERNAL = "external"


class RichText(NotionModel):
    """A rich text span. Only the commonly read keys are typed."""

    type: Optional[str] = None
    plain_text: Optional[str] = None
    href: Optional[str] = None
    annotations: Optional[Dict[str, Any]] = None


class RichTextBlock(NotionModel):
    text: List[RichText] = Field(default_factory=list)
    children: Optional[List["Block"]] = None


class Heading(NotionModel):
    text: List[RichText] = Field(default_factory=list)


class ToDo(RichTextBlock):
    checked: Optional[bool] = None


class InternalFile(NotionModel):
    """A file hosted by Notion; the url stops working after expiry_time."""

    url: str
    expiry_time: datetime

    @field_validator("expiry_time")
    @classmethod
    def expiry_as_utc(cls, value: datetime) -> datetime:
        return as_utc(value)


class ExternalFile(NotionModel):
    url: str


class Icon(NotionModel):
    type: str
    emoji: Optional[str] = None
    file: Optional[InternalFile] = None
    external: Optional[ExternalFile] = None


class Callout(RichTextBlock):
    icon: Optional[Icon] = None


class Code(RichTextBlock):
    language: Optional[str] = None


class ChildPage(NotionModel):
    title: str = ""


class ChildDatabase(NotionModel):
    title: str = ""


class Embed(NotionModel):
    url: str = ""


class Bookmark(NotionModel):
    url: str = ""
    caption: Optional[List[RichText]] = None


class Equation(NotionModel):
    expression: str = ""


class FileBlock(NotionModel):
    """Payload shared by image, video, file and pdf blocks."""

    type: Union[FileType, str] = Field(union_mode="left_to_right")
    file: Optional[InternalFile] = None
    external: Optional[ExternalFile] = None
    caption: Optional[List[RichText]] = None

    @model_validator(mode="after")
    def check_reference(self) -> "FileBlock":
        if not isinstance(self.type, FileType):
            logger.debug("Keeping file block with unrecognized kind %r", self.type)
            return self
        if self.file is not None and self.external is not None:
            raise ValueError("file block carries both a file and an external reference")
        if self.type is FileType.FILE and self.external is not None:
            raise ValueError("file block of type 'file' carries an external reference")
        if self.type is FileType.EXTERNAL and self.file is not None:
            raise ValueError("file block of type 'external' carries a file reference")
        return self

    @property
    def url(self) -> Optional[str]:
        """The url of the reference selected by type; None for unknown kinds."""
        if self.type is FileType.FILE:
            reference = self.file
        elif self.type is FileType.EXTERNAL:
            reference = self.external
        else:
            return None
        return reference.url if reference is not None else None


class Block(NotionModel):
    """One block of content in a page tree.

    ``type`` selects which variant field holds the payload. For known types
    at most one variant field may be set and its name must equal ``type``.
    Types this model does not know are kept as plain strings and their
    payload stays in the model's extra fields, so it survives a decode/encode
    round trip. Naive timestamps are read as UTC.

    ``object`` is readable but never trusted on output: encoding always
    writes ``"object": "block"``.
    """

    object: str = Field(default=BLOCK_OBJECT, exclude=True)
    id: Optional[str] = None
    type: Union[BlockType, str] = Field(union_mode="left_to_right")
    created_time: Optional[datetime] = None
    last_edited_time: Optional[datetime] = None
    has_children: Optional[bool] = None

    paragraph: Optional[RichTextBlock] = None
    heading_1: Optional[Heading] = None
    heading_2: Optional[Heading] = None
    heading_3: Optional[Heading] = None
    bulleted_list_item: Optional[RichTextBlock] = None
    numbered_list_item: Optional[RichTextBlock] = None
    to_do: Optional[ToDo] = None
    toggle: Optional[RichTextBlock] = None
    child_page: Optional[ChildPage] = None
    child_database: Optional[ChildDatabase] = None
    callout: Optional[Callout] = None
    quote: Optional[RichTextBlock] = None
    code: Optional[Code] = None
    embed: Optional[Embed] = None
    image: Optional[FileBlock] = None
    video: Optional[FileBlock] = None
    file: Optional[FileBlock] = None
    pdf: Optional[FileBlock] = None
    bookmark: Optional[Bookmark] = None
    equation: Optional[Equation] = None

    @field_validator("created_time", "last_edited_time")
    @classmethod
    def timestamps_as_utc(cls, value: Optional[datetime]) -> Optional[datetime]:
        return as_utc(value)

    @model_validator(mode="after")
    def check_variant(self) -> "Block":
        # Unknown types are kept as decoded, stray known payloads included.
        if not self.is_supported:
            logger.debug("Keeping block %s with unrecognized type %r", self.id, self.type_name)
            return self
        populated = [name for name in VARIANT_FIELDS if getattr(self, name) is not None]
        if len(populated) > 1:
            raise ValueError(
                f"block carries more than one variant payload: {', '.join(populated)}"
            )
        if populated and populated[0] != self.type_name:
            raise ValueError(
                f"{populated[0]!r} payload does not match block type {self.type_name!r}"
            )
        return self

    @model_serializer(mode="wrap")
    def serialize_payload(self, handler):
        payload = {"object": BLOCK_OBJECT}
        payload.update(omit_absent(self, handler(self)))
        return payload

    @property
    def type_name(self) -> str:
        return self.type.value if isinstance(self.type, BlockType) else self.type

    @property
    def block_type(self) -> BlockType:
        """The type as an enum member; UNSUPPORTED for values this model does not know."""
        return self.type if isinstance(self.type, BlockType) else BlockType.UNSUPPORTED

    @property
    def is_supported(self) -> bool:
        return self.type_name in VARIANT_FIELDS

    @property
    def content(self) -> Any:
        """The payload selected by ``type``, or the raw dict for an unknown type."""
        if self.is_supported:
            return getattr(self, self.type_name)
        return (self.model_extra or {}).get(self.type_name)

    @property
    def children(self) -> List["Block"]:
        content = self.content
        if isinstance(content, RichTextBlock) and content.children:
            return content.children
        return []


for _model in (RichTextBlock, ToDo, Callout, Code):
    _model.model_rebuild()


class PaginationQuery(BaseModel):
    """Query parameters for one page of a block-children listing."""

    start_cursor: Optional[str] = None
    page_size: Optional[int] = Field(default=None, ge=1, le=100)

    def to_params(self) -> Dict[str, Any]:
        params: Dict[str, Any] = {}
        if self.start_cursor:
            params["start_cursor"] = self.start_cursor
        if self.page_size is not None:
            params["page_size"] = self.page_size
        return params


class BlockChildrenResponse(BaseModel):
    """Results (block children) and pagination data returned from a list request."""

    model_config = ConfigDict(extra="allow")

    results: List[Block] = Field(default_factory=list)
    has_more: bool = False
    next_cursor: Optional[str] = None

    @field_validator("next_cursor")
    @classmethod
    def blank_cursor_is_absent(cls, value: Optional[str]) -> Optional[str]:
        return value or None

    def next_query(self, page_size: Optional[int] = None) -> Optional[PaginationQuery]:
        """Build the query for the following page, or None if this was the last one."""
        if not self.has_more or self.next_cursor is None:
            return None
        return PaginationQuery(start_cursor=self.next_cursor, page_size=page_size)
