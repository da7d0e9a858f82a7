from .api.codec import (
    decode_block,
    decode_block_children,
    encode_block,
    encode_block_children,
    encode_block_json,
    encode_blocks,
)
from .api.errors import BlockDecodeError, DecodeIssue, NotionModelError
from .api.models import (
    Block,
    BlockChildrenResponse,
    BlockType,
    Bookmark,
    Callout,
    ChildDatabase,
    ChildPage,
    Code,
    Embed,
    Equation,
    ExternalFile,
    FileBlock,
    FileType,
    Heading,
    Icon,
    InternalFile,
    PaginationQuery,
    RichText,
    RichTextBlock,
    ToDo,
)
from .api.outline import block_text, plain_text, render_outline, walk

__version__ = "0.1.0"
