from typing import Iterable, Iterator, List, Optional, Tuple

from .models import (
    Block,
    Bookmark,
    ChildDatabase,
    ChildPage,
    Embed,
    Equation,
    FileBlock,
    Heading,
    RichText,
    RichTextBlock,
)


def plain_text(spans: Optional[Iterable[RichText]]) -> str:
    """Join the plain text of rich text spans."""
    if not spans:
        return ""
    return "".join(span.plain_text or "" for span in spans)


def block_text(block: Block) -> str:
    """Plain text of a block's own content, without its children."""
    content = block.content
    if isinstance(content, (RichTextBlock, Heading)):
        return plain_text(content.text)
    if isinstance(content, (ChildPage, ChildDatabase)):
        return content.title
    if isinstance(content, Bookmark):
        return plain_text(content.caption) or content.url
    if isinstance(content, Embed):
        return content.url
    if isinstance(content, Equation):
        return content.expression
    if isinstance(content, FileBlock):
        return plain_text(content.caption) or (content.url or "")
    return ""


def walk(blocks: Iterable[Block], depth: int = 0) -> Iterator[Tuple[int, Block]]:
    """Yield (depth, block) for every block, depth first, in document order."""
    for block in blocks:
        yield depth, block
        yield from walk(block.children, depth + 1)


def render_outline(blocks: Iterable[Block], indent: str = "  ") -> str:
    """Render blocks as an indented plain-text outline, skipping empty lines."""
    lines: List[str] = []
    for depth, block in walk(blocks):
        text = block_text(block)
        if text:
            lines.append(f"{indent * depth}{text}")
    return "\n".join(lines)
