"""Encoding and decoding of block payloads.

Decoding is permissive: unknown keys are kept and unknown block types are not
errors. Only structural problems (invalid JSON, a wrong JSON type for a known
field, a variant payload that contradicts ``type``) raise BlockDecodeError.
"""

import logging
from typing import Any, Dict, Iterable, List, Mapping, Type, TypeVar, Union

from pydantic import BaseModel, ValidationError

from .errors import BlockDecodeError, DecodeIssue, json_kind
from .models import Block, BlockChildrenResponse

logger = logging.getLogger(__name__)

Payload = Union[Mapping[str, Any], str, bytes]
ModelT = TypeVar("ModelT", bound=BaseModel)


def _issues_from(error: ValidationError) -> List[DecodeIssue]:
    issues = []
    for detail in error.errors(include_url=False):
        path = ".".join(str(part) for part in detail["loc"])
        if detail["type"] == "json_invalid":
            actual = "invalid JSON"
        else:
            actual = json_kind(detail.get("input"))
        issues.append(DecodeIssue(path=path, expected=detail["msg"], actual=actual))
    return issues


def _decode(model: Type[ModelT], data: Payload) -> ModelT:
    try:
        if isinstance(data, (str, bytes, bytearray)):
            return model.model_validate_json(data)
        if isinstance(data, Mapping) and not isinstance(data, dict):
            data = dict(data)
        return model.model_validate(data)
    except ValidationError as e:
        issues = _issues_from(e)
        logger.debug("Failed to decode %s (%d issues)", model.__name__, len(issues))
        raise BlockDecodeError(model.__name__, issues) from e


def decode_block(data: Payload) -> Block:
    """Decode one block from a JSON object, JSON text or JSON bytes."""
    return _decode(Block, data)


def decode_block_children(data: Payload) -> BlockChildrenResponse:
    """Decode the envelope returned when listing a block's children."""
    return _decode(BlockChildrenResponse, data)


def encode_block(block: Block) -> Dict[str, Any]:
    """Encode a block as a JSON-compatible dict, always with ``"object": "block"``."""
    return block.model_dump(mode="json")


def encode_block_json(block: Block) -> str:
    return block.model_dump_json()


def encode_blocks(blocks: Iterable[Block]) -> List[Dict[str, Any]]:
    """Encode blocks in order, e.g. as the ``children`` of an append request."""
    return [encode_block(block) for block in blocks]


def encode_block_children(response: BlockChildrenResponse) -> Dict[str, Any]:
    return response.model_dump(mode="json")
