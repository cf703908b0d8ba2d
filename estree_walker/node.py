"""ESTree node model — read-only attribute-access view over parsed JSON."""

from __future__ import annotations

import json
import logging
from typing import Any

from pydantic import BaseModel, ConfigDict

logger = logging.getLogger(__name__)


class Fields(BaseModel):
    """An untyped record inside a tree (e.g. an old-style object property).

    Every key of the source mapping is readable as an attribute.
    """

    model_config = ConfigDict(extra="allow", frozen=True)


class Node(Fields):
    """A syntax tree node tagged with its ``type``.

    Type-specific children are extra fields, so ``node.body`` or
    ``node.test`` read straight from the source JSON. Reading a field the
    node does not carry raises ``AttributeError``.
    """

    type: str


def from_estree(data: Any) -> Any:
    """Convert decoded ESTree JSON into ``Node`` / ``Fields`` records.

    Mappings with a ``type`` key become ``Node``; other mappings become
    ``Fields``; lists are converted element-wise; scalars pass through.
    """
    if isinstance(data, dict):
        converted = {key: from_estree(value) for key, value in data.items()}
        if "type" in converted:
            return Node(**converted)
        return Fields(**converted)
    if isinstance(data, list):
        return [from_estree(item) for item in data]
    return data


def load_tree(text: str) -> Node:
    """Parse ESTree JSON text into a root ``Node``.

    Raises ``ValueError`` if the top-level value is not a typed node.
    """
    root = from_estree(json.loads(text))
    if not isinstance(root, Node):
        raise ValueError(
            f"Expected an ESTree node at the top level, got {type(root).__name__}"
        )
    logger.debug("Loaded %s tree", root.type)
    return root
