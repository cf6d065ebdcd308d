"""XML text -> ParsedTree.

The tree is built from plain ``dict`` / ``list`` / ``str`` nodes:

- an element with no attributes and no children becomes its stripped text;
- otherwise it becomes a dict where attributes sit under their own names,
  children are keyed by tag (repeated tags collect into a list) and any
  non-blank text goes under ``#text``.

A child element wins over an attribute of the same name. Values are never
coerced, so ``<jobdivaid>007</jobdivaid>`` stays ``"007"``. CDATA sections
arrive as plain text and are kept verbatim.
"""
from __future__ import annotations

from typing import Any, Union
from xml.etree import ElementTree as ET

from jobfeed.errors import MalformedDocument

TEXT_KEY = "#text"
DEFAULT_MAX_DEPTH = 64

Node = Union[str, list, dict]
ParsedTree = dict[str, Any]


def _node_for(elem: ET.Element) -> Node:
    text = (elem.text or "").strip()
    if len(elem) == 0 and not elem.attrib:
        return text
    child_tags = {child.tag for child in elem}
    node: dict[str, Any] = {k: v for k, v in elem.attrib.items() if k not in child_tags}
    if text:
        node[TEXT_KEY] = text
    return node


def _attach(parent: dict[str, Any], tag: str, value: Node) -> None:
    if tag not in parent:
        parent[tag] = value
    elif isinstance(parent[tag], list):
        parent[tag].append(value)
    else:
        parent[tag] = [parent[tag], value]


def _convert(root: ET.Element, max_depth: int) -> Node:
    holder: dict[str, Any] = {}
    stack: list[tuple[ET.Element, dict[str, Any], int]] = [(root, holder, 0)]
    while stack:
        elem, parent, depth = stack.pop()
        if depth > max_depth:
            raise MalformedDocument(f"Feed document nests deeper than {max_depth} levels")
        node = _node_for(elem)
        _attach(parent, elem.tag, node)
        if isinstance(node, dict):
            for child in reversed(list(elem)):
                stack.append((child, node, depth + 1))
    return holder[root.tag]


def parse_document(text: str, max_depth: int = DEFAULT_MAX_DEPTH) -> ParsedTree:
    """Parse feed XML into a ParsedTree rooted at ``{root_tag: value}``."""
    if not text or not text.strip():
        raise MalformedDocument("Feed document is empty")
    try:
        root = ET.fromstring(text)
    except (ET.ParseError, ValueError, RecursionError) as exc:
        raise MalformedDocument(f"Feed document is not well-formed XML: {exc}") from exc
    return {root.tag: _convert(root, max_depth)}
