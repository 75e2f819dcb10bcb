"""
Convert efetch XML into a nested dict tree.

Shape rules:
  - a leaf element without attributes is its stripped text
  - attributes are stored under ATTR_KEY, text under TEXT_KEY
  - a child tag seen once maps to a single value; seen more than once,
    to a list in document order
  - an element with inline markup (<i>, <sup>, ...) keeps its full inner
    text under TEXT_KEY alongside the child entries
"""

import xml.etree.ElementTree as ET
from typing import Any

from pubmed_proxy.constants import ATTR_KEY, TEXT_KEY
from pubmed_proxy.data_sources.base_client import DataSourceError

# Formatting markup PubMed allows inside titles and abstracts
INLINE_TAGS = frozenset({"b", "i", "u", "sup", "sub"})
MATHML_NS = "{http://www.w3.org/1998/Math/MathML}"


def parse_xml(xml_text: str, source: str = "pubmed") -> dict[str, Any]:
    """Parse an XML document into {root_tag: tree}."""
    try:
        root = ET.fromstring(xml_text)
    except ET.ParseError as e:
        raise DataSourceError(source, f"Failed to parse XML: {e}")

    return {root.tag: element_to_node(root)}


def element_to_node(elem: ET.Element) -> Any:
    """Convert one element (and its subtree) into a tree node."""
    text = "".join(elem.itertext()).strip()
    children = list(elem)

    if not children and not elem.attrib:
        return text

    node: dict[str, Any] = {}
    if elem.attrib:
        node[ATTR_KEY] = dict(elem.attrib)
    if text and (not children or _is_mixed_content(elem)):
        node[TEXT_KEY] = text

    for child in children:
        value = element_to_node(child)
        if child.tag not in node:
            node[child.tag] = value
        elif isinstance(node[child.tag], list):
            node[child.tag].append(value)
        else:
            node[child.tag] = [node[child.tag], value]

    return node


def _is_inline(child: ET.Element) -> bool:
    return child.tag in INLINE_TAGS or child.tag.startswith(MATHML_NS)


def _is_mixed_content(elem: ET.Element) -> bool:
    if elem.text and elem.text.strip():
        return True
    if any(child.tail and child.tail.strip() for child in elem):
        return True
    # <ArticleTitle><i>...</i></ArticleTitle> has no text of its own
    return any(_is_inline(child) for child in elem)
