from __future__ import annotations

from typing import Callable, List

from bs4.element import NavigableString, PageElement, PreformattedString, Tag

Predicate = Callable[[PageElement], bool]


def is_element(node: PageElement) -> bool:
    return isinstance(node, Tag)


def has_class(node: PageElement, class_name: str) -> bool:
    """
    True iff the node's `class` attribute contains `class_name` as a whole
    whitespace-separated token.
    """
    if not isinstance(node, Tag):
        return False
    value = node.get("class")
    if value is None:
        return False
    # bs4 splits multi-valued attributes into lists; plain strings appear when that is disabled
    tokens = value if isinstance(value, list) else str(value).split()
    return class_name in tokens


def get_attribute(node: PageElement, key: str) -> str:
    if not isinstance(node, Tag):
        return ""
    value = node.get(key)
    if value is None:
        return ""
    if isinstance(value, list):
        return " ".join(value)
    return str(value)


def _is_text(node: PageElement) -> bool:
    # Comments, doctypes, CDATA and processing instructions are PreformattedString
    return isinstance(node, NavigableString) and not isinstance(node, PreformattedString)


def text_content(node: PageElement) -> str:
    """
    Concatenate every text node under `node` in document order and trim the result.
    """
    if _is_text(node):
        return str(node).strip()
    if not isinstance(node, Tag):
        return ""
    return "".join(str(d) for d in node.descendants if _is_text(d)).strip()


def find_descendants(node: PageElement, predicate: Predicate) -> List[PageElement]:
    """
    Depth-first pre-order walk over all descendants of `node`, returning those
    that satisfy `predicate`.

    The walk continues into the subtree of a match, so nested matches are all
    returned and nothing is de-duplicated.
    """
    if not isinstance(node, Tag):
        return []
    return [d for d in node.descendants if predicate(d)]


def find_children(node: PageElement, predicate: Predicate) -> List[PageElement]:
    if not isinstance(node, Tag):
        return []
    return [c for c in node.children if predicate(c)]


def element_matcher(tag_name: str, class_name: str) -> Predicate:
    """Build a predicate matching `<tag_name class="... class_name ...">`."""

    def _match(node: PageElement) -> bool:
        return isinstance(node, Tag) and node.name == tag_name and has_class(node, class_name)

    return _match
