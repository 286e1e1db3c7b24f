"""
Conversion of the generic element model into lxml elements.

Receipt content arrives as ElementNode trees owned by the signal. The SMD
serializer works on lxml, so every tree is copied into new lxml elements.
The copy keeps namespace, prefix, attributes (in order, with their own
namespace), child elements and text. Nothing in the result refers back to
the source tree.

Two differences follow from lxml's tree model:

* Adjacent TextNodes end up in one text (or tail) string, so they read back
  as a single text node with the concatenated text.
* lxml cannot undeclare a default namespace (``xmlns=""``). An element in a
  default namespace that has unqualified descendants therefore gets a
  generated prefix (``ns0``, ``ns1``, ...) so the descendants stay outside
  any namespace when serialized.
"""

from typing import Iterator, Optional

from lxml import etree

from ..messages.models import ElementNode, TextNode


def qualified_name(local_name: str, namespace_uri: Optional[str]) -> str:
    """Clark notation name; unqualified when there is no namespace."""
    if not namespace_uri:
        return local_name
    return f"{{{namespace_uri}}}{local_name}"


class DocumentConverter:
    """Copies ElementNode trees into lxml elements."""

    def __init__(self, parser: Optional[etree.XMLParser] = None):
        self._parser = parser if parser is not None else etree.XMLParser()

    def convert(self, source: ElementNode) -> etree._Element:
        """
        Copy an ElementNode tree into a new lxml element.

        Args:
            source: Root of the tree to copy

        Returns:
            Independent lxml element holding the full subtree
        """
        nsmap = None
        if source.has_namespace:
            prefix = source.prefix or None
            if prefix is None and _has_unqualified_descendant(source):
                prefix = _free_prefix(source)
            nsmap = {prefix: source.namespace_uri}

        element = self._parser.makeelement(
            qualified_name(source.local_name, source.namespace_uri), nsmap=nsmap
        )

        for attr in source.attributes:
            element.set(qualified_name(attr.local_name, attr.namespace_uri), attr.value)

        for child in source.children:
            if isinstance(child, ElementNode):
                element.append(self.convert(child))
            elif isinstance(child, TextNode):
                _append_text(element, child.text)

        return element

    def convert_all(self, sources: list[ElementNode]) -> list[etree._Element]:
        """Copy a sequence of trees, keeping their order."""
        return [self.convert(source) for source in sources]


def _has_unqualified_descendant(node: ElementNode) -> bool:
    return any(
        not child.has_namespace or _has_unqualified_descendant(child)
        for child in node.child_elements()
    )


def _prefixes(node: ElementNode) -> Iterator[Optional[str]]:
    yield node.prefix
    for child in node.child_elements():
        yield from _prefixes(child)


def _free_prefix(node: ElementNode) -> str:
    used = set(_prefixes(node))
    seq = 0
    while f"ns{seq}" in used:
        seq += 1
    return f"ns{seq}"


def _append_text(element: etree._Element, text: str) -> None:
    # lxml keeps text after a child element in that child's tail
    if len(element):
        last = element[-1]
        last.tail = (last.tail or "") + text
    else:
        element.text = (element.text or "") + text
