"""Lenient XML parsing for inbound CC5 requests.

The parsed tree keeps attributes apart from child elements, trims text and
answers lookups for missing paths with ``None`` instead of raising.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from lxml import etree


class MalformedXmlError(ValueError):
    pass


@dataclass
class XmlNode:
    tag: str
    text: str = ""
    attributes: dict[str, str] = field(default_factory=dict)
    children: list[XmlNode] = field(default_factory=list)

    def child(self, tag: str) -> XmlNode | None:
        for node in self.children:
            if node.tag == tag:
                return node
        return None

    def find(self, *path: str) -> XmlNode | None:
        node: XmlNode | None = self
        for tag in path:
            if node is None:
                return None
            node = node.child(tag)
        return node

    def text_at(self, *path: str) -> str | None:
        """Text of the leaf at ``path``; ``None`` when missing or not a leaf."""
        node = self.find(*path)
        if node is None:
            return None
        if node.children and not node.text:
            return None
        return node.text

    def to_dict(self) -> Any:
        if not self.children and not self.attributes:
            return self.text

        data: dict[str, Any] = {f"@_{name}": value for name, value in self.attributes.items()}
        if self.text:
            data["#text"] = self.text
        for node in self.children:
            value = node.to_dict()
            if node.tag not in data:
                data[node.tag] = value
            elif isinstance(data[node.tag], list):
                data[node.tag].append(value)
            else:
                data[node.tag] = [data[node.tag], value]
        return data


@dataclass
class XmlDocument:
    root: XmlNode | None = None

    def find(self, *path: str) -> XmlNode | None:
        if self.root is None or not path or self.root.tag != path[0]:
            return None
        return self.root.find(*path[1:])

    def text_at(self, *path: str) -> str | None:
        if self.root is None or not path or self.root.tag != path[0]:
            return None
        return self.root.text_at(*path[1:])

    def to_dict(self) -> dict[str, Any]:
        if self.root is None:
            return {}
        return {self.root.tag: self.root.to_dict()}


def _build_parser() -> etree.XMLParser:
    return etree.XMLParser(
        encoding="utf-8",
        resolve_entities="internal",
        no_network=True,
        remove_comments=True,
        remove_pis=True,
        recover=False,
    )


def _local_name(element: etree._Element) -> str:
    return etree.QName(element).localname


def _to_node(element: etree._Element) -> XmlNode:
    text_parts = [element.text or ""]
    children: list[XmlNode] = []
    for child in element:
        if isinstance(child.tag, str):
            children.append(_to_node(child))
        text_parts.append(child.tail or "")

    attributes = {
        etree.QName(name).localname: value for name, value in element.attrib.items()
    }
    return XmlNode(
        tag=_local_name(element),
        text="".join(text_parts).strip(),
        attributes=attributes,
        children=children,
    )


def parse_xml(text: str | None) -> XmlDocument:
    if text is None or not text.strip():
        return XmlDocument()
    try:
        root = etree.fromstring(text.encode("utf-8"), parser=_build_parser())
    except etree.XMLSyntaxError as exc:
        raise MalformedXmlError(f"invalid XML: {exc}") from exc
    return XmlDocument(root=_to_node(root))
