"""Atom ``<feed>`` with GData and OpenSearch extensions."""

from __future__ import annotations

from typing import ClassVar

from lxml import etree
from pydantic import Field

from gdatakit.atom import Author, Category, Generator, Link
from gdatakit.entry import ETAG_ATTRIBUTE, Entry
from gdatakit.errors import unknown_content
from gdatakit.namespaces import ATOM_NS, GD_NS, OPENSEARCH_NS, collect_namespaces, merge_namespaces
from gdatakit.parsable import Parsable
from gdatakit.parser import get_node_content, is_element, set_singleton
from gdatakit.serializer import XMLBuilder
from gdatakit.timestamps import Timestamp, parse_timestamp

_TEXT_SINGLETONS = ("title", "subtitle", "id", "logo")
_OPENSEARCH_FIELDS = {
    "totalResults": "total_results",
    "startIndex": "start_index",
    "itemsPerPage": "items_per_page",
}


class Feed(Parsable):
    """A list of entries plus metadata about the list.

    Entries are parsed as ``entry_type``; services subclass ``Feed`` and
    point ``entry_type`` at their own ``Entry`` subclass.  The OpenSearch
    paging values are None when absent.
    """

    element_name = "feed"
    entry_type: ClassVar[type[Entry]] = Entry

    etag: str | None = None
    title: str | None = None
    subtitle: str | None = None
    id: str | None = None
    updated: Timestamp | None = None
    logo: str | None = None
    generator: Generator | None = None
    total_results: int | None = None
    start_index: int | None = None
    items_per_page: int | None = None
    categories: list[Category] = Field(default_factory=list)
    links: list[Link] = Field(default_factory=list)
    authors: list[Author] = Field(default_factory=list)
    entries: list[Entry] = Field(default_factory=list)

    def look_up_link(self, rel: str) -> Link | None:
        """Return the first link with relation type *rel*."""
        for link in self.links:
            if link.rel == rel:
                return link
        return None

    def pre_parse_xml(self, node: etree._Element) -> None:
        self.etag = node.get(ETAG_ATTRIBUTE)

    def parse_xml(self, node: etree._Element) -> bool:
        if is_element(node, ATOM_NS, "entry"):
            self.entries.append(self.entry_type.from_xml_node(node))
            return True
        for field in _TEXT_SINGLETONS:
            if is_element(node, ATOM_NS, field):
                set_singleton(self, field, node, get_node_content(node) or "")
                return True
        for name, field in _OPENSEARCH_FIELDS.items():
            if is_element(node, OPENSEARCH_NS, name):
                set_singleton(self, field, node, _parse_count(node))
                return True

        if is_element(node, ATOM_NS, "updated"):
            set_singleton(self, "updated", node, parse_timestamp(node, get_node_content(node)))
        elif is_element(node, ATOM_NS, "generator"):
            set_singleton(self, "generator", node, Generator.from_xml_node(node))
        elif is_element(node, ATOM_NS, "category"):
            self.categories.append(Category.from_xml_node(node))
        elif is_element(node, ATOM_NS, "link"):
            self.links.append(Link.from_xml_node(node))
        elif is_element(node, ATOM_NS, "author"):
            self.authors.append(Author.from_xml_node(node))
        else:
            return False
        return True

    def pre_get_xml(self, builder: XMLBuilder) -> None:
        builder.add_attribute("gd:etag", self.etag)

    def get_xml(self, builder: XMLBuilder) -> None:
        if self.title is not None:
            builder.add_element("title", self.title)
        if self.subtitle is not None:
            builder.add_element("subtitle", self.subtitle)
        if self.id is not None:
            builder.add_element("id", self.id)
        if self.updated is not None:
            builder.add_element("updated", self.updated)
        if self.logo is not None:
            builder.add_element("logo", self.logo)
        builder.add_child(self.generator)
        for name, field in _OPENSEARCH_FIELDS.items():
            value = getattr(self, field)
            if value is not None:
                builder.add_element(f"openSearch:{name}", value)
        for category in self.categories:
            builder.add_child(category)
        for link in self.links:
            builder.add_child(link)
        for author in self.authors:
            builder.add_child(author)
        for entry in self.entries:
            builder.add_child(entry)

    def get_namespaces(self) -> dict[str, str]:
        namespaces: dict[str, str] = {}
        if self.etag is not None:
            namespaces["gd"] = GD_NS
        if any(getattr(self, field) is not None for field in _OPENSEARCH_FIELDS.values()):
            namespaces["openSearch"] = OPENSEARCH_NS
        children = [self.generator, *self.categories, *self.links, *self.authors, *self.entries]
        for child in children:
            if child is not None:
                merge_namespaces(namespaces, collect_namespaces(child))
        return namespaces


def _parse_count(node: etree._Element) -> int:
    content = get_node_content(node) or ""
    try:
        return int(content.strip())
    except ValueError:
        raise unknown_content(node, content) from None
