"""Atom ``<entry>`` with the GData extensions common to every service."""

from __future__ import annotations

from lxml import etree
from pydantic import Field

from gdatakit.atom import Author, Category, Link
from gdatakit.extra import dump_children, scope_namespaces
from gdatakit.namespaces import ATOM_NS, GD_NS, collect_namespaces, merge_namespaces
from gdatakit.parsable import Parsable
from gdatakit.parser import get_node_content, get_property, is_element, set_singleton
from gdatakit.serializer import XMLBuilder
from gdatakit.timestamps import Timestamp, parse_timestamp

_TEXT_SINGLETONS = ("title", "summary", "id", "rights")
_TIMESTAMP_SINGLETONS = ("updated", "published")

ETAG_ATTRIBUTE = f"{{{GD_NS}}}etag"


class Entry(Parsable):
    """A single item of a feed.

    ``title``, ``summary``, ``id``, ``updated``, ``published``, ``content``
    and ``rights`` may each appear once; categories, links and authors
    accumulate in document order.  Markup inside ``<content>`` (such as
    ``type="xhtml"`` content) is kept verbatim in ``content_xml``, with the
    namespaces it relies on added to ``extra_namespaces``.
    """

    element_name = "entry"

    etag: str | None = None
    title: str | None = None
    summary: str | None = None
    id: str | None = None
    updated: Timestamp | None = None
    published: Timestamp | None = None
    content: str | None = None
    content_type: str | None = None
    content_uri: str | None = None
    content_xml: str | None = None
    rights: str | None = None
    categories: list[Category] = Field(default_factory=list)
    links: list[Link] = Field(default_factory=list)
    authors: list[Author] = Field(default_factory=list)

    def look_up_link(self, rel: str) -> Link | None:
        """Return the first link with relation type *rel*."""
        for link in self.links:
            if link.rel == rel:
                return link
        return None

    def pre_parse_xml(self, node: etree._Element) -> None:
        self.etag = node.get(ETAG_ATTRIBUTE)

    def parse_xml(self, node: etree._Element) -> bool:
        for field in _TEXT_SINGLETONS:
            if is_element(node, ATOM_NS, field):
                set_singleton(self, field, node, get_node_content(node) or "")
                return True
        for field in _TIMESTAMP_SINGLETONS:
            if is_element(node, ATOM_NS, field):
                set_singleton(self, field, node, parse_timestamp(node, get_node_content(node)))
                return True

        if is_element(node, ATOM_NS, "content"):
            set_singleton(self, "content", node, get_node_content(node) or "")
            self.content_type = get_property(node, "type")
            self.content_uri = get_property(node, "src")
            if len(node):
                self.content_xml = dump_children(node)
                for child in node.iterchildren(tag=etree.Element):
                    merge_namespaces(self.extra_namespaces, scope_namespaces(child))
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
        if self.id is not None:
            builder.add_element("id", self.id)
        if self.updated is not None:
            builder.add_element("updated", self.updated)
        if self.published is not None:
            builder.add_element("published", self.published)
        if self.summary is not None:
            builder.add_element("summary", self.summary)
        if self.rights is not None:
            builder.add_element("rights", self.rights)
        if self.content_xml is not None:
            builder.add_xml("<content")
            builder.add_attribute("type", self.content_type)
            builder.add_attribute("src", self.content_uri)
            builder.add_xml(f">{self.content_xml}</content>")
        elif self.content is not None:
            builder.add_element(
                "content",
                self.content,
                {"type": self.content_type, "src": self.content_uri},
            )
        for category in self.categories:
            builder.add_child(category)
        for link in self.links:
            builder.add_child(link)
        for author in self.authors:
            builder.add_child(author)

    def get_namespaces(self) -> dict[str, str]:
        namespaces: dict[str, str] = {}
        if self.etag is not None:
            namespaces["gd"] = GD_NS
        for child in [*self.categories, *self.links, *self.authors]:
            merge_namespaces(namespaces, collect_namespaces(child))
        return namespaces
