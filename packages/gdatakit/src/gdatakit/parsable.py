"""Base class for every element type gdatakit can parse and serialize.

A concrete element type subclasses ``Parsable``, declares its fields as a
Pydantic model, names its element with the ``element_name`` /
``element_namespace`` class variables, and plugs into the engine by
defining any of these hooks:

``pre_parse_xml(self, node)``
    Read attributes (and direct text) of the element itself.
``parse_xml(self, node) -> bool``
    Offered each element child; return True if it was consumed.
``post_parse_xml(self)``
    Cross-field validation once every child has been seen.
``pre_get_xml(self, builder)``
    Add attributes to the opening tag.
``get_xml(self, builder)``
    Add element content.
``get_namespaces(self) -> dict[str, str]``
    Prefix→URI bindings this type's vocabulary introduces.

A hook only handles its own class's concerns and never delegates to its
parent class: the engine walks the class chain itself, so a base class's
hooks always run.
"""

from __future__ import annotations

import functools
from typing import Any, Callable, ClassVar, TypeVar

from lxml import etree
from pydantic import BaseModel, Field

from gdatakit.config import ParserConfig
from gdatakit.namespaces import collect_namespaces
from gdatakit.parser import parse_document, parse_node
from gdatakit.serializer import serialize

P = TypeVar("P", bound="Parsable")

HOOK_NAMES = (
    "pre_parse_xml",
    "parse_xml",
    "post_parse_xml",
    "pre_get_xml",
    "get_xml",
    "get_namespaces",
)


@functools.lru_cache(maxsize=None)
def _hook_chain(cls: type, name: str) -> tuple[Callable[..., Any], ...]:
    return tuple(
        klass.__dict__[name]
        for klass in cls.__mro__
        if isinstance(klass, type) and issubclass(klass, Parsable) and name in klass.__dict__
    )


class Parsable(BaseModel):
    """An element type mapped to and from XML by hooks.

    ``extra_xml`` and ``extra_namespaces`` are owned by the engine: they
    hold child elements no hook recognized, preserved so that serializing
    the object again does not drop them.
    """

    element_name: ClassVar[str | None] = None
    element_namespace: ClassVar[str | None] = None

    extra_xml: list[str] = Field(default_factory=list, exclude=True, repr=False)
    extra_namespaces: dict[str, str] = Field(default_factory=dict, exclude=True, repr=False)

    @classmethod
    def hook_chain(cls, name: str) -> tuple[Callable[..., Any], ...]:
        """Hooks called *name* defined along the class chain, most-derived first."""
        if name not in HOOK_NAMES:
            raise ValueError(f"Unknown hook: {name}")
        return _hook_chain(cls, name)

    @classmethod
    def from_xml(cls: type[P], data: bytes | str, config: ParserConfig | None = None) -> P:
        """Parse a standalone XML document whose root is this element."""
        return parse_document(cls, data, config)

    @classmethod
    def from_xml_node(cls: type[P], node: etree._Element) -> P:
        """Parse an element already located in a tree."""
        return parse_node(cls, node)

    def to_xml(self, declare_namespaces: bool = True) -> str:
        """Serialize to XML; see :func:`gdatakit.serializer.serialize`."""
        return serialize(self, declare_namespaces)

    def get_all_namespaces(self) -> dict[str, str]:
        """Every namespace binding this object's XML relies on."""
        return collect_namespaces(self)
