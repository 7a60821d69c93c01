"""Parse dispatch engine and the helpers hooks use to read tree nodes.

Two entry points share one implementation:

1. ``parse_document()`` takes a raw buffer, runs the pre-flight
   :class:`DocumentScanner`, parses it with lxml, checks the root element
   name and delegates to ``parse_node()``.
2. ``parse_node()`` takes an already-located element.  Hooks call it (via
   ``Parsable.from_xml_node``) to parse nested elements.

``parse_node()`` runs, short-circuiting on the first ``ParserError``:

1. Instantiate an empty object with ``model_construct()``.
2. ``pre_parse_xml`` hooks on the root node, base class first.
3. For each element child in document order, ``parse_xml`` hooks from the
   most-derived class up; the first hook returning ``True`` consumes the
   child.  Children nobody accepts are preserved as extra content.
4. ``post_parse_xml`` hooks, base class first.
"""

from __future__ import annotations

import logging
from contextvars import ContextVar
from typing import TYPE_CHECKING, TypeVar

from lxml import etree

from gdatakit.config import ParserConfig
from gdatakit.errors import (
    ParserError,
    duplicate_element,
    empty_document,
    parsing_string,
    required_element_missing,
    required_property_missing,
    unknown_property_value,
)
from gdatakit.extra import capture
from gdatakit.namespaces import (
    ATOM_NS,
    collect_namespaces,
    merge_namespaces,
    namespace_for_prefix,
)
from gdatakit.paths import print_element, print_expected
from gdatakit.security import DocumentScanner

if TYPE_CHECKING:
    from gdatakit.parsable import Parsable

logger = logging.getLogger("gdatakit")

P = TypeVar("P", bound="Parsable")
T = TypeVar("T")

_active_config: ContextVar[ParserConfig | None] = ContextVar("gdatakit_config", default=None)


# ----------------------------------------------------------------------
# Entry points
# ----------------------------------------------------------------------


def parse_document(cls: type[P], data: bytes | str, config: ParserConfig | None = None) -> P:
    """Parse a complete XML document into an instance of *cls*.

    Raises:
        ParserError: ``E_PARSING_STRING`` for malformed or rejected input,
            ``E_EMPTY_DOCUMENT`` when there is no root element,
            ``E_REQUIRED_ELEMENT_MISSING`` when the root element is not the
            one *cls* describes, or any error raised by a hook.
    """
    config = config or ParserConfig()
    if isinstance(data, str):
        data = data.encode("utf-8")

    scanner = DocumentScanner(config)
    security_errors = scanner.scan(data)
    if security_errors:
        first = security_errors[0]
        logger.error(
            "gdatakit | type=%s | code=%s | detail=%s",
            cls.__name__,
            first.code.value,
            first.message,
        )
        raise ParserError(**first.model_dump())

    if not data.strip():
        raise empty_document()

    xml_parser = etree.XMLParser(
        resolve_entities=False,
        no_network=True,
        huge_tree=config.huge_tree,
    )
    try:
        root = etree.fromstring(data, parser=xml_parser)
    except etree.XMLSyntaxError as exc:
        if exc.code == etree.ErrorTypes.ERR_DOCUMENT_EMPTY:
            raise empty_document() from exc
        raise parsing_string(str(exc)) from exc

    if root is None:
        raise empty_document()

    depth_error = scanner.check_depth(root)
    if depth_error is not None:
        raise ParserError(**depth_error.model_dump())

    if cls.element_name is not None:
        namespace = namespace_for_prefix(
            cls.element_namespace, collect_namespaces(cls.model_construct())
        )
        if namespace is None or not is_element(root, namespace, cls.element_name):
            raise required_element_missing(
                print_expected(cls.element_name, cls.element_namespace)
            )

    token = _active_config.set(config)
    try:
        return parse_node(cls, root)
    except ParserError as exc:
        logger.warning(
            "gdatakit | type=%s | code=%s | detail=%s",
            cls.__name__,
            exc.code.value,
            exc.message,
        )
        raise
    finally:
        _active_config.reset(token)


def parse_node(cls: type[P], node: etree._Element) -> P:
    """Parse an already-located element into an instance of *cls*."""
    parsable = cls.model_construct()

    for hook in reversed(cls.hook_chain("pre_parse_xml")):
        hook(parsable, node)

    child_hooks = cls.hook_chain("parse_xml")
    for child in node.iterchildren(tag=etree.Element):
        if not any(hook(parsable, child) for hook in child_hooks):
            _preserve(parsable, child)

    for hook in reversed(cls.hook_chain("post_parse_xml")):
        hook(parsable)

    return parsable


def _preserve(parsable: Parsable, node: etree._Element) -> None:
    fragment, namespaces = capture(node)
    parsable.extra_xml.append(fragment)
    merge_namespaces(parsable.extra_namespaces, namespaces)

    config = _active_config.get() or ParserConfig()
    if not config.log_unhandled_xml:
        return
    if config.log_sample_data:
        logger.debug(
            "gdatakit | type=%s | unhandled=%s | xml=%s",
            type(parsable).__name__,
            print_element(node),
            fragment,
        )
    else:
        logger.debug(
            "gdatakit | type=%s | unhandled=%s",
            type(parsable).__name__,
            print_element(node),
        )


# ----------------------------------------------------------------------
# Node helpers for hooks
# ----------------------------------------------------------------------


def is_element(node: etree._Element, namespace: str, name: str) -> bool:
    """Return True if *node* is ``{namespace}name``.

    Atom elements are also matched when they carry no namespace at all.
    """
    qname = etree.QName(node)
    if qname.localname != name:
        return False
    if qname.namespace == namespace:
        return True
    return namespace == ATOM_NS and qname.namespace is None


def get_node_content(node: etree._Element) -> str | None:
    """Return the concatenated direct text content of *node*, or None."""
    parts = [node.text or ""]
    parts.extend(child.tail or "" for child in node)
    content = "".join(parts)
    return content or None


def set_singleton(parsable: Parsable, field: str, node: etree._Element, value: object) -> None:
    """Assign *value* to a field backed by a child element that may occur once."""
    if getattr(parsable, field) is not None:
        raise duplicate_element(node)
    setattr(parsable, field, value)


def get_property(
    node: etree._Element,
    name: str,
    required: bool = False,
    non_empty: bool = False,
) -> str | None:
    """Read attribute *name* of *node*.

    *required* rejects an absent or empty attribute; *non_empty* only
    rejects an attribute that is present but empty.
    """
    value = node.get(name)
    if required and not value:
        raise required_property_missing(node, name)
    if non_empty and value == "":
        raise required_property_missing(node, name)
    return value


def get_boolean_property(node: etree._Element, name: str, default: bool = False) -> bool:
    """Read a ``true``/``false`` attribute; any other literal is an error."""
    value = node.get(name)
    if value is None:
        return default
    if value == "true":
        return True
    if value == "false":
        return False
    raise unknown_property_value(node, name, value)


def get_enum_property(
    node: etree._Element,
    name: str,
    choices: dict[str, T],
    default: T,
) -> T:
    """Map attribute *name* through *choices*; unknown literals are errors."""
    value = node.get(name)
    if value is None:
        return default
    try:
        return choices[value]
    except KeyError:
        raise unknown_property_value(node, name, value) from None


def get_integer_property(
    node: etree._Element,
    name: str,
    default: int | None = None,
) -> int | None:
    """Read a decimal integer attribute; non-numeric literals are errors."""
    value = node.get(name)
    if value is None:
        return default
    try:
        return int(value.strip())
    except ValueError:
        raise unknown_property_value(node, name, value) from None
