"""Error codes and structured error model for the gdatakit parser.

``ErrorCode`` is the closed taxonomy of parse/serialize failures.
``GDataError`` is the Pydantic data model describing one failure, and
``ParserError`` is the raisable exception wrapping it.  The factory
functions at the bottom render the stable, element-locating messages; each
takes either a tree node or an already-rendered element path.
"""

from __future__ import annotations

from enum import Enum

from lxml import etree
from pydantic import BaseModel

from gdatakit.paths import print_element


class ErrorCode(str, Enum):
    """Error codes for XML parsing and serialization.

    Values equal their names so they are stable strings suitable for
    metrics and alerting.
    """

    # Document
    E_PARSING_STRING = "E_PARSING_STRING"
    E_EMPTY_DOCUMENT = "E_EMPTY_DOCUMENT"

    # Structure
    E_REQUIRED_ELEMENT_MISSING = "E_REQUIRED_ELEMENT_MISSING"
    E_REQUIRED_CONTENT_MISSING = "E_REQUIRED_CONTENT_MISSING"
    E_REQUIRED_PROPERTY_MISSING = "E_REQUIRED_PROPERTY_MISSING"
    E_DUPLICATE_ELEMENT = "E_DUPLICATE_ELEMENT"

    # Values
    E_UNKNOWN_PROPERTY_VALUE = "E_UNKNOWN_PROPERTY_VALUE"
    E_UNKNOWN_CONTENT = "E_UNKNOWN_CONTENT"
    E_NOT_ISO8601_FORMAT = "E_NOT_ISO8601_FORMAT"


class GDataError(BaseModel):
    """Structured error with code, message, and element location.

    Carries only rendered strings, never a tree node, so it stays valid
    after the document it describes has been discarded.
    """

    code: ErrorCode
    message: str
    stage: str | None = None
    element_path: str | None = None
    property_name: str | None = None
    actual_value: str | None = None
    recoverable: bool = False


class ParserError(Exception):
    """Raisable exception wrapping a ``GDataError`` data model.

    The structured error is available as ``.error``; the common fields are
    exposed as delegating properties.
    """

    def __init__(self, **kwargs: object) -> None:
        self.error = GDataError(**kwargs)  # type: ignore[arg-type]
        super().__init__(self.error.message)

    @property
    def code(self) -> ErrorCode:
        return self.error.code

    @property
    def message(self) -> str:
        return self.error.message

    @property
    def stage(self) -> str | None:
        return self.error.stage

    @property
    def element_path(self) -> str | None:
        return self.error.element_path

    @property
    def property_name(self) -> str | None:
        return self.error.property_name

    @property
    def actual_value(self) -> str | None:
        return self.error.actual_value


def _path(element: etree._Element | str) -> str:
    if isinstance(element, str):
        return element
    return print_element(element)


def parsing_string(detail: str, stage: str = "parse") -> ParserError:
    return ParserError(
        code=ErrorCode.E_PARSING_STRING,
        message=f"Error parsing XML: {detail}",
        stage=stage,
    )


def empty_document() -> ParserError:
    return ParserError(
        code=ErrorCode.E_EMPTY_DOCUMENT,
        message="Error parsing XML: Empty document.",
        stage="parse",
    )


def required_element_missing(
    element: etree._Element | str, stage: str = "parse"
) -> ParserError:
    """A mandatory root or child element never appeared.

    *element* is normally a path rendered with ``print_expected()``, since
    the missing element has no node of its own.
    """
    path = _path(element)
    return ParserError(
        code=ErrorCode.E_REQUIRED_ELEMENT_MISSING,
        message=f"A required element ({path}) was not present.",
        stage=stage,
        element_path=path,
    )


def required_content_missing(
    element: etree._Element | str, stage: str = "parse"
) -> ParserError:
    path = _path(element)
    return ParserError(
        code=ErrorCode.E_REQUIRED_CONTENT_MISSING,
        message=f"A {path} element was missing required content.",
        stage=stage,
        element_path=path,
    )


def required_property_missing(
    element: etree._Element | str, property_name: str, stage: str = "parse"
) -> ParserError:
    path = _path(element)
    return ParserError(
        code=ErrorCode.E_REQUIRED_PROPERTY_MISSING,
        message=f"A required property of a {path} element ({property_name}) was not present.",
        stage=stage,
        element_path=path,
        property_name=property_name,
    )


def duplicate_element(element: etree._Element | str) -> ParserError:
    path = _path(element)
    return ParserError(
        code=ErrorCode.E_DUPLICATE_ELEMENT,
        message=f"A singleton element ({path}) was duplicated.",
        stage="parse",
        element_path=path,
    )


def unknown_property_value(
    element: etree._Element | str, property_name: str, actual_value: str
) -> ParserError:
    path = _path(element)
    return ParserError(
        code=ErrorCode.E_UNKNOWN_PROPERTY_VALUE,
        message=(
            f"The value of the {property_name} property of a {path} element "
            f'("{actual_value}") was unknown.'
        ),
        stage="parse",
        element_path=path,
        property_name=property_name,
        actual_value=actual_value,
    )


def unknown_content(element: etree._Element | str, actual_content: str) -> ParserError:
    path = _path(element)
    return ParserError(
        code=ErrorCode.E_UNKNOWN_CONTENT,
        message=f'The content of a {path} element ("{actual_content}") was unknown.',
        stage="parse",
        element_path=path,
        actual_value=actual_content,
    )


def not_iso8601_format(
    element: etree._Element | str,
    actual_value: str,
    property_name: str | None = None,
) -> ParserError:
    path = _path(element)
    if property_name is None:
        message = f'The content of a {path} element ("{actual_value}") was not in ISO 8601 format.'
    else:
        message = (
            f"The value of the {property_name} property of a {path} element "
            f'("{actual_value}") was not in ISO 8601 format.'
        )
    return ParserError(
        code=ErrorCode.E_NOT_ISO8601_FORMAT,
        message=message,
        stage="parse",
        element_path=path,
        property_name=property_name,
        actual_value=actual_value,
    )
