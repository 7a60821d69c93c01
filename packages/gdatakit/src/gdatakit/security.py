"""Pre-flight security checks for XML response buffers.

Rejects dangerous or oversized documents before lxml ever sees them:
size limit, entity declarations (billion laughs / XXE prevention) and
DOCTYPE internal subsets.  Nesting depth is measured on the parsed tree by
``measure_depth()``.
"""

from __future__ import annotations

import logging

from lxml import etree

from gdatakit.config import ParserConfig
from gdatakit.errors import ErrorCode, GDataError

logger = logging.getLogger("gdatakit")


class DocumentScanner:
    """Run pre-flight security checks on an XML buffer.

    Returns a list of errors.  Any entry means the buffer should not be
    parsed.
    """

    def __init__(self, config: ParserConfig) -> None:
        self.config = config

    def scan(self, data: bytes) -> list[GDataError]:
        """Run all byte-level checks.

        Returns:
            List of errors, empty when the buffer may be parsed.
        """
        errors: list[GDataError] = []

        # --- 1. Size limit ---
        max_bytes = self.config.max_document_size_mb * 1024 * 1024
        if len(data) > max_bytes:
            errors.append(
                GDataError(
                    code=ErrorCode.E_PARSING_STRING,
                    message=(
                        f"Error parsing XML: document size {len(data)} bytes exceeds "
                        f"limit of {max_bytes} bytes ({self.config.max_document_size_mb} MB)"
                    ),
                    stage="security",
                )
            )
            return errors

        if not self.config.reject_entity_declarations:
            return errors

        # --- 2. Entity declaration scan ---
        raw_upper = data.upper()
        if b"<!ENTITY" in raw_upper:
            errors.append(
                GDataError(
                    code=ErrorCode.E_PARSING_STRING,
                    message=(
                        "Error parsing XML: document contains <!ENTITY declaration "
                        "(potential billion laughs / XXE attack)"
                    ),
                    stage="security",
                )
            )
            return errors

        # --- 3. DOCTYPE internal subset ---
        if b"<!DOCTYPE" in raw_upper:
            doctype_pos = raw_upper.find(b"<!DOCTYPE")
            bracket_pos = data.find(b"[", doctype_pos)
            close_pos = data.find(b">", doctype_pos)
            if bracket_pos != -1 and (close_pos == -1 or bracket_pos < close_pos):
                errors.append(
                    GDataError(
                        code=ErrorCode.E_PARSING_STRING,
                        message=(
                            "Error parsing XML: document contains <!DOCTYPE with internal "
                            "subset (potential entity expansion attack)"
                        ),
                        stage="security",
                    )
                )
                return errors

        return errors

    def check_depth(self, root: etree._Element) -> GDataError | None:
        """Return an error when *root* nests deeper than ``max_depth``."""
        depth = measure_depth(root)
        if depth > self.config.max_depth:
            logger.warning(
                "gdatakit | code=%s | detail=depth %d exceeds %d",
                ErrorCode.E_PARSING_STRING.value,
                depth,
                self.config.max_depth,
            )
            return GDataError(
                code=ErrorCode.E_PARSING_STRING,
                message=(
                    f"Error parsing XML: nesting depth {depth} exceeds limit of "
                    f"{self.config.max_depth}"
                ),
                stage="security",
            )
        return None


def measure_depth(root: etree._Element) -> int:
    """Measure the maximum element nesting depth of a tree (root is 1)."""
    depth = 1
    stack = [(root, 1)]
    while stack:
        element, level = stack.pop()
        depth = max(depth, level)
        for child in element.iterchildren(tag=etree.Element):
            stack.append((child, level + 1))
    return depth
