"""
Exceptions raised by the generator pipeline.

Only the parse boundary raises: once a document has been parsed, lookup,
type-mapping and naming failures degrade locally and are logged instead.
"""

from __future__ import annotations


class SwaggerCodegenError(Exception):
    """Base class for all errors raised by swagger_to_code."""

    pass


class DocumentError(SwaggerCodegenError):
    """Raised when the input document does not have the expected structure.

    Attributes:
        path: Location of the offending value in the document (e.g. "#/definitions/Pet")
    """

    def __init__(self, message: str, path: str = "#"):
        super().__init__(f"{path}: {message}")
        self.path = path
