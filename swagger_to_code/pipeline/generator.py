"""
Pipeline generator - orchestrates the generation phases.

1. Parse the document into the schema model
2. Collect model prototypes
3. Order them, objects first
4. Render each prototype through the backend
"""

from __future__ import annotations

import logging
from typing import Any

from .. import __version__
from .analyzer.prototyper import ModelPrototype, generate_prototypes
from .backends import CodeBackend, create_backend
from .config import CodeGeneratorConfig
from .registry import GeneratedNameRegistry
from .schema_model import Document, parse_document

logger = logging.getLogger(__name__)


def order_prototypes(prototypes: list[ModelPrototype]) -> list[ModelPrototype]:
    """
    Order prototypes for emission.

    Object prototypes come before reference prototypes so a concrete
    declaration always wins the name over an alias. Ties are broken by name.
    """
    return sorted(prototypes, key=lambda p: (p.is_reference, p.name))


def generate(document: Document, backend: CodeBackend, config: CodeGeneratorConfig | None = None) -> str:
    """
    Generate the source text for a whole document.

    Args:
        document: The parsed document
        backend: Backend rendering the declarations
        config: Generation options, defaults to the backend's configuration

    Returns:
        The generated source code
    """
    config = config or backend.config
    prototypes = order_prototypes(generate_prototypes(document))
    logger.info("generating %d model prototypes with the %s backend", len(prototypes), backend.LANGUAGE)

    parts = []
    if config.add_generation_comment:
        parts.append(backend.generation_comment(f"Generated by swagger_to_code {__version__}. Do not edit."))
    if config.include_helpers:
        parts.append(backend.generate_helpers(document))

    registry = GeneratedNameRegistry()
    for prototype in prototypes:
        parts.append(backend.generate_model(prototype, document, registry))
    logger.info("generated %d declarations", len(registry))

    return "".join(parts).rstrip("\n") + "\n"


class PipelineGenerator:
    """Swagger document to source code generator."""

    def __init__(
        self,
        document: Document | dict[str, Any],
        config: CodeGeneratorConfig | None = None,
        language: str = "rust",
    ):
        """
        Initialize the pipeline generator.

        Args:
            document: Parsed document, or the raw decoded JSON/YAML mapping
            config: Code generator configuration
            language: Target language ("rust" or "python")

        Raises:
            DocumentError: If a raw document is malformed
            ValueError: If the language has no backend
        """
        self.config = config or CodeGeneratorConfig()
        self.language = language
        self.document = document if isinstance(document, Document) else parse_document(document)
        self.backend = create_backend(language, self.config)

    def generate(self) -> str:
        """
        Generate code for the document.

        Returns:
            Generated code as a string
        """
        return generate(self.document, self.backend, self.config)
