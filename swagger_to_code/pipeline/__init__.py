"""
Pipeline - Swagger 2.0 document to model source code generator.

The document is processed in phases:

1. Parser: decode the document into the schema model
2. Prototyper: collect every schema that becomes a declaration
3. Type resolver: map schemas to language-independent types
4. Backend: render records, enums and aliases for the target language
"""

from __future__ import annotations

from .backends import BACKENDS, CodeBackend, PythonBackend, RustBackend, create_backend
from .config import CodeGeneratorConfig
from .errors import DocumentError, SwaggerCodegenError
from .generator import PipelineGenerator, generate, order_prototypes
from .registry import GeneratedNameRegistry

__all__ = [
    "BACKENDS",
    "CodeBackend",
    "CodeGeneratorConfig",
    "DocumentError",
    "GeneratedNameRegistry",
    "PipelineGenerator",
    "PythonBackend",
    "RustBackend",
    "SwaggerCodegenError",
    "create_backend",
    "generate",
    "order_prototypes",
]
