"""Swagger to Code Generator

A Python package for generating model source code from Swagger 2.0
documents. Supports Rust (serde) and Python (dataclasses-json) output.
"""

__version__ = "0.1.0"

from .pipeline import (
    CodeGeneratorConfig,
    DocumentError,
    PipelineGenerator,
    SwaggerCodegenError,
    create_backend,
    generate,
)

__all__ = [
    "PipelineGenerator",
    "CodeGeneratorConfig",
    "DocumentError",
    "SwaggerCodegenError",
    "create_backend",
    "generate",
]
