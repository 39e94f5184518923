"""
Code generation backends.

Contains language-specific code generators.
"""

from __future__ import annotations

from ..config import CodeGeneratorConfig
from .base import CodeBackend
from .python_backend import PythonBackend
from .rust_backend import RustBackend

BACKENDS: dict[str, type[CodeBackend]] = {
    RustBackend.LANGUAGE: RustBackend,
    PythonBackend.LANGUAGE: PythonBackend,
}


def create_backend(language: str, config: CodeGeneratorConfig | None = None) -> CodeBackend:
    """
    Instantiate the backend registered for a language.

    Raises:
        ValueError: If no backend is registered for the language
    """
    backend_class = BACKENDS.get(language)
    if backend_class is None:
        raise ValueError(f"Unsupported language: {language} (expected one of: {', '.join(sorted(BACKENDS))})")
    return backend_class(config)


__all__ = [
    "BACKENDS",
    "CodeBackend",
    "PythonBackend",
    "RustBackend",
    "create_backend",
]
