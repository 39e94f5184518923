"""
Configuration for the code generator pipeline.
"""

from __future__ import annotations

from dataclasses import dataclass, field

DEFAULT_RUST_DERIVES = ["Debug", "Clone", "PartialEq", "Serialize", "Deserialize"]


@dataclass
class CodeGeneratorConfig:
    """Configuration options for code generation."""

    # Formatted type names that should not be generated
    ignore_models: list[str] = field(default_factory=list)

    # Add generation comment at top of file
    add_generation_comment: bool = True

    # Emit the backend's helper block (imports, shared functions) before the models
    include_helpers: bool = True

    # Derive macros put on every Rust struct and enum
    rust_derives: list[str] = field(default_factory=lambda: list(DEFAULT_RUST_DERIVES))

    @staticmethod
    def from_dict(d: dict) -> CodeGeneratorConfig:
        """Create a config from a dictionary."""
        config = CodeGeneratorConfig()
        for k, v in d.items():
            if hasattr(config, k):
                setattr(config, k, v)
        return config

    def to_dict(self) -> dict:
        """Convert config to a dictionary."""
        return {
            "ignore_models": self.ignore_models,
            "add_generation_comment": self.add_generation_comment,
            "include_helpers": self.include_helpers,
            "rust_derives": self.rust_derives,
        }
