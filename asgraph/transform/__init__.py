"""
asgraph Transform Layer.

Turns JSON values into typed vocabulary instances.

Core Components:
- TypeRegistry: tag -> blueprint bindings
- CompositeBlueprintSynthesizer: merged blueprints for multi-tag documents
- Transformer: entry point combining both

Usage:
    from asgraph.transform import Transformer, transform

    note = transform({"type": "Note", "content": "Fish swim."})

    # Isolated registry and options
    transformer = Transformer(TypeRegistry(), TransformerOptions(enable_composite_types=False))
"""

from .composite import CompositeBlueprintSynthesizer
from .registry import TypeRegistry, TypeRegistryError, get_type_registry, reset_type_registry
from .transformer import (
    Transformer,
    get_default_transformer,
    reset_default_transformer,
    transform,
)

__all__ = [
    "CompositeBlueprintSynthesizer",
    "Transformer",
    "TypeRegistry",
    "TypeRegistryError",
    "get_default_transformer",
    "get_type_registry",
    "reset_default_transformer",
    "reset_type_registry",
    "transform",
]
