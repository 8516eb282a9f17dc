"""
asgraph - typed ActivityStreams documents with pluggable link resolution.

asgraph decodes loosely-typed ActivityStreams 2.0 JSON into pydantic
models and resolves references to the documents they point at:

- **Type-driven transformation**: the ``type`` property picks the model
- **Composite types**: documents declaring several types get a merged model
- **Links**: bare URLs and link objects become resolvable Link instances
- **Resolver chains**: ordered, extensible strategies with an HTTP default

Quick Start:
    >>> from asgraph import transform
    >>>
    >>> activity = transform({
    ...     "type": "Create",
    ...     "actor": "https://example.com/sally",
    ...     "object": {"type": "Note", "content": "Fish swim."},
    ... })
    >>> activity.object.content
    'Fish swim.'
    >>> actor = await activity.actor.resolve()
"""

__version__ = "0.1.0"
__license__ = "MIT"

# Core exports for convenient imports
from asgraph.config import Settings, TransformerOptions, get_settings
from asgraph.resolve import (
    HttpFetchResolver,
    LinkResolutionError,
    MappingResolver,
    ResolvableSequence,
    Resolver,
    ResolverChain,
    get_default_resolver,
)
from asgraph.transform import Transformer, TypeRegistry, get_type_registry, transform
from asgraph.vocab import ASLink, ASObject, ASRoot, define_type

__all__ = [
    # Version info
    "__version__",
    "__license__",
    # Configuration
    "Settings",
    "TransformerOptions",
    "get_settings",
    # Transformation
    "Transformer",
    "TypeRegistry",
    "get_type_registry",
    "transform",
    # Vocabulary
    "ASLink",
    "ASObject",
    "ASRoot",
    "define_type",
    # Resolution
    "HttpFetchResolver",
    "LinkResolutionError",
    "MappingResolver",
    "ResolvableSequence",
    "Resolver",
    "ResolverChain",
    "get_default_resolver",
]
