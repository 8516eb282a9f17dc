"""
asgraph Resolve Layer.

Turns references (hrefs) into the content they point at.

Core Components:
- Resolvable / ResolveHandler: protocols
- Resolver: chain node; subclasses implement try_handle()
- ResolverChain: ordered list of strategies
- HttpFetchResolver: fetch JSON over HTTP (the default strategy)
- MappingResolver: resolve from an in-memory dict
- ResolvableSequence: list that resolves its members concurrently

Usage:
    from asgraph.resolve import MappingResolver, ResolverChain, HttpFetchResolver

    chain = ResolverChain([MappingResolver(fixtures), HttpFetchResolver()])
    actor = await activity.actor.resolve(chain)
"""

from .base import LinkResolutionError, Resolvable, ResolveHandler, Resolver, ResolverChain
from .defaults import get_default_resolver, reset_default_resolver, set_default_resolver
from .http import HttpFetchResolver
from .mapping import MappingResolver
from .sequence import ResolvableSequence

__all__ = [
    "HttpFetchResolver",
    "LinkResolutionError",
    "MappingResolver",
    "ResolvableSequence",
    "Resolvable",
    "ResolveHandler",
    "Resolver",
    "ResolverChain",
    "get_default_resolver",
    "reset_default_resolver",
    "set_default_resolver",
]
