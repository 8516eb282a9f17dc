"""
Tests for the resolver chain.

Tests cover:
- Resolver node wiring (set_next, forwarding, terminal fallback)
- ResolverChain ordering and fallback
- MappingResolver
- HttpFetchResolver success and failure handling
- Default resolver management
"""

from unittest.mock import AsyncMock

import httpx
import pytest

from asgraph.config import ResolverSettings
from asgraph.resolve import (
    HttpFetchResolver,
    MappingResolver,
    ResolveHandler,
    Resolver,
    ResolverChain,
    get_default_resolver,
    reset_default_resolver,
    set_default_resolver,
)
from asgraph.vocab import Note, Person


class PrefixResolver(Resolver):
    """Resolves hrefs starting with a prefix to a tagged string."""

    def __init__(self, prefix: str, label: str):
        self.prefix = prefix
        self.label = label
        self.calls = []

    async def try_handle(self, request):
        self.calls.append(request)
        if request.startswith(self.prefix):
            return f"{self.label}:{request}"
        return None


def _mock_client(response=None, side_effect=None):
    client = AsyncMock(spec=httpx.AsyncClient)
    if side_effect is not None:
        client.get.side_effect = side_effect
    else:
        client.get.return_value = response
    return client


# =============================================================================
# Resolver Node Tests
# =============================================================================


class TestResolver:
    """Tests for the base Resolver node."""

    @pytest.mark.asyncio
    async def test_terminal_returns_request(self):
        resolver = Resolver()

        assert await resolver.handle("https://example.com/a") == "https://example.com/a"

    def test_set_next_returns_attached_handler(self):
        first = Resolver()
        second = Resolver()

        assert first.set_next(second) is second
        assert first.next is second
        assert second.next is None

    def test_satisfies_protocol(self):
        assert isinstance(Resolver(), ResolveHandler)

    @pytest.mark.asyncio
    async def test_chained_set_next_wires_in_order(self):
        a = PrefixResolver("https://a.example/", "a")
        b = PrefixResolver("https://b.example/", "b")
        terminal = Resolver()

        a.set_next(b).set_next(terminal)

        assert await a.handle("https://b.example/x") == "b:https://b.example/x"
        assert await a.handle("https://a.example/x") == "a:https://a.example/x"
        assert await a.handle("https://c.example/x") == "https://c.example/x"
        assert b.calls == ["https://b.example/x", "https://c.example/x"]

    @pytest.mark.asyncio
    async def test_first_match_stops_the_chain(self):
        a = PrefixResolver("https://", "a")
        b = PrefixResolver("https://", "b")
        a.set_next(b)

        assert await a.handle("https://example.com") == "a:https://example.com"
        assert b.calls == []

    @pytest.mark.asyncio
    async def test_set_next_replaces_successor(self):
        a = Resolver()
        a.set_next(PrefixResolver("https://", "old"))
        a.set_next(PrefixResolver("https://", "new"))

        assert await a.handle("https://x.example") == "new:https://x.example"


# =============================================================================
# ResolverChain Tests
# =============================================================================


class TestResolverChain:
    """Tests for ResolverChain."""

    @pytest.mark.asyncio
    async def test_strategies_tried_in_order(self):
        first = PrefixResolver("https://a.example/", "first")
        second = PrefixResolver("https://", "second")
        chain = ResolverChain([first, second])

        assert await chain.handle("https://a.example/1") == "first:https://a.example/1"
        assert await chain.handle("https://b.example/1") == "second:https://b.example/1"
        assert first.calls == ["https://a.example/1", "https://b.example/1"]

    @pytest.mark.asyncio
    async def test_falls_back_to_request(self):
        chain = ResolverChain([PrefixResolver("https://a.example/", "a")])

        assert await chain.handle("https://z.example/") == "https://z.example/"

    @pytest.mark.asyncio
    async def test_empty_chain_is_pass_through(self):
        assert await ResolverChain().handle("https://x.example") == "https://x.example"

    @pytest.mark.asyncio
    async def test_chain_forwards_to_its_successor(self):
        chain = ResolverChain([PrefixResolver("https://a.example/", "a")])
        chain.set_next(PrefixResolver("https://", "next"))

        assert await chain.handle("https://z.example/") == "next:https://z.example/"

    def test_append_insert_extend(self):
        a = Resolver()
        b = Resolver()
        c = Resolver()
        chain = ResolverChain()

        assert chain.append(b) is chain
        chain.insert(0, a).extend([c])

        assert chain.handlers == [a, b, c]
        assert len(chain) == 3

    @pytest.mark.asyncio
    async def test_close_closes_every_strategy(self):
        a = Resolver()
        b = Resolver()
        a.close = AsyncMock()
        b.close = AsyncMock()

        await ResolverChain([a, b]).close()

        a.close.assert_awaited_once()
        b.close.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_member_overriding_handle(self):
        class CacheResolver(Resolver):
            async def handle(self, request):
                if request.startswith("https://cache/"):
                    return "cached"
                return await super().handle(request)

        chain = ResolverChain([CacheResolver()])

        assert await chain.handle("https://cache/x") == "cached"
        assert await chain.handle("https://other/x") == "https://other/x"

    @pytest.mark.asyncio
    async def test_member_successor_is_consulted(self, transformer):
        head = MappingResolver(transformer=transformer)
        head.set_next(
            MappingResolver({"https://x.example/": {"type": "Note"}}, transformer=transformer)
        )
        after = PrefixResolver("https://", "after")
        chain = ResolverChain([head, after])

        note = await chain.handle("https://x.example/")

        assert isinstance(note, Note)
        assert after.calls == []

    @pytest.mark.asyncio
    async def test_protocol_only_member(self):
        class LookupHandler:
            def set_next(self, handler):
                return handler

            async def handle(self, request):
                return {"resolved": request}

        chain = ResolverChain([LookupHandler()])

        assert await chain.handle("https://x.example/") == {"resolved": "https://x.example/"}
        await chain.close()


# =============================================================================
# MappingResolver Tests
# =============================================================================


class TestMappingResolver:
    """Tests for MappingResolver."""

    @pytest.mark.asyncio
    async def test_resolves_known_document(self, transformer):
        resolver = MappingResolver(
            {"https://example.com/sally": {"type": "Person", "name": "Sally"}},
            transformer=transformer,
        )

        person = await resolver.handle("https://example.com/sally")

        assert isinstance(person, Person)
        assert person.name == "Sally"

    @pytest.mark.asyncio
    async def test_unknown_href_falls_through(self):
        resolver = MappingResolver()

        assert await resolver.handle("https://example.com/x") == "https://example.com/x"

    @pytest.mark.asyncio
    async def test_add_uses_default_transformer(self):
        resolver = MappingResolver()
        resolver.add("https://example.com/n", {"type": "Note", "content": "hi"})

        note = await resolver.handle("https://example.com/n")

        assert isinstance(note, Note)
        assert note.content == "hi"


# =============================================================================
# HttpFetchResolver Tests
# =============================================================================


class TestHttpFetchResolver:
    """Tests for HttpFetchResolver."""

    HREF = "https://example.com/notes/1"

    @pytest.mark.asyncio
    async def test_fetches_and_transforms(self, transformer):
        client = _mock_client(
            httpx.Response(200, json={"type": "Note", "content": "Fish swim."})
        )
        resolver = HttpFetchResolver(http_client=client, transformer=transformer)

        note = await resolver.handle(self.HREF)

        assert isinstance(note, Note)
        assert note.content == "Fish swim."
        client.get.assert_awaited_once_with(
            self.HREF, headers={"Accept": "application/json"}
        )

    @pytest.mark.asyncio
    async def test_custom_accept_header(self):
        client = _mock_client(httpx.Response(200, json={"type": "Note"}))
        settings = ResolverSettings(accept="application/activity+json")
        resolver = HttpFetchResolver(settings, http_client=client)

        await resolver.handle(self.HREF)

        client.get.assert_awaited_once_with(
            self.HREF, headers={"Accept": "application/activity+json"}
        )

    @pytest.mark.asyncio
    async def test_non_success_status_falls_back_to_href(self):
        client = _mock_client(httpx.Response(404, json={"error": "not found"}))
        resolver = HttpFetchResolver(http_client=client)

        assert await resolver.handle(self.HREF) == self.HREF

    @pytest.mark.asyncio
    async def test_non_success_status_goes_to_successor(self):
        client = _mock_client(httpx.Response(500))
        resolver = HttpFetchResolver(http_client=client)
        resolver.set_next(PrefixResolver("https://", "cache"))

        assert await resolver.handle(self.HREF) == f"cache:{self.HREF}"

    @pytest.mark.asyncio
    async def test_transport_error_falls_back(self):
        client = _mock_client(side_effect=httpx.ConnectError("connection refused"))
        resolver = HttpFetchResolver(http_client=client)

        assert await resolver.handle(self.HREF) == self.HREF

    @pytest.mark.asyncio
    async def test_closed_injected_client_falls_back(self):
        client = httpx.AsyncClient()
        await client.aclose()
        resolver = HttpFetchResolver(http_client=client)

        assert await resolver.handle(self.HREF) == self.HREF

    @pytest.mark.asyncio
    async def test_closed_injected_client_goes_to_successor(self):
        client = httpx.AsyncClient()
        await client.aclose()
        resolver = HttpFetchResolver(http_client=client)
        resolver.set_next(PrefixResolver("https://", "cache"))

        assert await resolver.handle(self.HREF) == f"cache:{self.HREF}"

    @pytest.mark.asyncio
    async def test_undecodable_body_falls_back(self):
        client = _mock_client(httpx.Response(200, text="<html>not json</html>"))
        resolver = HttpFetchResolver(http_client=client)

        assert await resolver.handle(self.HREF) == self.HREF

    @pytest.mark.asyncio
    async def test_invalid_document_falls_back(self, transformer):
        client = _mock_client(
            httpx.Response(200, json={"type": "Note", "published": "yesterday"})
        )
        resolver = HttpFetchResolver(http_client=client, transformer=transformer)

        assert await resolver.handle(self.HREF) == self.HREF

    @pytest.mark.asyncio
    async def test_unknown_type_returns_plain_document(self, transformer):
        client = _mock_client(httpx.Response(200, json={"type": "Unknown", "a": 1}))
        resolver = HttpFetchResolver(http_client=client, transformer=transformer)

        assert await resolver.handle(self.HREF) == {"type": "Unknown", "a": 1}

    @pytest.mark.asyncio
    async def test_as_chain_strategy(self, transformer):
        client = _mock_client(httpx.Response(200, json={"type": "Person", "name": "Joe"}))
        local = MappingResolver(
            {"https://example.com/sally": {"type": "Person", "name": "Sally"}},
            transformer=transformer,
        )
        chain = ResolverChain(
            [local, HttpFetchResolver(http_client=client, transformer=transformer)]
        )

        sally = await chain.handle("https://example.com/sally")
        joe = await chain.handle("https://example.com/joe")

        assert sally.name == "Sally"
        assert joe.name == "Joe"
        client.get.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_injected_client_is_not_closed(self):
        client = _mock_client(httpx.Response(200, json={}))
        resolver = HttpFetchResolver(http_client=client)

        await resolver.close()

        client.aclose.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_owned_client_is_closed(self):
        settings = ResolverSettings(timeout=5.0, user_agent="tests")

        async with HttpFetchResolver(settings) as resolver:
            client = await resolver._get_client()
            assert client.headers["User-Agent"] == "tests"
            assert client.timeout.read == 5.0

        assert client.is_closed


# =============================================================================
# Default Resolver Tests
# =============================================================================


class TestDefaultResolver:
    """Tests for default resolver management."""

    def test_default_is_http_chain(self):
        resolver = get_default_resolver()

        assert isinstance(resolver, ResolverChain)
        assert len(resolver) == 1
        assert isinstance(resolver.handlers[0], HttpFetchResolver)
        assert get_default_resolver() is resolver

    def test_set_default_resolver(self):
        custom = Resolver()
        set_default_resolver(custom)

        assert get_default_resolver() is custom

    def test_reset_default_resolver(self):
        custom = Resolver()
        set_default_resolver(custom)
        reset_default_resolver()

        assert get_default_resolver() is not custom
