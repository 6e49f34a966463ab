"""
Tests for StorefrontService: session ownership, locking and idempotent placement.
"""

import asyncio

import pytest

from storefront import AddressId, Error, ErrorKind, Money, Ok, PaymentMethodId, ProductId, StorefrontService
from storefront import idempotency as I
from storefront import ops as O


@pytest.fixture
def service(settings):
    return StorefrontService(settings=settings)


async def prepare(service, user_id, *slugs):
    for slug in slugs:
        await service.execute(user_id, O.AddToCart(ProductId(slug)))
    await service.execute(user_id, O.SelectAddress(AddressId(0)))
    await service.execute(user_id, O.SelectPayment(PaymentMethodId(0)))


class TestSessions:
    """Tests for session lifecycle."""

    def test_open_is_idempotent(self, service):
        """Test opening twice returns the same session."""
        assert service.open_session("u1") is service.open_session("u1")
        assert len(service) == 1

    def test_close(self, service):
        """Test closing drops the session."""
        service.open_session("u1")
        assert service.close_session("u1") is True
        assert service.close_session("u1") is False
        assert service.session("u1") is None
        assert "u1" not in service

    def test_idle_sessions_are_evicted(self, settings):
        """Test sessions untouched past the idle limit are dropped."""
        now = [0.0]
        service = StorefrontService(
            settings=settings.model_copy(update={"SESSION_IDLE_SECONDS": 60}),
            clock=lambda: now[0],
        )
        service.open_session("idle")
        service.open_session("active")

        now[0] = 45.0
        service.open_session("active")
        now[0] = 90.0
        service.open_session("newcomer")

        assert "idle" not in service
        assert "active" in service
        assert len(service) == 2

    def test_idle_limit_zero_keeps_sessions(self, settings):
        """Test a zero idle limit disables eviction."""
        now = [0.0]
        service = StorefrontService(
            settings=settings.model_copy(update={"SESSION_IDLE_SECONDS": 0}),
            clock=lambda: now[0],
        )
        service.open_session("u1")
        now[0] = 10_000_000.0
        service.open_session("u2")
        assert len(service) == 2

    @pytest.mark.asyncio
    async def test_busy_session_is_not_evicted(self, settings):
        """Test a session holding its lock survives eviction."""
        now = [0.0]
        service = StorefrontService(
            settings=settings.model_copy(update={"SESSION_IDLE_SECONDS": 60}),
            clock=lambda: now[0],
        )
        service.open_session("busy")
        slot_lock = service._slots["busy"].lock
        async with slot_lock:
            now[0] = 120.0
            service.open_session("other")
            assert "busy" in service

    @pytest.mark.asyncio
    async def test_execute_opens_session(self, service):
        """Test the first request for a user creates their session."""
        await service.execute("u1", O.AddToCart(ProductId("tshirt")))
        assert "u1" in service
        assert len(service.session("u1").cart_lines()) == 1

    @pytest.mark.asyncio
    async def test_isolation(self, service):
        """Test users never see each other's carts or orders."""
        await prepare(service, "alice", "tshirt")
        await service.execute("bob", O.AddToCart(ProductId("speaker")))

        await service.execute("alice", O.PlaceOrder())

        assert await service.execute("bob", O.CartTotal()) == Ok(Money(6900))
        assert await service.execute("bob", O.ListOrders()) == Ok(())

    @pytest.mark.asyncio
    async def test_concurrent_requests_serialize(self, service):
        """Test concurrent adds for one user all land exactly once."""
        slugs = ["tshirt", "hoodie", "speaker", "joggers", "sleeve"]
        results = await asyncio.gather(
            *(service.execute("u1", O.AddToCart(ProductId(s))) for s in slugs),
            *(service.execute("u1", O.AddToCart(ProductId(s))) for s in slugs),
        )
        assert sum(1 for r in results if r == Ok(True)) == len(slugs)
        assert len(service.session("u1").cart_lines()) == len(slugs)


class TestIdempotentPlacement:
    """Tests for request-token keyed place_order."""

    @pytest.mark.asyncio
    async def test_retry_replays_same_order(self, service):
        """Test a retried token returns the first order and places nothing new."""
        await prepare(service, "u1", "sneakers", "tshirt")

        first = await service.execute("u1", O.PlaceOrder(request_token="t-1"))
        await service.execute("u1", O.AddToCart(ProductId("speaker")))
        second = await service.execute("u1", O.PlaceOrder(request_token="t-1"))

        assert isinstance(first, Ok)
        assert second == first
        assert first.value.total == Money(10400)
        assert len(service.session("u1").orders()) == 1
        # The retry left the new cart alone
        assert len(service.session("u1").cart_lines()) == 1

    @pytest.mark.asyncio
    async def test_new_token_places_new_order(self, service):
        """Test a different token is a different order."""
        await prepare(service, "u1", "tshirt")
        first = await service.execute("u1", O.PlaceOrder(request_token="t-1"))
        await prepare(service, "u1", "hoodie")
        second = await service.execute("u1", O.PlaceOrder(request_token="t-2"))
        assert first.value.id != second.value.id

    @pytest.mark.asyncio
    async def test_tokens_are_per_user(self, service):
        """Test the same token for two users places two orders."""
        await prepare(service, "alice", "tshirt")
        await prepare(service, "bob", "hoodie")
        a = await service.execute("alice", O.PlaceOrder(request_token="same"))
        b = await service.execute("bob", O.PlaceOrder(request_token="same"))
        assert a.value.total == Money(2500)
        assert b.value.total == Money(5500)

    @pytest.mark.asyncio
    async def test_failure_can_be_retried(self, service):
        """Test a failed placement is not cached against its token."""
        first = await service.execute("u1", O.PlaceOrder(request_token="t-1"))
        assert isinstance(first, Error)
        assert first.error.kind is ErrorKind.EMPTY_CART

        await prepare(service, "u1", "tshirt")
        second = await service.execute("u1", O.PlaceOrder(request_token="t-1"))
        assert isinstance(second, Ok)

    @pytest.mark.asyncio
    async def test_pending_token_conflicts(self, settings):
        """Test a token still pending elsewhere maps to REQUEST_CONFLICT."""
        store = I.MemoryStore()
        service = StorefrontService(
            settings=settings,
            store=store,
            policy=I.Policy().with_on_pending(I.FAIL),
        )
        await prepare(service, "u1", "tshirt")
        await store.set_pending("place_order:u1:t-1", None)

        result = await service.execute("u1", O.PlaceOrder(request_token="t-1"))

        assert isinstance(result, Error)
        assert result.error.kind is ErrorKind.REQUEST_CONFLICT
        assert len(service.session("u1").cart_lines()) == 1

    @pytest.mark.asyncio
    async def test_without_token_not_idempotent(self, service):
        """Test plain PlaceOrder runs every time."""
        await prepare(service, "u1", "tshirt")
        await service.execute("u1", O.PlaceOrder())
        await prepare(service, "u1", "hoodie")
        await service.execute("u1", O.PlaceOrder())
        assert len(service.session("u1").orders()) == 2
