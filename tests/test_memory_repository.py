"""In-memory product repository test cases."""
import asyncio
import time
import pytest
from apps.products.data import MOCK_PRODUCTS
from apps.products.models import ProductCreate, ProductUpdate, SearchFilters
from apps.products.repositories import MockProductRepository
from conftest import make_product


def ids(products):
    return [p.id for p in products]


class TestCrud:
    """Create, read, update and delete."""

    @pytest.mark.asyncio
    async def test_get_all_returns_every_product(self, repository, sample_products):
        products = await repository.get_all()
        assert ids(products) == ids(sample_products)

    @pytest.mark.asyncio
    async def test_get_by_id(self, repository):
        product = await repository.get_by_id(2)
        assert product is not None
        assert product.name == "Smartphone"

    @pytest.mark.asyncio
    async def test_get_by_id_missing_returns_none(self, repository):
        assert await repository.get_by_id(999) is None

    @pytest.mark.asyncio
    async def test_create_assigns_next_id_and_timestamp(self, repository):
        created = await repository.create(ProductCreate(name="Tablet", price=450, category="Electronics"))
        assert created.id == 6
        assert created.created_at is not None
        assert created.created_at.tzinfo is not None
        assert (await repository.get_by_id(6)).name == "Tablet"

    @pytest.mark.asyncio
    async def test_create_uses_max_id_not_count(self):
        repo = MockProductRepository(products=[make_product(3), make_product(10)], latency_factor=0)
        created = await repo.create(ProductCreate(name="New", price=1))
        assert created.id == 11

    @pytest.mark.asyncio
    async def test_create_on_empty_store_starts_at_one(self):
        repo = MockProductRepository(products=[], latency_factor=0)
        created = await repo.create(ProductCreate(name="First", price=1))
        assert created.id == 1

    @pytest.mark.asyncio
    async def test_ids_not_reused_after_delete_of_other_record(self, repository):
        await repository.delete(1)
        created = await repository.create(ProductCreate(name="Another", price=5))
        assert created.id == 6

    @pytest.mark.asyncio
    async def test_update_merges_only_given_fields(self, repository):
        before = await repository.get_by_id(1)
        updated = await repository.update(1, ProductUpdate(price=999.0))
        assert updated.price == 999.0
        assert updated.name == before.name
        assert updated.description == before.description
        assert updated.created_at == before.created_at
        assert (await repository.get_by_id(1)).price == 999.0

    @pytest.mark.asyncio
    async def test_update_ignores_explicit_none(self, repository):
        updated = await repository.update(1, ProductUpdate(name=None, price=None, in_stock=None))
        assert updated.name == "Gaming Laptop"
        assert updated.price == 1299.0
        assert updated.in_stock is True

        # the stored record stays usable by every query
        assert ids(await repository.search("laptop")) == [1]
        assert ids(await repository.search("", SearchFilters(min_price=1000))) == [1]

    @pytest.mark.asyncio
    async def test_update_accepts_wire_names(self, repository):
        updated = await repository.update(2, ProductUpdate.model_validate({"inStock": False}))
        assert updated.in_stock is False

    @pytest.mark.asyncio
    async def test_update_unknown_id_leaves_collection_unchanged(self, repository):
        before = await repository.get_all()
        result = await repository.update(42, ProductUpdate(name="Ghost"))
        assert result is None
        assert await repository.get_all() == before

    @pytest.mark.asyncio
    async def test_delete_twice(self, repository):
        assert await repository.delete(3) is True
        assert await repository.delete(3) is False
        assert await repository.get_by_id(3) is None

    @pytest.mark.asyncio
    async def test_returned_records_are_copies(self, repository):
        product = await repository.get_by_id(1)
        product.name = "Changed outside"
        assert (await repository.get_by_id(1)).name == "Gaming Laptop"

    @pytest.mark.asyncio
    async def test_negative_price_is_not_rejected(self, repository):
        created = await repository.create(ProductCreate(name="Odd", price=-5))
        assert created.price == -5


class TestQueries:
    """Category, stock and search queries."""

    @pytest.mark.asyncio
    async def test_get_by_category_exact_match(self, repository):
        assert ids(await repository.get_by_category("Electronics")) == [1, 2, 4]
        assert await repository.get_by_category("electronics") == []

    @pytest.mark.asyncio
    async def test_get_in_stock(self, repository):
        assert ids(await repository.get_in_stock()) == [1, 2, 3, 5]

    @pytest.mark.asyncio
    async def test_search_is_case_insensitive(self, repository):
        upper = await repository.search("LAPTOP")
        lower = await repository.search("laptop")
        assert ids(upper) == ids(lower) == [1]

    @pytest.mark.asyncio
    async def test_search_matches_description(self, repository):
        assert ids(await repository.search("usb-c")) == [3]

    @pytest.mark.asyncio
    async def test_search_filters_are_conjunctive(self, repository):
        # "phone" matches 2, 3 and 4; only 2 is Electronics and >= 500
        result = await repository.search(
            "phone", SearchFilters(category="Electronics", min_price=500)
        )
        assert ids(result) == [2]

    @pytest.mark.asyncio
    async def test_search_in_stock_filter(self, repository):
        assert ids(await repository.search("phone", SearchFilters(in_stock=False))) == [4]
        assert ids(await repository.search("phone", SearchFilters(in_stock=True))) == [2, 3]

    @pytest.mark.asyncio
    async def test_empty_query_with_price_range_equals_range_filter(self, repository):
        result = await repository.search("", SearchFilters(min_price=500, max_price=1500))
        expected = [p for p in await repository.get_all() if 500 <= p.price <= 1500]
        assert ids(result) == ids(expected) == [1, 2]

    @pytest.mark.asyncio
    async def test_zero_min_price_is_a_constraint(self):
        repo = MockProductRepository(
            products=[make_product(1, price=0), make_product(2, price=-1)], latency_factor=0
        )
        assert ids(await repo.search("", SearchFilters(min_price=0))) == [1]


class TestSeedAndLatency:
    """Seed isolation and simulated latency."""

    @pytest.mark.asyncio
    async def test_default_seed_is_copied_per_instance(self):
        first = MockProductRepository(latency_factor=0)
        second = MockProductRepository(latency_factor=0)
        await first.delete(1)
        assert await first.get_by_id(1) is None
        assert (await second.get_by_id(1)).id == 1
        assert MOCK_PRODUCTS[0].id == 1

    @pytest.mark.asyncio
    async def test_seed_supports_sample_queries(self):
        repo = MockProductRepository(latency_factor=0)
        assert ids(await repo.search("laptop")) == [1]
        assert len(await repo.get_all()) == len(MOCK_PRODUCTS)

    @pytest.mark.asyncio
    async def test_latency_delays_completion(self):
        repo = MockProductRepository(latency_factor=0.1)
        start = time.perf_counter()
        await repo.get_all()
        assert time.perf_counter() - start >= 0.045

    @pytest.mark.asyncio
    async def test_mutation_visible_before_completion(self):
        repo = MockProductRepository(latency_factor=1)
        task = asyncio.create_task(repo.create(ProductCreate(name="Late", price=1)))
        await asyncio.sleep(0)
        assert not task.done()

        # the create is still sleeping, but the record is already in the collection
        repo.latency_factor = 0
        products = await repo.get_all()
        assert products[-1].name == "Late"
        assert not task.done()
        task.cancel()
        with pytest.raises(asyncio.CancelledError):
            await task
