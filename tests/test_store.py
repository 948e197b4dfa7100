"""Test CatalogStore mutations and enumerations."""

import pytest

from furniro.catalog import CatalogStore
from furniro.catalog.schemas import ProductCreate, ProductUpdate
from furniro.errors import NotFound, ValidationError


def new_product(**overrides):
    data = {
        "name": "Asgaard",
        "description": "Asgaard sofa",
        "price": 250000,
        "category": "Living",
        "brand": "Furniro",
    }
    data.update(overrides)
    return ProductCreate(**data)


class TestCreate:
    """Test product creation."""

    def test_create_assigns_defaults(self, store):
        product = store.create_product(new_product())
        assert product.id not in {"1", "2", "3"}
        assert product.rating == 0
        assert product.reviews == 0
        assert product.discount == 0
        assert product.original_price is None
        assert product.badge is None
        assert product.in_stock is True
        assert product.image == "/images/default.jpg"
        assert product.tags == []
        assert product.sku == "SS004"

    def test_create_appends_to_collection(self, store):
        product = store.create_product(new_product(tags=["Sofa"], image="/images/a.jpg"))
        listed = store.list_products()
        assert listed[-1] == product
        assert product.tags == ["Sofa"]
        assert product.image == "/images/a.jpg"

    def test_created_ids_are_unique(self, store):
        ids = {store.create_product(new_product()).id for _ in range(20)}
        assert len(ids) == 20

    @pytest.mark.parametrize("missing", ["name", "description", "price", "category", "brand"])
    def test_create_requires_fields(self, store, missing):
        with pytest.raises(ValidationError):
            store.create_product(new_product(**{missing: None}))
        assert len(store.list_products()) == 3

    def test_zero_price_counts_as_missing(self, store):
        with pytest.raises(ValidationError):
            store.create_product(new_product(price=0))


class TestUpdate:
    """Test partial product updates."""

    def test_empty_update_changes_nothing(self, store):
        before = store.get_product("1")
        after = store.update_product("1", ProductUpdate())
        assert after == before

    def test_update_merges_provided_fields(self, store):
        updated = store.update_product("3", ProductUpdate(name="Lolito II", price=6500000))
        assert updated.id == "3"
        assert updated.name == "Lolito II"
        assert updated.price == 6500000
        assert updated.description == "Luxury big sofa"
        assert store.get_product("3") == updated

    def test_empty_strings_leave_values(self, store):
        updated = store.update_product("1", ProductUpdate(name="", brand=""))
        assert updated.name == "Syltherine"
        assert updated.brand == "Furniro"

    def test_zero_price_and_empty_tags_are_applied(self, store):
        updated = store.update_product("2", ProductUpdate(price=0, tags=[]))
        assert updated.price == 0
        assert updated.tags == []

    def test_update_keeps_position(self, store):
        store.update_product("2", ProductUpdate(name="Leviosa Plus"))
        assert [p.id for p in store.list_products()] == ["1", "2", "3"]

    def test_update_unknown_id(self, store):
        with pytest.raises(NotFound):
            store.update_product("missing", ProductUpdate(name="x"))


class TestDelete:
    """Test product deletion."""

    def test_delete_shifts_later_records(self, store):
        store.delete_product("2")
        assert [p.id for p in store.list_products()] == ["1", "3"]

    def test_delete_twice_raises_not_found(self, store):
        store.delete_product("1")
        with pytest.raises(NotFound):
            store.delete_product("1")
        with pytest.raises(NotFound):
            store.get_product("1")


class TestEnumerations:
    """Test distinct category and brand listings."""

    def test_product_categories_first_occurrence_order(self, store):
        assert store.product_categories() == ["Dining", "Living"]

    def test_categories_follow_live_collection(self, store):
        store.create_product(new_product(category="Bedroom", brand="Nordic"))
        store.delete_product("3")
        assert store.product_categories() == ["Dining", "Bedroom"]
        assert store.product_brands() == ["Furniro", "Nordic"]

    def test_no_case_normalization(self, store):
        store.create_product(new_product(category="dining"))
        assert store.product_categories() == ["Dining", "Living", "dining"]

    def test_blog_categories(self, store):
        assert store.blog_categories() == ["Design", "Interior", "Handmade", "Wood", "Crafts"]


class TestSnapshots:
    """Test that readers cannot mutate the store through returned lists."""

    def test_list_returns_copy(self, store):
        listed = store.list_products()
        listed.clear()
        assert len(store.list_products()) == 3

    def test_get_blog_post(self, store):
        assert store.get_blog_post("4").title == "Modern home in Milan"
        with pytest.raises(NotFound):
            store.get_blog_post("99")

    def test_close_empties_collections(self):
        store = CatalogStore.with_sample_data()
        store.close()
        assert store.list_products() == []
        assert store.list_blog_posts() == []
