import math

import pytest

from catalog.core.exceptions import InvalidFilterError
from catalog.crud import crud_product
from catalog.crud.product_query import build_product_queries, parse_discount_range, parse_sort
from catalog.schemas.filters import ProductFilters


# --- 파싱 ---

def test_parse_discount_range():
    assert parse_discount_range("10-30") == (10.0, 30.0)
    assert parse_discount_range("0-100") == (0.0, 100.0)
    assert parse_discount_range(None) is None
    assert parse_discount_range("") is None

@pytest.mark.parametrize("raw", ["abc-10", "10", "10-", "-10", "-", "10-20-30", "nan-10", "10-inf"])
def test_parse_discount_range_ignores_malformed(raw):
    assert parse_discount_range(raw) is None

def test_parse_discount_range_strict_rejects_malformed():
    with pytest.raises(InvalidFilterError):
        parse_discount_range("abc-10", strict=True)

def test_parse_sort():
    assert parse_sort("price-asc") == ("price", "asc")
    assert parse_sort("created_at-desc") == ("created_at", "desc")
    assert parse_sort("rating-DESC") == ("rating", "desc")
    assert parse_sort(None) is None

@pytest.mark.parametrize("raw", ["color-asc", "rating-xyz", "price", "id-asc"])
def test_parse_sort_ignores_unknown(raw):
    assert parse_sort(raw) is None

def test_parse_sort_strict_rejects_unknown():
    with pytest.raises(InvalidFilterError):
        parse_sort("color-asc", strict=True)

def test_build_queries_rejects_non_positive_page():
    with pytest.raises(InvalidFilterError):
        build_product_queries(ProductFilters(), page_no=0, page_size=10)
    with pytest.raises(InvalidFilterError):
        build_product_queries(ProductFilters(), page_no=1, page_size=0)

def test_filters_accept_camel_case_names():
    filters = ProductFilters.model_validate({
        "brandIds": [3, 7], "categoryIds": [1], "priceRangeTo": 50, "sortBy": "price-asc",
    })
    assert filters.brand_ids == [3, 7]
    assert filters.category_ids == [1]
    assert filters.price_range_to == 50
    assert filters.sort_by == "price-asc"


# --- 페이지네이션 ---

async def test_pagination_without_filters(db, add_product):
    for i in range(25):
        await add_product(name=f"product {i}", price=i + 1)

    pages = [await crud_product.get_products(db, page_no=n, page_size=10) for n in (1, 2, 3)]

    assert [p.count for p in pages] == [25, 25, 25]
    assert [p.last_page for p in pages] == [3, 3, 3]
    assert [p.num_of_results_on_cur_page for p in pages] == [10, 10, 5]
    assert all(len(p.products) == p.num_of_results_on_cur_page for p in pages)

async def test_page_past_the_end_is_empty(db, add_product):
    await add_product(price=1)
    page = await crud_product.get_products(db, page_no=5, page_size=10)
    assert page.count == 1
    assert page.products == []
    assert page.num_of_results_on_cur_page == 0

async def test_pages_cover_every_match_once(db, add_product):
    for i in range(7):
        await add_product(name=f"p{i}", price=i + 1, category_ids=[1, 2])

    filters = ProductFilters(category_ids=[1, 2], sort_by="price-asc")
    seen = []
    first = await crud_product.get_products(db, page_no=1, page_size=3, filters=filters)
    for n in range(1, first.last_page + 1):
        page = await crud_product.get_products(db, page_no=n, page_size=3, filters=filters)
        assert page.num_of_results_on_cur_page <= 3
        seen.extend(p.id for p in page.products)

    assert first.count == 7
    assert first.last_page == math.ceil(7 / 3)
    assert len(seen) == len(set(seen)) == 7


# --- 필터 ---

async def test_brand_filter_matches_any_listed_brand(db, add_product):
    await add_product(name="only 3", brands="3")
    await add_product(name="7 and 9", brands="7,9")
    await add_product(name="json 1 and 7", brands='["1", "7"]')
    await add_product(name="spaced", brands="2, 3")
    await add_product(name="other brands", brands="1,2")
    await add_product(name="lookalike ids", brands="13,37")
    await add_product(name="no brand")

    page = await crud_product.get_products(db, filters=ProductFilters(brand_ids=[3, 7]))

    assert page.count == 4
    assert sorted(p.name for p in page.products) == ["7 and 9", "json 1 and 7", "only 3", "spaced"]

async def test_category_filter_does_not_duplicate_products(db, add_product):
    await add_product(name="a", category_ids=[1, 2])
    await add_product(name="b", category_ids=[1, 3])
    await add_product(name="c", category_ids=[2])

    page = await crud_product.get_products(db, filters=ProductFilters(category_ids=[1]))
    assert page.count == 2
    assert sorted(p.name for p in page.products) == ["a", "b"]

    page = await crud_product.get_products(db, filters=ProductFilters(category_ids=[1, 2, 3]))
    assert page.count == 3
    assert page.num_of_results_on_cur_page == 3
    assert len({p.id for p in page.products}) == 3

async def test_gender_and_price_filters(db, add_product):
    await add_product(name="cheap men", gender="men", price=20)
    await add_product(name="edge men", gender="men", price=50)
    await add_product(name="pricey men", gender="men", price=80)
    await add_product(name="cheap women", gender="women", price=20)

    page = await crud_product.get_products(
        db, filters=ProductFilters(gender="men", price_range_to=50)
    )
    assert sorted(p.name for p in page.products) == ["cheap men", "edge men"]

async def test_discount_range_is_inclusive(db, add_product):
    for d in (0, 10, 20, 30, 40):
        await add_product(name=f"d{d}", discount=d)

    page = await crud_product.get_products(db, filters=ProductFilters(discount="10-30"))
    assert sorted(p.discount for p in page.products) == [10, 20, 30]

async def test_malformed_discount_is_ignored(db, add_product):
    for d in (0, 50):
        await add_product(discount=d)

    page = await crud_product.get_products(db, filters=ProductFilters(discount="abc-10"))
    assert page.count == 2

async def test_occasion_filter_matches_any_tag(db, add_product):
    await add_product(name="party", occasion="party,wedding")
    await add_product(name="office", occasion="office")
    await add_product(name="json", occasion='["travel", "party"]')
    await add_product(name="partygoer", occasion="partygoer")

    page = await crud_product.get_products(db, filters=ProductFilters(occasions=["party", "office"]))
    assert sorted(p.name for p in page.products) == ["json", "office", "party"]

async def test_occasion_values_are_not_sql(db, add_product):
    await add_product(name="party", occasion="party")

    page = await crud_product.get_products(
        db, filters=ProductFilters(occasions=["%", "x' OR '1'='1"])
    )
    assert page.count == 0
    assert page.products == []

async def test_blank_occasion_matches_nothing_extra(db, add_product):
    await add_product(name="untagged")
    await add_product(name="party", occasion="party")

    page = await crud_product.get_products(db, filters=ProductFilters(occasions=["", "  "]))
    assert page.count == 2

    page = await crud_product.get_products(db, filters=ProductFilters(occasions=["", "party"]))
    assert [p.name for p in page.products] == ["party"]

async def test_filter_groups_are_combined_with_and(db, add_product):
    await add_product(name="match", brands="3", gender="women", price=40, category_ids=[1])
    await add_product(name="wrong gender", brands="3", gender="men", price=40, category_ids=[1])
    await add_product(name="wrong category", brands="3", gender="women", price=40, category_ids=[2])
    await add_product(name="too expensive", brands="3", gender="women", price=90, category_ids=[1])

    filters = ProductFilters(brand_ids=[3], category_ids=[1], gender="women", price_range_to=50)
    page = await crud_product.get_products(db, filters=filters)
    assert page.count == 1
    assert [p.name for p in page.products] == ["match"]


# --- 정렬 ---

async def test_sort_by_price_ascending(db, add_product):
    for price in (30, 10, 50, 20, 40):
        await add_product(price=price)

    page = await crud_product.get_products(db, filters=ProductFilters(sort_by="price-asc"))
    prices = [p.price for p in page.products]
    assert prices == sorted(prices)

async def test_sort_by_rating_descending(db, add_product):
    for rating in (3.5, 4.8, 1.2):
        await add_product(rating=rating)

    page = await crud_product.get_products(db, filters=ProductFilters(sort_by="rating-desc"))
    assert [p.rating for p in page.products] == [4.8, 3.5, 1.2]

async def test_invalid_sort_returns_unsorted_rows(db, add_product):
    for price in (30, 10, 20):
        await add_product(price=price)

    page = await crud_product.get_products(db, filters=ProductFilters(sort_by="rating-xyz"))
    assert page.count == 3
    assert sorted(p.price for p in page.products) == [10, 20, 30]

async def test_strict_mode_rejects_invalid_sort(db, add_product):
    await add_product()
    with pytest.raises(InvalidFilterError):
        await crud_product.get_products(
            db, filters=ProductFilters(sort_by="color-asc"), strict=True
        )

async def test_default_page_size_comes_from_settings(db, add_product, monkeypatch):
    from catalog.core.config import settings
    monkeypatch.setattr(settings, "default_page_size", 2)
    for i in range(5):
        await add_product(price=i + 1)

    page = await crud_product.get_products(db)
    assert page.num_of_results_on_cur_page == 2
    assert page.last_page == 3

async def test_explicit_zero_page_size_is_rejected(db, add_product):
    await add_product()
    with pytest.raises(InvalidFilterError):
        await crud_product.get_products(db, page_size=0)
