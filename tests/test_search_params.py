import pytest

from app.services.search_params import (
    DEFAULT_PAGE_SIZE,
    MAX_PAGE_NUMBER,
    SearchParams,
    normalize_search_params,
)


def test_empty_input_gives_defaults():
    assert normalize_search_params({}) == SearchParams()


def test_values_are_typed_and_trimmed():
    params = normalize_search_params(
        {
            "q": "  macbook  ",
            "category": "Electronics",
            "minPrice": "10.5",
            "maxPrice": "200",
            "sort": "price_desc",
            "page": "3",
            "pageSize": "12",
        }
    )
    assert params == SearchParams(
        q="macbook",
        category="Electronics",
        min_price=10.5,
        max_price=200.0,
        sort="price_desc",
        page=3,
        page_size=12,
    )


@pytest.mark.parametrize("raw", ["", "   ", "abc", "nan", "inf", "12abc", None])
def test_bad_prices_are_unset_not_zero(raw):
    params = normalize_search_params({"minPrice": raw, "maxPrice": raw})
    assert params.min_price is None
    assert params.max_price is None


def test_price_bounds_are_independent():
    params = normalize_search_params({"minPrice": "oops", "maxPrice": "50"})
    assert params.min_price is None
    assert params.max_price == 50.0


def test_zero_price_is_a_real_bound():
    assert normalize_search_params({"minPrice": "0"}).min_price == 0.0


@pytest.mark.parametrize("sort", ["relevance", "PRICE_ASC", "", None])
def test_unknown_sort_falls_back_to_newest(sort):
    assert normalize_search_params({"sort": sort}).sort == "createdAt_desc"


@pytest.mark.parametrize("page", ["0", "-2", "two", "1.5", ""])
def test_invalid_page_is_first_page(page):
    assert normalize_search_params({"page": page}).page == 1


@pytest.mark.parametrize("page_size", ["0", "-5", "many", ""])
def test_invalid_page_size_uses_default(page_size):
    assert normalize_search_params({"pageSize": page_size}).page_size == DEFAULT_PAGE_SIZE


def test_page_size_is_capped():
    assert normalize_search_params({"pageSize": "5000"}, max_page_size=100).page_size == 100


def test_configured_default_page_size():
    assert normalize_search_params({}, default_page_size=12).page_size == 12


def test_huge_page_number_is_bounded():
    assert normalize_search_params({"page": "9" * 30}).page == MAX_PAGE_NUMBER


def test_long_query_is_truncated():
    params = normalize_search_params({"q": "a" * 250}, max_query_length=100)
    assert params.q == "a" * 100


def test_category_passes_through_verbatim():
    assert normalize_search_params({"category": "Sports & Recreation"}).category == "Sports & Recreation"
