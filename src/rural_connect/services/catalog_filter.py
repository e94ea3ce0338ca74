"""Product listing filters used by the page views."""

from rural_connect.models.catalog_models import Product

ALL_CATEGORIES = "all"


def filter_products(
    products: list[Product],
    search_term: str = "",
    category: str = ALL_CATEGORIES,
) -> list[Product]:
    """Filter products by name and category, keeping the original order.

    Args:
        products: Products to filter
        search_term: Case-insensitive substring matched against product names
        category: Exact category value, or "all" for every category

    Returns:
        Matching products
    """
    needle = search_term.lower()
    return [
        product
        for product in products
        if needle in product.name.lower()
        and (category == ALL_CATEGORIES or product.category.value == category)
    ]


def list_categories(products: list[Product]) -> list[str]:
    """Return "all" followed by each category present, in first-seen order."""
    categories = [ALL_CATEGORIES]
    for product in products:
        if product.category.value not in categories:
            categories.append(product.category.value)
    return categories


def category_label(category: str) -> str:
    """Display label for a category option."""
    if category == ALL_CATEGORIES:
        return "All Categories"
    return category[:1].upper() + category[1:]
