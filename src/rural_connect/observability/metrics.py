"""Custom metrics for Rural Connect."""

from opentelemetry import metrics

meter = metrics.get_meter("rural-connect")

orders_placed_counter = meter.create_counter(
    name="orders_placed_total",
    description="Total number of orders accepted by the bookings API",
    unit="1",
)

order_failures_counter = meter.create_counter(
    name="order_failures_total",
    description="Total number of order submissions that failed",
    unit="1",
)

order_amount_histogram = meter.create_histogram(
    name="order_amount_rupees",
    description="Order totals in rupees",
    unit="INR",
)

cart_mutation_counter = meter.create_counter(
    name="cart_mutations_total",
    description="Cart mutations by operation",
    unit="1",
)

seeded_records_counter = meter.create_counter(
    name="seeded_records_total",
    description="Records inserted by the seed loader by collection",
    unit="1",
)


def record_order_placed(total_amount: int, item_count: int) -> None:  # noqa: ARG001
    """Record a successfully placed order.

    Args:
        total_amount: Order total in rupees
        item_count: Number of distinct line items
    """
    orders_placed_counter.add(1)
    order_amount_histogram.record(total_amount)


def record_order_failure(reason: str) -> None:
    """Record a failed order submission.

    Args:
        reason: Short failure reason (e.g., "empty_cart", "api_error")
    """
    order_failures_counter.add(1, {"reason": reason})


def record_cart_mutation(operation: str) -> None:
    """Record a cart mutation.

    Args:
        operation: The mutation performed (e.g., "add", "remove")
    """
    cart_mutation_counter.add(1, {"operation": operation})


def record_seeded_records(collection: str, count: int) -> None:
    """Record records inserted by the seed loader.

    Args:
        collection: Collection name
        count: Number of records inserted
    """
    seeded_records_counter.add(count, {"collection": collection})
