from prometheus_client import Counter, Histogram


# Order Metrics
orders_placed_total = Counter("marketplace_orders_placed_total", "Total orders placed", ["status"])
order_value = Histogram(
    "marketplace_order_value",
    "Order value distribution",
    buckets=[10, 50, 100, 200, 500, 1000, 2000, 5000, float("inf")],
)
order_status_changes_total = Counter(
    "marketplace_order_status_changes_total", "Order status changes made by sellers", ["status"]
)

# Cart Metrics
cart_mutations_total = Counter("marketplace_cart_mutations_total", "Cart line mutations", ["operation"])

# Checkout Performance
checkout_duration = Histogram("marketplace_checkout_seconds", "Checkout transaction time")
