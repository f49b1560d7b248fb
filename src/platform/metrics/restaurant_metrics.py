from prometheus_client import Counter, Histogram


class RestaurantMetrics:
    """
    Restaurant business metrics, exposed on /metrics

    Reservation results: accepted / invalid / table_conflict / user_conflict / guest_conflict
    Transaction results: accepted / insufficient_funds
    """

    def __init__(self):
        # ========== Reservation Metrics ==========
        self.reservation_requests = Counter(
            'restaurant_reservation_requests_total',
            'Total reservation create/update requests',
            ['operation', 'result'],  # operation: create/update
        )

        self.reservation_duration = Histogram(
            'restaurant_reservation_duration_seconds',
            'Reservation admission processing time',
            ['operation'],
            buckets=[0.005, 0.01, 0.05, 0.1, 0.2, 0.5, 1.0, 2.0],
        )

        # ========== Payment Metrics ==========
        self.transactions = Counter(
            'restaurant_transactions_total',
            'Total payment transactions',
            ['payment_method', 'result'],
        )

    # ========== Helper Methods ==========

    def record_reservation(self, *, operation: str, result: str, duration: float):
        self.reservation_requests.labels(operation=operation, result=result).inc()
        self.reservation_duration.labels(operation=operation).observe(duration)

    def record_transaction(self, *, payment_method: str, result: str):
        self.transactions.labels(payment_method=payment_method, result=result).inc()


# Global metrics instance
metrics = RestaurantMetrics()
