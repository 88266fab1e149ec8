from prometheus_client import Counter, Histogram


class ReservationMetrics:
    """
    Reservation engine metrics

    Exposed at GET /metrics through the default prometheus registry.
    """

    def __init__(self):
        # ========== Creation Protocol ==========
        self.reservation_attempts = Counter(
            'reservation_attempts_total',
            'Reservation create attempts',
            ['result'],  # created/conflict/client_not_found/error
        )

        self.reservation_create_duration = Histogram(
            'reservation_create_duration_seconds',
            'Reservation create processing time',
            ['result'],
            buckets=[0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5],
        )

        # ========== Lifecycle ==========
        self.reservation_cancellations = Counter(
            'reservation_cancellations_total',
            'Reservation cancel requests',
            ['result'],  # cancelled/already_cancelled/not_found
        )

        # ========== Availability ==========
        self.availability_scans = Counter(
            'availability_scans_total',
            'Availability scans served',
        )

        self.available_slots_returned = Histogram(
            'availability_scan_free_slots',
            'Free slots returned per scan',
            buckets=[0, 1, 2, 4, 8, 24, 48, 168],
        )

    # ========== Helper Methods ==========

    def record_reservation_attempt(self, *, result: str, duration: float):
        self.reservation_attempts.labels(result=result).inc()
        self.reservation_create_duration.labels(result=result).observe(duration)

    def record_cancellation(self, *, result: str):
        self.reservation_cancellations.labels(result=result).inc()

    def record_availability_scan(self, *, free_slots: int):
        self.availability_scans.inc()
        self.available_slots_returned.observe(free_slots)


# Global metrics instance
metrics = ReservationMetrics()
