"""API root and health endpoints."""

from blockfrost_sleuth.models import Health, HealthClock, Root


class HealthEndpoints:
    def root(self) -> Root:
        """Return the backend URL and version."""
        return self._get("/", Root)

    def health(self) -> Health:
        return self._get("/health", Health)

    def health_clock(self) -> HealthClock:
        """Return the server time, useful to detect clock drift."""
        return self._get("/health/clock", HealthClock)
