"""Turn UniFi controller measurements into DogStatsD gauges, counts and events."""

__version__ = "0.1.0"