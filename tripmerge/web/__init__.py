"""HTTP API for TripMerge."""
