"""Net worth aggregation, trend and projection report package."""
