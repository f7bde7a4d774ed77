"""Authentication layer: hardware binding, credentials, tiers and licenses."""
