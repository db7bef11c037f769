"""Process entry point and environment-driven settings for the fleet placer."""
