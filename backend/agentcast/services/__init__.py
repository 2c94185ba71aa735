"""Domain services: geography-aware targeting, preferences and dispatch."""
