"""Data layer: market sources, protocol clients and aggregation."""
