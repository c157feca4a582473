"""HTTP handlers, one route per operation."""
