"""I/O layer: query execution and driver connectors."""
