"""Performance benchmarks for world generation and batching."""
