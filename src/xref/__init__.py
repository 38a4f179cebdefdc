"""Indexing, cross-referencing, and flattening of record collections."""
