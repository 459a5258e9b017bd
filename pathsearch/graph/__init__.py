"""Graph primitives and helpers.

This package provides neighbour-source resolution (`base`), the read-only
mapping-backed `AdjacencyGraph` (`adjacency`) and NetworkX conversion
helpers (`convert`).
"""
