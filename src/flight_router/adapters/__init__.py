"""
Adapter implementations for the route finder.

Adapters are concrete implementations of the port interfaces.
Each one wraps a single concern: a data source, the search algorithm or
the graph snapshot cache.
"""
