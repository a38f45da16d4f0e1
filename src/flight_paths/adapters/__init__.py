"""
Adapter implementations for Flight Paths.

Adapters are concrete implementations of the port interfaces.
They handle the specifics of storage, search algorithms and data sources.
"""
