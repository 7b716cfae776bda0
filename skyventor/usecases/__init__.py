"""Use-case layer for orchestrating client workflows.

Each module coordinates domain objects and the backend port without performing
transport I/O directly, preserving MVVM + Hexagonal boundaries.
"""
