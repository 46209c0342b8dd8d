"""
Core domain models, mathematical primitives, and contracts.

Independent of the scheduler, storage and display layers.
"""
