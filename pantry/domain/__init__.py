"""Domain Layer - бізнес-логіка pantry.

Bounded contexts:
- ingredients: Ingredient aggregate, Category/Unit master data
- shopping: ShoppingSession aggregate та CheckedItem snapshots
"""
