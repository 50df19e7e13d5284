"""Ingredients bounded context - pantry inventory.

Ingredient aggregate + Category/Unit master data.
"""
