"""
Test package for the inventory sales reporting library.
Contains unit tests for entities, value objects and services.
"""
