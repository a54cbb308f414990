"""Bounded contexts of dotlink."""
