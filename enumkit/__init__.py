"""Derive string conversion, parsing, iteration, messages, properties and discriminants for enums described as data."""

__version__ = "0.1.0"