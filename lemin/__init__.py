"""Ant farm simulator: parse a colony, choose disjoint routes and step the ants along them."""

__version__ = "0.1.0"