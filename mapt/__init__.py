"""Helpers for provisioning short-lived cloud test machines: spot and VM size selection, image references, networking rules and kind port mappings."""

__version__ = "1.0.0"