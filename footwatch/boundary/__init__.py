"""Boundary layer: persistence, identity and external model adapters."""
