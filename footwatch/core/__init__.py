"""Core domain layer: exceptions, value types and pure rules."""
