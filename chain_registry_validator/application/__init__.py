"""Application layer for the chain registry validator.

This layer contains the validation use case and the services it
orchestrates (directory walking, error aggregation, uniqueness
tracking). It sits between the CLI and the domain/validation layers.
"""
