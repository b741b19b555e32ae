"""
Core infrastructure: configuration, logging, storage and domain errors.
"""
