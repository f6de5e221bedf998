"""Core infrastructure: errors, logging, configuration and registries."""
