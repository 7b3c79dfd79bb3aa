"""Core utilities: exceptions, logging, paths and configuration."""
