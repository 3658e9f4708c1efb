"""Configuration, logging, storage and HTTP plumbing."""
