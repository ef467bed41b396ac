"""Configuration, errors and CLI plumbing shared across logkeeper."""
