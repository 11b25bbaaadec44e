"""Shared plumbing: configuration, exceptions, logging, CLI."""
