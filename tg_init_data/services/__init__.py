"""Pluggable collaborators and the configured initData service."""
