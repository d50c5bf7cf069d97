"""Textual application, configuration and CLI for cadence."""
