"""Shared helpers for sqlwrap."""
