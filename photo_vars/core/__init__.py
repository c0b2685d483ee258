"""Metadata records, system context, logging and string helpers."""
