"""Dropbox API v2 client package."""
