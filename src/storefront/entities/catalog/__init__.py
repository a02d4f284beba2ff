"""Catalog entities: products, channels, platforms and site configuration."""
