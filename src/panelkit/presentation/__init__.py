"""Presentation layer - templates, rendering environments and widgets."""
