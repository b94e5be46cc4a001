"""Rendering environments implementing the RenderEnvironment protocol."""

from .soup import SoupEnvironment

__all__ = ["SoupEnvironment"]
