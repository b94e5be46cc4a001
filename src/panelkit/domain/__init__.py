"""Domain layer - abstractions shared by every component.

This layer contains:
- events: the Observable registry and its binding types
- protocols: the rendering environment interface
- types: shared enums such as PanelState
- exceptions: lifecycle errors

The domain layer has NO dependencies on the presentation layer.
"""
