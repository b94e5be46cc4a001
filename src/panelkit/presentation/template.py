"""
Template - logic-free string templates with named placeholders.

A template is compiled once from literal fragments and rendered any number of
times against different value sources. Placeholders are written in curly
braces, e.g. ``{title}`` or ``{config.title}``. There are no loops or
conditionals.
"""

import re
from collections.abc import Mapping
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field

# Placeholder identifiers: name segments joined by dots.
# Brace groups that do not match (CSS rules, JSON) are left as literal text.
PLACEHOLDER_PATTERN = re.compile(r"\{([A-Za-z_][A-Za-z0-9_]*(?:\.[A-Za-z_][A-Za-z0-9_]*)*)\}")


class TemplateOptions(BaseModel):
    """Options overriding a template's defaults."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    empty_value: str = Field(default="", description="Substituted for missing or None values")
    separator: str = Field(default="\n", description="Joins the fragments of the template")


class Template:
    """
    A compiled template.

    Examples:
        >>> Template("<h3>{title}</h3>").render({"title": "Layers"})
        '<h3>Layers</h3>'
        >>> Template("<a>{x}</a>", "{x}", {"separator": ""}).render({"x": "Z"})
        '<a>Z</a>Z'
    """

    def __init__(self, *fragments: Any):
        """
        Compile fragments into a template.

        Args:
            fragments: Strings forming the template, joined with the
                separator. A trailing mapping is not content but options
                (see :class:`TemplateOptions`).

        Raises:
            TypeError: If a fragment is not a string
            pydantic.ValidationError: If the options are invalid
        """
        parts = list(fragments)
        overrides: Mapping[str, Any] = {}
        if parts and isinstance(parts[-1], Mapping):
            overrides = parts.pop()

        for part in parts:
            if not isinstance(part, str):
                raise TypeError(f"Template fragments must be strings, got {type(part).__name__}")

        self._options = TemplateOptions(**overrides)
        self._text = self._options.separator.join(parts) if parts else self._options.empty_value

    @classmethod
    def compile(cls, *fragments: Any) -> "Template":
        """Same as the constructor; reads better at module level."""
        return cls(*fragments)

    @property
    def text(self) -> str:
        """The compiled template text."""
        return self._text

    @property
    def options(self) -> TemplateOptions:
        return self._options

    @property
    def placeholders(self) -> list[str]:
        """Distinct placeholder identifiers, in order of first appearance."""
        return list(dict.fromkeys(PLACEHOLDER_PATTERN.findall(self._text)))

    def render(self, values: Any) -> str:
        """
        Render this template.

        Args:
            values: Source of placeholder values. Mappings are read by key,
                any other object by attribute. Dotted identifiers walk nested
                values one segment at a time.

        Returns:
            The template text with every placeholder replaced. Missing and
            None values become the empty value.
        """
        resolved: dict[str, str] = {}

        def substitute(match: re.Match) -> str:
            identifier = match.group(1)
            if identifier not in resolved:
                value = _lookup(values, identifier)
                resolved[identifier] = self._options.empty_value if value is None else str(value)
            return resolved[identifier]

        return PLACEHOLDER_PATTERN.sub(substitute, self._text)

    def __str__(self) -> str:
        return self._text

    def __repr__(self) -> str:
        return f"Template({self._text!r})"


def _lookup(source: Any, identifier: str) -> Optional[Any]:
    value = source
    for segment in identifier.split("."):
        if value is None:
            return None
        if isinstance(value, Mapping):
            value = value.get(segment)
        else:
            value = getattr(value, segment, None)
    return value
