"""Model NewTypes and aliases to disambiguate multi-usage types."""

from typing import NewType

type ArgumentList = tuple[str, ...]
"""Ordered command line tokens, one option or value per element."""

TargetName = NewType("TargetName", str)
"""Derived from str to represent specifically the name of a configured target."""
