"""Raw property attributes as produced by an rfc5545 content line tokenizer.

A property is the definition of an individual attribute describing a
calendar object or a calendar component. A tokenizer (not part of this
library) unfolds the content lines of a document and splits each line into
a name, a list of parameters and a value string, without interpreting the
meaning of any of them.

For example, given a content line of:

  DUE;VALUE=DATE:20070501

A tokenizer would produce a ParsedProperty with this structure:

  ParsedProperty(
    name='due',
    value='20070501',
    params=[
        ParsedPropertyParameter(
            name='VALUE',
            values=['DATE']
        )
    ]
  }

These objects are the input consumed by the PropertyBuilder, which turns them
into typed properties.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Optional


@dataclass
class ParsedPropertyParameter:
    """An rfc5545 property parameter."""

    name: str

    values: Sequence[str]
    """Parameter values, more than one when comma separated in the content line."""


@dataclass
class ParsedProperty:
    """An rfc5545 property."""

    name: str
    value: str
    params: Optional[list[ParsedPropertyParameter]] = None
