"""
Constructor property promotion.

TypeScript lets a constructor parameter declare a field directly
(`constructor(public x: number) {}`), replacing a field declaration plus
a `this.x = x;` statement. This module decides which declared properties
can be collapsed that way and rewrites the constructor body accordingly.

A property is promoted only when all of these hold:

- the constructor has a body and a regular (non-rest) parameter with the same name
- the parameter's type and optionality equal the property's
- the property has no initializer
- the body contains `this.<name> = <name>` as a standalone statement

Anything else leaves the property as an ordinary field.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import Iterable

from .code_block import CodeBlock
from .function_spec import FunctionSpec
from .property_spec import PropertySpec

logger = logging.getLogger(__name__)

_HORIZONTAL_SPACE = r"[ \t\x0b\f\r]"


def property_init_pattern(name: str) -> re.Pattern:
    """
    Build the pattern matching `this.<name> = <name>` as a whole statement.

    The statement must start the body or follow a newline or semicolon,
    may be preceded by whitespace, and must end the body or be followed by
    a newline or semicolon. The `keep` group holds the boundary plus any
    line breaks before the statement and is restored on removal, so only
    the statement itself disappears. A semicolon terminator also swallows
    the rest of its line.
    """
    escaped = re.escape(name)
    return re.compile(
        rf"(?P<keep>(?:\A|\n|;)(?:\s*\n)?)[^\S\n]*this\.{escaped} = {escaped}{_HORIZONTAL_SPACE}*"
        rf"(?:;{_HORIZONTAL_SPACE}*\n?|\n|\Z)"
    )


def _rejection_reason(prop: PropertySpec, constructor: FunctionSpec, body: str) -> str | None:
    parameter = constructor.parameter(prop.name)
    if parameter is None:
        return "no constructor parameter with that name"
    if parameter.type != prop.type:
        return f"parameter type {parameter.type} differs from property type {prop.type}"
    if parameter.optional != prop.optional:
        return "parameter and property optionality differ"
    if prop.initializer is not None:
        return "property has an initializer"
    if not property_init_pattern(prop.name).search(body):
        return f"constructor body has no 'this.{prop.name} = {prop.name}' statement"
    return None


def constructor_properties(properties: Iterable[PropertySpec], constructor: FunctionSpec | None) -> dict[str, PropertySpec]:
    """Return the properties that can be declared inline as constructor parameters, keyed by name."""
    if constructor is None or constructor.body is None:
        return {}

    body = str(constructor.body)
    result: dict[str, PropertySpec] = {}
    seen: set[str] = set()
    for prop in properties:
        # Only the first property with a given name is a candidate
        if prop.name in seen:
            continue
        seen.add(prop.name)

        reason = _rejection_reason(prop, constructor, body)
        if reason is not None:
            logger.debug("Property '%s' kept as a field: %s", prop.name, reason)
            continue
        result[prop.name] = prop
    return result


def strip_property_inits(body: CodeBlock, properties: Iterable[PropertySpec]) -> CodeBlock:
    """Remove the `this.<name> = <name>` statement of each given property from `body`."""
    for prop in properties:
        body = body.remove(property_init_pattern(prop.name))
    return body


@dataclass(frozen=True)
class Promotion:
    """Outcome of promotion analysis for one class."""

    # Promoted properties by name, in declaration order
    promoted: dict[str, PropertySpec] = field(default_factory=dict)

    # Constructor body with the promoted init statements removed
    body: CodeBlock | None = None

    def promoted_parameter(self, name: str) -> PropertySpec | None:
        return self.promoted.get(name)

    def fields(self, properties: Iterable[PropertySpec]) -> list[PropertySpec]:
        """Properties that still need a standalone field declaration."""
        return [prop for prop in properties if prop.name not in self.promoted]


def analyze(properties: Iterable[PropertySpec], constructor: FunctionSpec | None) -> Promotion:
    properties = list(properties)
    promoted = constructor_properties(properties, constructor)
    if constructor is None:
        return Promotion(promoted, None)
    body = constructor.body
    if body is not None and promoted:
        body = strip_property_inits(body, promoted.values())
    if promoted:
        logger.debug("Promoted constructor properties: %s", ", ".join(promoted))
    return Promotion(promoted, body)
