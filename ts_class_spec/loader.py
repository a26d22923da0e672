"""
Build class specifications from JSON-shaped documents.

A document looks like:

    {
      "classes": [
        {
          "name": "Point",
          "modifiers": ["export"],
          "properties": [{"name": "x", "type": "number"}],
          "constructor": {
            "parameters": [{"name": "x", "type": "number"}],
            "body": "this.x = x;\\n"
          }
        }
      ]
    }
"""

from __future__ import annotations

from typing import Any

from .class_spec import ClassSpec
from .code_block import CodeBlock
from .decorator_spec import DecoratorSpec
from .errors import ClassSpecError
from .function_spec import FunctionSpec
from .modifier import Modifier
from .parameter_spec import ParameterSpec
from .property_spec import PropertySpec
from .type_names import TypeVariable, any_type_maybe_string


def _require_name(d: dict[str, Any], kind: str) -> str:
    name = d.get("name")
    if not name:
        raise ClassSpecError(f"Missing 'name' in {kind}: {d!r}")
    return name


def _modifiers(d: dict[str, Any]) -> tuple[Modifier, ...]:
    try:
        return tuple(Modifier.from_keyword(m) for m in d.get("modifiers", []))
    except ValueError as e:
        raise ClassSpecError(str(e)) from e


def _decorators(d: dict[str, Any]) -> tuple[DecoratorSpec, ...]:
    decorators = []
    for item in d.get("decorators", []):
        decorator = DecoratorSpec.create(_require_name(item, "decorator"))
        for argument in item.get("arguments", []):
            decorator = decorator.add_argument("%L", argument)
        if item.get("factory"):
            decorator = decorator.as_factory()
        decorators.append(decorator)
    return tuple(decorators)


def _type_variables(d: dict[str, Any]) -> tuple[TypeVariable, ...]:
    return tuple(
        TypeVariable(_require_name(item, "type variable"), tuple(any_type_maybe_string(b) for b in item.get("bounds", [])))
        for item in d.get("typeVariables", [])
    )


def load_parameter_spec(d: dict[str, Any]) -> ParameterSpec:
    param = ParameterSpec(
        name=_require_name(d, "parameter"),
        type=any_type_maybe_string(d["type"]) if d.get("type") else None,
        optional=bool(d.get("optional", False)),
        decorators=_decorators(d),
        modifiers=_modifiers(d),
    )
    if "default" in d:
        param = param.default_value("%L", d["default"])
    return param


def load_property_spec(d: dict[str, Any]) -> PropertySpec:
    if not d.get("type"):
        raise ClassSpecError(f"Missing 'type' in property: {d!r}")
    prop = PropertySpec(
        name=_require_name(d, "property"),
        type=any_type_maybe_string(d["type"]),
        optional=bool(d.get("optional", False)),
        decorators=_decorators(d),
        modifiers=_modifiers(d),
    )
    if d.get("doc"):
        prop = prop.add_doc("%L", d["doc"])
    if d.get("initializer") is not None:
        prop = prop.with_initializer("%L", d["initializer"])
    return prop


def load_function_spec(d: dict[str, Any], is_constructor: bool = False) -> FunctionSpec:
    spec = FunctionSpec.constructor_builder() if is_constructor else FunctionSpec.create(_require_name(d, "function"))
    spec = spec.add_decorators(*_decorators(d)).add_modifiers(*_modifiers(d)).add_type_variables(*_type_variables(d))
    if d.get("doc"):
        spec = spec.add_doc("%L", d["doc"])
    spec = spec.add_parameters(*(load_parameter_spec(p) for p in d.get("parameters", [])))
    if d.get("restParameter"):
        spec = spec.rest(load_parameter_spec(d["restParameter"]))
    if d.get("returnType") and not is_constructor:
        spec = spec.returns(d["returnType"])
    if d.get("body") is not None:
        spec = spec.with_body(CodeBlock(d["body"]))
    return spec


def load_class_spec(d: dict[str, Any]) -> ClassSpec:
    """Build a ClassSpec from a single class document."""
    spec = ClassSpec.create(_require_name(d, "class"))
    if d.get("doc"):
        spec = spec.add_doc("%L", d["doc"])
    spec = spec.add_decorators(*_decorators(d)).add_modifiers(*_modifiers(d)).add_type_variables(*_type_variables(d))
    if d.get("superclass"):
        spec = spec.superclass(d["superclass"])
    spec = spec.add_interfaces(d.get("interfaces", []))
    spec = spec.add_properties(*(load_property_spec(p) for p in d.get("properties", [])))
    if d.get("constructor") is not None:
        spec = spec.constructor(load_function_spec(d["constructor"], is_constructor=True))
    for overload in d.get("constructorOverloads", []):
        spec = spec.add_constructor_overload(load_function_spec(overload, is_constructor=True))
    spec = spec.add_functions(*(load_function_spec(f) for f in d.get("functions", [])))
    return spec


def load_class_specs(document: dict[str, Any]) -> list[ClassSpec]:
    """Build every class of a `{"classes": [...]}` document."""
    if "classes" not in document:
        raise ClassSpecError("Document has no 'classes' list")
    return [load_class_spec(d) for d in document["classes"]]
