"""
Type references used for superclasses, interfaces, fields and parameters.

All type names are immutable and compare structurally, so two references
spelled the same way are equal.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class TypeName:
    """Base class for all type references."""

    def reference(self) -> str:
        raise NotImplementedError

    def __str__(self) -> str:
        return self.reference()


@dataclass(frozen=True)
class ClassName(TypeName):
    """A named type such as `number` or `Shape`."""

    name: str = ""

    def reference(self) -> str:
        return self.name


@dataclass(frozen=True)
class ParameterizedTypeName(TypeName):
    """A generic type applied to arguments, e.g. `Map<string, number>`."""

    raw_type: TypeName = ClassName()
    type_args: tuple[TypeName, ...] = ()

    def reference(self) -> str:
        args = ", ".join(arg.reference() for arg in self.type_args)
        return f"{self.raw_type.reference()}<{args}>"


@dataclass(frozen=True)
class UnionTypeName(TypeName):
    """A union of types, e.g. `string | null`."""

    types: tuple[TypeName, ...] = ()

    def reference(self) -> str:
        return " | ".join(t.reference() for t in self.types)


@dataclass(frozen=True)
class TypeVariable(TypeName):
    """A generic type variable, optionally bounded."""

    name: str = ""
    bounds: tuple[TypeName, ...] = ()

    def reference(self) -> str:
        return self.name

    def bound_reference(self) -> str:
        """Declaration form used inside `<...>`, e.g. `T extends A & B`."""
        if not self.bounds:
            return self.name
        return f"{self.name} extends {' & '.join(b.reference() for b in self.bounds)}"


ANY = ClassName("any")
NUMBER = ClassName("number")
STRING = ClassName("string")
BOOLEAN = ClassName("boolean")
VOID = ClassName("void")
UNDEFINED = ClassName("undefined")
NULL = ClassName("null")


def any_type_maybe_string(value: TypeName | str) -> TypeName:
    """Accept either a TypeName or a plain type string."""
    if isinstance(value, TypeName):
        return value
    if isinstance(value, str):
        return ClassName(value)
    raise TypeError(f"Expected a TypeName or str, got {type(value).__name__}")


def array_type(of: TypeName | str) -> ParameterizedTypeName:
    return ParameterizedTypeName(ClassName("Array"), (any_type_maybe_string(of),))


def type_variable(name: str, *bounds: TypeName | str) -> TypeVariable:
    return TypeVariable(name, tuple(any_type_maybe_string(b) for b in bounds))


def union(*types: TypeName | str) -> UnionTypeName:
    return UnionTypeName(tuple(any_type_maybe_string(t) for t in types))
