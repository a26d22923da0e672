"""TypeScript Class Spec

Immutable, composable descriptions of TypeScript class declarations and
the emitter that renders them into source text, collapsing fields into
constructor parameter properties where the constructor allows it.
"""

__version__ = "1.0.0"

from .class_spec import ClassSpec
from .code_block import CodeBlock
from .code_writer import CodeWriter
from .config import CodeWriterConfig
from .decorator_spec import DecoratorSpec
from .errors import ClassSpecError
from .function_spec import FunctionSpec
from .modifier import Modifier
from .parameter_spec import ParameterSpec
from .property_spec import PropertySpec
from .type_names import ClassName, ParameterizedTypeName, TypeName, TypeVariable, UnionTypeName

__all__ = [
    "ClassSpec",
    "ClassSpecError",
    "ClassName",
    "CodeBlock",
    "CodeWriter",
    "CodeWriterConfig",
    "DecoratorSpec",
    "FunctionSpec",
    "Modifier",
    "ParameterSpec",
    "ParameterizedTypeName",
    "PropertySpec",
    "TypeName",
    "TypeVariable",
    "UnionTypeName",
]
