"""Text rendering of types, constants, objects and scopes."""

from __future__ import annotations

from .symtab import ConstantValue, ObjectKind, ParamKind, Scope, SymbolObject, Type, TypeClass


def format_type(type_: Type) -> str:
    """Render a type as ``Int``, ``Char`` or ``Arr(size,element)``."""
    if type_.type_class is TypeClass.INT:
        return "Int"
    if type_.type_class is TypeClass.CHAR:
        return "Char"
    assert type_.element_type is not None
    return f"Arr({type_.array_size},{format_type(type_.element_type)})"


def format_constant_value(value: ConstantValue) -> str:
    """Render an integer constant as digits and a char constant in quotes."""
    if value.type is TypeClass.INT:
        return str(value.value)
    if value.type is TypeClass.CHAR:
        return f"'{value.value}'"
    return ""


def _type_text(type_: Type | None) -> str:
    return "" if type_ is None else format_type(type_)


def format_object(obj: SymbolObject, indent: int) -> str:
    """Render one object; subroutines and programs include their block."""
    pad = " " * indent
    kind = obj.kind
    if kind is ObjectKind.CONSTANT:
        value = "" if obj.value is None else format_constant_value(obj.value)
        return f"{pad}Const {obj.name} = {value}"
    if kind is ObjectKind.TYPE:
        return f"{pad}Type {obj.name} = {_type_text(obj.type)}"
    if kind is ObjectKind.VARIABLE:
        return f"{pad}Var {obj.name} : {_type_text(obj.type)}"
    if kind is ObjectKind.PARAMETER:
        label = "Param" if obj.param_kind is ParamKind.VALUE else "Param VAR"
        return f"{pad}{label} {obj.name} : {_type_text(obj.type)}"
    body = "" if obj.scope is None else format_scope(obj.scope, indent + 4)
    if kind is ObjectKind.FUNCTION:
        return f"{pad}Function {obj.name} : {_type_text(obj.type)}\n{body}"
    if kind is ObjectKind.PROCEDURE:
        return f"{pad}Procedure {obj.name}\n{body}"
    return f"{pad}Program {obj.name}\n{body}"


def format_scope(scope: Scope, indent: int) -> str:
    """Render every object of a block, each followed by a newline."""
    return "".join(format_object(obj, indent) + "\n" for obj in scope.objects)