"""Symbol table: types, constants, declared objects and nested scopes."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import Enum, auto


class TypeClass(Enum):
    """Kind of a type."""

    INT = auto()
    CHAR = auto()
    ARRAY = auto()


class ObjectKind(Enum):
    """Kind of a declared object."""

    CONSTANT = auto()
    VARIABLE = auto()
    TYPE = auto()
    FUNCTION = auto()
    PROCEDURE = auto()
    PARAMETER = auto()
    PROGRAM = auto()


class ParamKind(Enum):
    """How a parameter is passed."""

    VALUE = auto()
    REFERENCE = auto()


@dataclass
class Type:
    """A type; arrays carry their size and element type.

    Two types compare equal when they have the same structure.
    """

    type_class: TypeClass
    array_size: int = 0
    element_type: Type | None = None

    def duplicate(self) -> Type:
        """Return a deep copy of this type."""
        if self.type_class is TypeClass.ARRAY:
            assert self.element_type is not None
            return Type(TypeClass.ARRAY, self.array_size, self.element_type.duplicate())
        return Type(self.type_class)


def make_int_type() -> Type:
    """Return a new integer type."""
    return Type(TypeClass.INT)


def make_char_type() -> Type:
    """Return a new char type."""
    return Type(TypeClass.CHAR)


def make_array_type(array_size: int, element_type: Type) -> Type:
    """Return a new array type of ``array_size`` elements of ``element_type``."""
    return Type(TypeClass.ARRAY, array_size, element_type)


@dataclass
class ConstantValue:
    """A constant of integer or char type."""

    type: TypeClass
    value: int | str

    def duplicate(self) -> ConstantValue:
        """Return a copy of this constant."""
        return ConstantValue(self.type, self.value)


def make_int_constant(value: int) -> ConstantValue:
    """Return an integer constant."""
    return ConstantValue(TypeClass.INT, value)


def make_char_constant(ch: str) -> ConstantValue:
    """Return a char constant holding the single character ``ch``."""
    if len(ch) != 1:
        raise ValueError(f"expected a single character, got {ch!r}")
    return ConstantValue(TypeClass.CHAR, ch)


@dataclass(eq=False)
class Scope:
    """A block: the objects declared in it, its owner and the enclosing block."""

    owner: SymbolObject | None
    outer: Scope | None
    objects: list[SymbolObject] = field(default_factory=list)


@dataclass(eq=False)
class SymbolObject:
    """A declared name together with the attributes its kind uses.

    ``value`` is set for constants; ``type`` is the actual type of a type
    declaration, the type of a variable or parameter, or the return type of a
    function; ``scope`` is the block a function, procedure or program opens;
    ``declared_in`` is the block a variable belongs to; ``params`` lists the
    parameters of a function or procedure; ``param_kind`` and ``owner``
    describe a parameter.
    """

    name: str
    kind: ObjectKind
    value: ConstantValue | None = None
    type: Type | None = None
    scope: Scope | None = None
    declared_in: Scope | None = None
    params: list[SymbolObject] = field(default_factory=list)
    param_kind: ParamKind | None = None
    owner: SymbolObject | None = None


def find_object(objects: Iterable[SymbolObject], name: str) -> SymbolObject | None:
    """Return the first object called ``name`` in ``objects``, or ``None``."""
    return next((obj for obj in objects if obj.name == name), None)


class SymbolTable:
    """The program object, the current block and the predefined subroutines."""

    def __init__(self) -> None:
        self.program: SymbolObject | None = None
        self.current_scope: Scope | None = None
        self.global_objects: list[SymbolObject] = []

        readc = self.create_function("READC")
        readc.type = make_char_type()
        self.global_objects.append(readc)

        readi = self.create_function("READI")
        readi.type = make_int_type()
        self.global_objects.append(readi)

        writei = self.create_procedure("WRITEI")
        param = self.create_parameter("i", ParamKind.VALUE, writei)
        param.type = make_int_type()
        writei.params.append(param)
        self.global_objects.append(writei)

        writec = self.create_procedure("WRITEC")
        param = self.create_parameter("ch", ParamKind.VALUE, writec)
        param.type = make_char_type()
        writec.params.append(param)
        self.global_objects.append(writec)

        self.global_objects.append(self.create_procedure("WRITELN"))

        self.int_type = make_int_type()
        self.char_type = make_char_type()

    def create_program(self, name: str) -> SymbolObject:
        """Create the program object, with its own outermost block."""
        program = SymbolObject(name, ObjectKind.PROGRAM)
        program.scope = Scope(program, None)
        self.program = program
        return program

    def create_constant(self, name: str) -> SymbolObject:
        """Create a constant object; its value is set by the caller."""
        return SymbolObject(name, ObjectKind.CONSTANT)

    def create_type(self, name: str) -> SymbolObject:
        """Create a type object; its actual type is set by the caller."""
        return SymbolObject(name, ObjectKind.TYPE)

    def create_variable(self, name: str) -> SymbolObject:
        """Create a variable belonging to the current block."""
        return SymbolObject(name, ObjectKind.VARIABLE, declared_in=self.current_scope)

    def create_function(self, name: str) -> SymbolObject:
        """Create a function whose block is nested in the current block."""
        obj = SymbolObject(name, ObjectKind.FUNCTION)
        obj.scope = Scope(obj, self.current_scope)
        return obj

    def create_procedure(self, name: str) -> SymbolObject:
        """Create a procedure whose block is nested in the current block."""
        obj = SymbolObject(name, ObjectKind.PROCEDURE)
        obj.scope = Scope(obj, self.current_scope)
        return obj

    def create_parameter(
        self, name: str, kind: ParamKind, owner: SymbolObject
    ) -> SymbolObject:
        """Create a parameter of ``owner`` passed as ``kind``."""
        return SymbolObject(name, ObjectKind.PARAMETER, param_kind=kind, owner=owner)

    def enter_block(self, scope: Scope) -> None:
        """Make ``scope`` the current block."""
        self.current_scope = scope

    def exit_block(self) -> None:
        """Return to the block enclosing the current one."""
        if self.current_scope is None:
            raise RuntimeError("no block to exit")
        self.current_scope = self.current_scope.outer

    def lookup(self, name: str) -> SymbolObject | None:
        """Find ``name`` in the current block, its enclosing blocks, then globals."""
        scope = self.current_scope
        while scope is not None:
            obj = find_object(scope.objects, name)
            if obj is not None:
                return obj
            scope = scope.outer
        return find_object(self.global_objects, name)

    def declare(self, obj: SymbolObject) -> None:
        """Add ``obj`` to the current block; parameters also join their owner's list."""
        if self.current_scope is None:
            raise RuntimeError("no current block to declare in")
        if obj.kind is ObjectKind.PARAMETER:
            owner = self.current_scope.owner
            if owner is not None and owner.kind in (
                ObjectKind.FUNCTION,
                ObjectKind.PROCEDURE,
            ):
                owner.params.append(obj)
        self.current_scope.objects.append(obj)