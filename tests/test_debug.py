from kplfront.debug import (
    format_constant_value,
    format_object,
    format_scope,
    format_type,
)
from kplfront.symtab import (
    ParamKind,
    SymbolTable,
    make_array_type,
    make_char_constant,
    make_char_type,
    make_int_constant,
    make_int_type,
)


def test_basic_types():
    assert format_type(make_int_type()) == "Int"
    assert format_type(make_char_type()) == "Char"


def test_array_type():
    assert format_type(make_array_type(3, make_int_type())) == "Arr(3,Int)"


def test_nested_array_type_contains_inner():
    inner = make_array_type(2, make_char_type())
    outer = make_array_type(8, inner)
    text = format_type(outer)
    assert text.startswith("Arr(8,")
    assert format_type(inner) in text
    assert text.endswith("))")


def test_constant_values():
    assert format_constant_value(make_int_constant(17)) == "17"
    assert format_constant_value(make_char_constant("q")) == "'q'"


def test_constant_object_with_indent():
    tab = SymbolTable()
    const = tab.create_constant("C")
    const.value = make_int_constant(5)
    assert format_object(const, 2) == "  Const C = 5"


def test_parameter_kinds():
    tab = SymbolTable()
    proc = tab.create_procedure("P")
    by_value = tab.create_parameter("A", ParamKind.VALUE, proc)
    by_value.type = make_int_type()
    by_ref = tab.create_parameter("B", ParamKind.REFERENCE, proc)
    by_ref.type = make_char_type()
    assert format_object(by_value, 0).startswith("Param A : ")
    assert format_object(by_ref, 0).startswith("Param VAR B : ")
    assert format_object(by_ref, 0).endswith(format_type(make_char_type()))


def test_program_listing():
    tab = SymbolTable()
    program = tab.create_program("DEMO")
    tab.enter_block(program.scope)
    var = tab.create_variable("X")
    var.type = make_int_type()
    tab.declare(var)
    expected = "Program DEMO\n    Var X : Int\n"
    assert format_object(program, 0) == expected


def test_nested_function_indentation():
    tab = SymbolTable()
    program = tab.create_program("DEMO")
    tab.enter_block(program.scope)
    func = tab.create_function("F")
    func.type = make_char_type()
    tab.declare(func)
    tab.enter_block(func.scope)
    var = tab.create_variable("Y")
    var.type = make_int_type()
    tab.declare(var)
    tab.exit_block()

    lines = format_scope(program.scope, 4).split("\n")
    assert lines[0] == " " * 4 + "Function F : Char"
    assert lines[1] == " " * 8 + format_object(var, 0)


def test_scope_has_one_line_per_simple_object():
    tab = SymbolTable()
    program = tab.create_program("DEMO")
    tab.enter_block(program.scope)
    for name in ("A", "B", "C"):
        obj = tab.create_type(name)
        obj.type = make_int_type()
        tab.declare(obj)
    text = format_scope(program.scope, 0)
    assert text.count("\n") == 3
    assert text.splitlines() == [format_object(o, 0) for o in program.scope.objects]