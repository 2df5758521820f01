"""Common test fixtures."""

import pytest

from godocjson.docmodel import DocNote, DocPackage
from tests.support.helpers import group, ident, make_fileset, make_func, make_type, make_value, pos_of


@pytest.fixture
def fileset():
    return make_fileset("calc/add.go", "calc/mul.go", "calc/add_test.go")


@pytest.fixture
def package(fileset):
    """Small package spread over two source files."""
    add = pos_of(fileset, "calc/add.go", 1)
    mul = pos_of(fileset, "calc/mul.go", 1)
    number = make_type(
        "Number",
        add + 20 * 2,
        doc="Number is a value.\n",
        consts=(make_value("const", add + 20 * 4, "Zero", "One"),),
        funcs=(make_func("NewNumber", add + 20 * 6, results=(group(ident("Number")),)),),
        methods=(
            make_func(
                "Double",
                mul + 20 * 3,
                results=(group(ident("Number")),),
                recv="Number",
                orig="Number",
            ),
        ),
    )
    return DocPackage(
        doc="Package calc does arithmetic.\n",
        name="calc",
        import_path="example.com/calc",
        imports=("fmt",),
        filenames=("calc/add.go", "calc/mul.go"),
        notes={
            "BUG": (
                DocNote(pos=add + 20 * 8, end=add + 20 * 9, uid="rsc", body="Overflow is ignored.\n"),
                DocNote(pos=mul + 20 * 8, end=mul + 20 * 9, uid="gri", body="Mul is slow.\n"),
            ),
        },
        bugs=("Overflow is ignored.\n", "Mul is slow.\n"),
        consts=(make_value("const", add + 20, "Max"),),
        types=(number,),
        vars=(make_value("var", mul + 20, "Verbose"),),
        funcs=(
            make_func(
                "Add",
                add + 20 * 7,
                params=(group(ident("int"), "a", "b"),),
                results=(group(ident("int")),),
                doc="Add returns a+b.\n",
            ),
            make_func(
                "Mul",
                mul + 20 * 5,
                params=(group(ident("int"), "a", "b"),),
                results=(group(ident("int")),),
            ),
        ),
    )
