import pytest
from pydantic import ValidationError

from godocjson.exceptions import PositionError
from godocjson.fileset import NO_POS, FileSet, Position, SourceFile


@pytest.fixture
def fs():
    return FileSet(
        files=(
            SourceFile(name="a.go", base=1, size=30, lines=(0, 10, 25)),
            SourceFile(name="b.go", base=32, size=9, lines=(0, 4)),
        )
    )


def test_position_first_byte(fs):
    assert fs.position(1) == Position(filename="a.go", line=1, column=1)


def test_position_line_and_column(fs):
    assert fs.position(1 + 12) == Position(filename="a.go", line=2, column=3)
    assert fs.position(1 + 25) == Position(filename="a.go", line=3, column=1)


def test_position_end_of_file_is_valid(fs):
    assert fs.position(1 + 30).filename == "a.go"


def test_position_second_file(fs):
    assert fs.position(32) == Position(filename="b.go", line=1, column=1)
    assert fs.position(37) == Position(filename="b.go", line=2, column=2)


def test_position_str(fs):
    assert str(fs.position(37)) == "b.go:2:2"


def test_no_pos_rejected(fs):
    with pytest.raises(PositionError) as exc_info:
        fs.position(NO_POS)
    assert exc_info.value.pos == NO_POS


def test_gap_between_files_rejected(fs):
    with pytest.raises(PositionError) as exc_info:
        fs.position(500)
    assert "500" in str(exc_info.value)


def test_file_lookup(fs):
    assert fs.file(33).name == "b.go"


def test_line_table_must_start_at_zero():
    with pytest.raises(ValidationError):
        SourceFile(name="a.go", base=1, size=10, lines=(3, 5))


def test_line_table_must_increase():
    with pytest.raises(ValidationError):
        SourceFile(name="a.go", base=1, size=10, lines=(0, 5, 5))


def test_base_must_be_positive():
    with pytest.raises(ValidationError):
        SourceFile(name="a.go", base=0, size=10)


def test_overlapping_files_rejected():
    with pytest.raises(ValidationError):
        FileSet(
            files=(
                SourceFile(name="a.go", base=1, size=10),
                SourceFile(name="b.go", base=5, size=10),
            )
        )
