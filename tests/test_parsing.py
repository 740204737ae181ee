import pytest

from exceptions import ParseError
from fixtures import REFERENCE_INPUT, REFERENCE_POINTS
from parsing import load_points, parse_line, parse_points


def test_parse_line():
    assert parse_line("1.5 -2 P7", 1) == (1.5, -2.0, "P7")


def test_parse_points_skips_blank_lines():
    assert parse_points("0 0 A\n\n  \n1 1 B\n") == [(0.0, 0.0, "A"), (1.0, 1.0, "B")]


def test_reference_input_parses():
    assert len(REFERENCE_POINTS) == 11
    assert REFERENCE_POINTS[0] == (40.0, 69.835013, "A")
    assert REFERENCE_POINTS[-1] == (100.952383, 197.45406, "K")


@pytest.mark.parametrize(
    "text, line_number",
    [
        ("0 0 A\n1 1\n", 2),
        ("0 0 A extra\n", 1),
        ("0 0 A\n\nabc 1 B\n", 3),
        ("0 nan A\n", 1),
        ("inf 0 A\n", 1),
    ],
)
def test_malformed_records_raise(text, line_number):
    with pytest.raises(ParseError) as excinfo:
        parse_points(text)
    assert excinfo.value.line_number == line_number


def test_load_text_file(tmp_path):
    path = tmp_path / "points.txt"
    path.write_text(REFERENCE_INPUT)
    assert load_points(path) == REFERENCE_POINTS


def test_load_csv(tmp_path):
    path = tmp_path / "points.csv"
    path.write_text("x,y,id\n0,0,A\n3.5,4,B\n")
    assert load_points(path) == [(0.0, 0.0, "A"), (3.5, 4.0, "B")]


def test_load_csv_missing_column(tmp_path):
    path = tmp_path / "points.csv"
    path.write_text("x,y\n0,0\n")
    with pytest.raises(ParseError):
        load_points(path)


def test_load_csv_bad_coordinate(tmp_path):
    path = tmp_path / "points.csv"
    path.write_text("x,y,id\n0,0,A\nfoo,1,B\n")
    with pytest.raises(ParseError) as excinfo:
        load_points(path)
    assert excinfo.value.line_number == 3
