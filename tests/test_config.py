import pytest

from sortbench.config import Config, DataType, Direction, Mode, load_config, parse_config

SAMPLE = (
    "0\t\t#mode:\n"
    "10000\t#size\n"
    "0\t\t#algorithm: 0-heapsort, 1-insertion sort, 2-quicksort, 3-binary insert sort\n"
    "33\t\t#amount: sorted in %\n"
    "0\t\t#data type: 0-int, 1-float\n"
    "100\t\t#instance amount\n"
    "0\t\t#direction: 0-random, 1-ascending, 2-descending\n"
)


def test_parse_sample_config():
    config = parse_config(SAMPLE)
    assert config == Config(
        mode=0,
        size=10000,
        algorithm=0,
        amount_sorted=33,
        data_type=0,
        instance_amount=100,
        direction=0,
    )


def test_comment_and_empty_lines_are_skipped():
    text = "# header\n\n1\n# note\n20\n2\n\n50\n1\n7\n2\n"
    config = parse_config(text)
    assert config.mode == Mode.SIMULATION
    assert config.size == 20
    assert config.algorithm == 2
    assert config.amount_sorted == 50
    assert config.data_type == DataType.FLOAT
    assert config.instance_amount == 7
    assert config.direction == Direction.DESCENDING


def test_lines_without_leading_integer_are_ignored():
    text = "mode\n0\n  # indented comment\n5\n1\n0\n0\n3\n1\n"
    config = parse_config(text)
    assert config.size == 5
    assert config.algorithm == 1
    assert config.direction == 1


def test_leading_whitespace_and_sign():
    text = "  1\n +8\n-1\n0\n0\n2\n0\n"
    config = parse_config(text)
    assert config.mode == 1
    assert config.size == 8
    assert config.algorithm == -1


def test_extra_values_are_ignored():
    config = parse_config(SAMPLE + "99\n42\n")
    assert config == parse_config(SAMPLE)


def test_too_few_values_raise():
    with pytest.raises(ValueError):
        parse_config("0\n10\n2\n")


def test_load_config_reads_file(tmp_path):
    path = tmp_path / "config.txt"
    path.write_text(SAMPLE, encoding="utf-8")
    assert load_config(path) == parse_config(SAMPLE)


def test_load_config_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "absent.txt")


def test_enum_numbering_matches_file_format():
    assert Mode(1) is Mode.SIMULATION
    assert DataType(1) is DataType.FLOAT
    assert Direction(2) is Direction.DESCENDING
    assert [Mode(v).value for v in (0, 1)] == [0, 1]
    assert [DataType(v).value for v in (0, 1)] == [0, 1]
    assert [Direction(v).value for v in (0, 1, 2)] == [0, 1, 2]
    with pytest.raises(ValueError):
        Direction(3)