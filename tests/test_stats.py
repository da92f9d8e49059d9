import pytest

from sortbench.stats import Results, compute_results, write_csv


def test_empty_input_raises():
    with pytest.raises(ValueError):
        compute_results([])


def test_constant_times():
    result = compute_results([0.75, 0.75, 0.75, 0.75])
    assert result.avg_time == 0.75
    assert result.min_time == 0.75
    assert result.max_time == 0.75
    assert result.median_time == 0.75
    assert result.std_dev_time == 0.0


def test_odd_count_median_is_middle_value():
    result = compute_results([0.3, 0.1, 0.2])
    assert result.median_time == 0.2
    assert result.min_time == 0.1
    assert result.max_time == 0.3


def test_even_count_median_averages_middle_pair():
    result = compute_results([4.0, 1.0, 3.0, 2.0])
    assert result.median_time == 2.5
    assert result.avg_time == result.median_time


def test_instance_times_keep_input_order():
    times = [0.5, 0.125, 0.25]
    result = compute_results(iter(times))
    assert result.instance_times == tuple(times)


@pytest.mark.parametrize(
    "times",
    [[0.1], [0.2, 0.9], [0.01, 0.5, 0.03, 0.7, 0.2], [3.0, 1.0, 2.0, 8.0, 5.0, 1.0]],
)
def test_invariants(times):
    result = compute_results(times)
    assert result.min_time <= result.median_time <= result.max_time
    assert result.min_time <= result.avg_time <= result.max_time
    assert 0.0 <= result.std_dev_time <= result.max_time - result.min_time
    assert len(result.instance_times) == len(times)


def test_shift_leaves_deviation_unchanged():
    base = compute_results([1.0, 2.0, 4.0])
    shifted = compute_results([11.0, 12.0, 14.0])
    assert shifted.std_dev_time == pytest.approx(base.std_dev_time)
    assert shifted.avg_time == pytest.approx(base.avg_time + 10.0)


def test_write_csv_layout(tmp_path):
    result = compute_results([0.5, 0.25])
    path = tmp_path / "out.csv"
    write_csv(path, result)
    lines = path.read_text(encoding="utf-8").splitlines()
    assert lines[0] == "Instance no.;Time"
    assert lines[1] == "1;0.5"
    assert lines[2] == "2;0.25"
    labels = [line.split(";")[0] for line in lines[3:]]
    assert labels == [
        "Average Time:",
        "Minimum Time:",
        "Maximum Time:",
        "Median Time:",
        "Standard Deviation:",
    ]


def test_write_csv_summary_round_trip(tmp_path):
    result = compute_results([0.5, 0.25, 0.125, 1.0])
    path = tmp_path / "out.csv"
    write_csv(path, result)
    lines = path.read_text(encoding="utf-8").splitlines()
    assert len(lines) == 1 + len(result.instance_times) + 5
    summary = [float(line.split(";")[1]) for line in lines[-5:]]
    expected = [
        result.avg_time,
        result.min_time,
        result.max_time,
        result.median_time,
        result.std_dev_time,
    ]
    assert summary == pytest.approx(expected, rel=1e-5)


def test_write_csv_to_missing_directory_raises(tmp_path):
    result = Results(1.0, 1.0, 1.0, 1.0, 0.0, (1.0,))
    with pytest.raises(OSError):
        write_csv(tmp_path / "missing" / "out.csv", result)