import pytest

from philosophers.cli import main
from philosophers.simulation import ALL_FED, DIED


@pytest.mark.parametrize(
    ("argv", "message"),
    [
        (["5", "800"], "Error: wrong number of arguments"),
        (["5", "800", "200", "200", "7", "9"], "Error: wrong number of arguments"),
        (["5", "abc", "200", "200"], "Error: some inputs not digit !"),
        (["0", "800", "200", "200"], "Error: Negative or null value for philosophers"),
        (["201", "800", "200", "200"], "Error: too many philosophers"),
        (["5", "800", "59", "200"], "Error: values lower than 60 ms."),
        (
            ["5", "800", "200", "200", "0"],
            "Error: bad values for number_of_times_each_philosopher",
        ),
    ],
)
def test_invalid_arguments(capsys, argv, message):
    assert main(argv) == 1
    assert capsys.readouterr().out == message + "\n"


def test_run_until_fed(capsys):
    assert main(["3", "800", "60", "60", "1"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[-1] == ALL_FED


def test_run_until_death(capsys):
    assert main(["1", "100", "60", "60"]) == 0
    out = capsys.readouterr().out
    assert out.count(DIED) == 1
    assert out.endswith(DIED + "\n")