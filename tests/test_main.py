import logging

import pytest

from main import build_parser, format_point, main
from ecc import Point


def test_defaults():
    args = build_parser().parse_args([])
    assert (args.a, args.b, args.prime) == (1, 1, 599)
    assert args.base == [5, 1]
    assert args.steps == 21
    assert not args.list_points

def test_format_point():
    assert format_point(Point(5, 1, 2, 2, 17)) == "(5, 1)"
    assert format_point(Point.infinity(2, 2, 17)) == "O"

def test_small_curve_output(capsys):
    main(["-a", "2", "-b", "2", "-p", "17", "--base", "5", "1", "-n", "3", "--list-points"])
    out = capsys.readouterr().out
    assert "y^2 = x^3 + 2x + 2 mod 17" in out
    assert "Affine points: 18 (group order 19)" in out
    assert "(5, 16)" in out
    assert "2^1 * P = (6, 3)" in out
    assert "2^2 * P = (3, 1)" in out
    assert "2^3 * P = (13, 7)" in out
    assert "Last step: (13, 7)" in out

def test_reference_run_warns_about_off_curve_base(capsys, caplog):
    with caplog.at_level(logging.WARNING):
        main(["-n", "2"])
    out = capsys.readouterr().out
    assert "Base point P: (5, 1)" in out
    assert "2^2 * P = " in out
    assert "not on the curve" in caplog.text

def test_zero_steps(capsys):
    main(["-a", "2", "-b", "2", "-p", "17", "-n", "0"])
    out = capsys.readouterr().out
    assert "2^1" not in out
    assert "Last step" not in out

@pytest.mark.parametrize("argv", [["-p", "600"], ["-p", "1"], ["-n", "-1"]])
def test_invalid_arguments_exit(argv):
    with pytest.raises(SystemExit) as exc:
        main(argv)
    assert exc.value.code == 2
