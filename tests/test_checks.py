import pytest

from orbitsim.checks import DEFAULT_TOLERANCE, UnitTest, close_enough


def test_default_tolerance_bounds_close_enough():
    assert close_enough(0.0, DEFAULT_TOLERANCE * 0.9) is True
    assert close_enough(0.0, DEFAULT_TOLERANCE * 1.1) is False
    assert close_enough(0.0, 0.00009) is True
    assert close_enough(0.0, 0.00011) is False


def test_unit_test_default_tolerance():
    ut = UnitTest()

    def case():
        assert ut.assert_equals(0.0, 0.00009) is True
        assert ut.assert_equals(0.0, 0.00011) is False

    case()
    assert len(ut.tests["case"]) == 1


@pytest.mark.parametrize(
    "value, test, expected",
    [
        (1.0, 1.0, True),
        (1.0, 1.00005, True),
        (1.0, 1.001, False),
        (-5.0, -5.00009, True),
    ],
)
def test_close_enough_default(value, test, expected):
    assert close_enough(value, test) is expected


def test_close_enough_custom_tolerance():
    assert close_enough(10.0, 10.5, 1.0) is True
    assert close_enough(10.0, 12.0, 1.0) is False


def test_close_enough_symmetric():
    assert close_enough(3.0, 3.00002) == close_enough(3.00002, 3.0)


def test_check_records_under_caller_name():
    ut = UnitTest()

    def some_case():
        ut.check(True, "ok")
        ut.check(False, "bad")

    some_case()
    assert list(ut.tests) == ["some_case"]
    failures = ut.tests["some_case"]
    assert [f.description for f in failures] == ["bad"]
    assert failures[0].line > 0


def test_assert_equals_uses_tolerance():
    ut = UnitTest()

    def case():
        assert ut.assert_equals(1.0, 1.00001) is True
        assert ut.assert_equals(1.0, 2.0) is False
        assert ut.assert_equals(1.0, 2.0, 5.0) is True

    case()
    assert len(ut.tests["case"]) == 1


def test_report_with_no_tests(capsys):
    ut = UnitTest()
    text = ut.report("Velocity")
    assert text.endswith("There were no tests\n")
    assert text.startswith("Velocity")
    assert capsys.readouterr().out == text


def test_report_all_passing_resets(capsys):
    ut = UnitTest()

    def passing():
        ut.check(True, "fine")

    passing()
    text = ut.report("Position")
    assert "There were 1 tests run for a success rate of: 100.0%" in text
    assert "passing()" not in text
    assert ut.tests == {}
    assert capsys.readouterr().out == text


def test_report_lists_failures(capsys):
    ut = UnitTest()

    def failing():
        ut.check(False, "x == 1")

    def passing():
        ut.check(True, "y == 2")

    failing()
    passing()
    text = ut.report("Mixed")
    assert "\tfailing()\n" in text
    assert "condition:x == 1" in text
    assert "success rate of: 50.0%" in text
    capsys.readouterr()


def test_reset_clears():
    ut = UnitTest()
    ut.check(False, "nope")
    ut.reset()
    assert ut.tests == {}