import pytest

from projectcalc.models.constants import Currency
from projectcalc.services.form_state import FormState


def test_defaults():
    form = FormState()
    assert (form.price_raw, form.cost_raw) == ("50,50", "15,50")
    assert form.currency == Currency.BRL
    assert form.hours == 1


@pytest.mark.parametrize("value", [0, 161, "0", "161", -1, "2.5", 2.5, "abc", "", None])
def test_slider_ignores_out_of_range(value):
    form = FormState(hours=40)
    assert form.set_hours(value) is False
    assert form.hours == 40


@pytest.mark.parametrize("value, expected", [(1, 1), (160, 160), ("80", 80), (12.0, 12)])
def test_slider_commits_in_range(value, expected):
    form = FormState()
    assert form.set_hours(value) is True
    assert form.hours == expected


def test_custom_range():
    form = FormState(hours=5, hours_min=2, hours_max=8)
    assert form.set_hours(9) is False
    assert form.set_hours(8) is True
    assert form.hours == 8


def test_text_mode_keeps_raw_text():
    form = FormState(hours="", hours_input="text")
    assert form.set_hours(" 200 ") is True
    assert form.hours == "200"
    assert form.set_hours("abc") is True
    assert form.to_inputs().hours == "abc"


def test_select_currency():
    form = FormState()
    assert form.select_currency("usd") is True
    assert form.currency == Currency.USD
    assert form.select_currency(Currency.EUR) is True
    assert form.currency == Currency.EUR
    assert form.select_currency("GBP") is False
    assert form.currency == Currency.EUR


def test_to_inputs_is_a_snapshot():
    form = FormState(hours=10)
    inputs = form.to_inputs()
    form.set_hours(20)
    form.price_raw = "1"
    assert inputs.hours == 10
    assert inputs.price_raw == "50,50"
