"""HTML form tests."""

from fastapi.testclient import TestClient

from projectcalc.main import create_app
from projectcalc.services.rates import FixedRateProvider
from tests.conftest import make_settings

NBSP = "\u00a0"


def form(**overrides):
    data = {
        "price_per_hour": "100",
        "cost_per_hour": "50",
        "hours": "10",
        "currency": "BRL",
        "previous_hours": "1",
    }
    data.update(overrides)
    return data


def test_home_renders_defaults(fixed_client):
    resp = fixed_client.get("/")
    assert resp.status_code == 200
    html = resp.text
    assert 'value="50,50"' in html
    assert 'value="15,50"' in html
    assert 'type="range"' in html
    assert f"R${NBSP}0,00" in html
    assert "Calcular" in html


def test_calculate_brl(fixed_client):
    resp = fixed_client.post("/calculate", data=form())
    assert resp.status_code == 200
    assert f"R${NBSP}1.000,00" in resp.text
    assert f"R${NBSP}500,00" in resp.text
    assert 'id="notice"' not in resp.text


def test_calculate_usd_shows_fixed_rate_notice(fixed_client):
    resp = fixed_client.post("/calculate", data=form(currency="USD"))
    assert "$200.00" in resp.text
    assert "$100.00" in resp.text
    assert "1 USD = 5 BRL" in resp.text


def test_out_of_range_hours_keep_previous_value(fixed_client):
    resp = fixed_client.post("/calculate", data=form(hours="161", previous_hours="10"))
    # 10 hours kept: 100 * 10
    assert f"R${NBSP}1.000,00" in resp.text
    assert 'id="hours-ignored"' in resp.text

    resp = fixed_client.post("/calculate", data=form(hours="0", previous_hours="4"))
    assert f"R${NBSP}400,00" in resp.text


def test_pending_rates_show_loading_message(pending_client):
    resp = pending_client.post("/calculate", data=form(currency="EUR"))
    assert resp.status_code == 200
    assert 'id="unavailable"' in resp.text
    assert "carregando" in resp.text
    assert "0,00" not in resp.text.split('id="unavailable"')[1]


def test_pending_rates_disable_foreign_options(pending_client):
    html = pending_client.get("/").text
    usd = html.split('<option value="USD"')[1].split("</option>")[0]
    assert "disabled" in usd
    brl = html.split('<option value="BRL"')[1].split("</option>")[0]
    assert "disabled" not in brl


def test_live_rates(live_client):
    resp = live_client.post("/calculate", data=form(currency="EUR"))
    assert f"250,00{NBSP}€" in resp.text


def test_text_hours_mode():
    app = create_app(
        settings_override=make_settings(hours_input="text"),
        rate_provider=FixedRateProvider(5),
    )
    client = TestClient(app)
    html = client.get("/").text
    assert 'type="range"' not in html
    resp = client.post(
        "/calculate",
        data={"price_per_hour": "100", "cost_per_hour": "50", "hours": "200", "currency": "BRL"},
    )
    assert f"R${NBSP}20.000,00" in resp.text


def test_huge_price_renders_page(fixed_client):
    resp = fixed_client.post("/calculate", data=form(price_per_hour="1" + "0" * 27, hours="1"))
    assert resp.status_code == 200
    assert f"R${NBSP}1" + ".000" * 9 + ",00" in resp.text


def test_unavailable_foreign_currency_falls_back_to_brl_selection(pending_client):
    html = pending_client.post("/calculate", data=form(currency="USD")).text
    usd = html.split('<option value="USD"')[1].split("</option>")[0]
    brl = html.split('<option value="BRL"')[1].split("</option>")[0]
    assert "selected" not in usd
    assert "selected" in brl


def test_ready_foreign_currency_stays_selected(fixed_client):
    html = fixed_client.post("/calculate", data=form(currency="USD")).text
    usd = html.split('<option value="USD"')[1].split("</option>")[0]
    assert "selected" in usd
