from pathlib import Path
from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, Form, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from projectcalc.core.config import get_settings, Settings
from projectcalc.models.constants import BASE_CURRENCY, Currency, FIELD_LABELS
from projectcalc.services.calculator import compute_inputs, format_figures
from projectcalc.services.form_state import FormState
from projectcalc.services.money import format_currency
from projectcalc.services.rates.base import RateProvider, STATUS_PENDING, STATUS_READY
from projectcalc.routers.calculator import get_rate_provider

router = APIRouter(tags=["ui"])

templates = Jinja2Templates(directory=str(Path(__file__).resolve().parent.parent / "templates"))


def get_app_settings(request: Request) -> Settings:
    return getattr(request.app.state, "settings", None) or get_settings()


def new_form_state(settings: Settings) -> FormState:
    return FormState(
        price_raw=settings.default_price_per_hour,
        cost_raw=settings.default_cost_per_hour,
        hours=settings.hours_min if settings.hours_input == "slider" else "",
        hours_input=settings.hours_input,
        hours_min=settings.hours_min,
        hours_max=settings.hours_max,
    )


def _empty_results(currency: Currency) -> Dict[str, str]:
    zero = format_currency(0, currency)
    return {"price": zero, "cost": zero, "profit": zero}


def _render(
    request: Request,
    settings: Settings,
    provider: RateProvider,
    form: FormState,
    results: Dict[str, str],
    notice: Optional[str] = None,
    unavailable: Optional[str] = None,
    hours_ignored: bool = False,
):
    context: Dict[str, Any] = {
        "request": request,
        "title": settings.app_name,
        "version": settings.version,
        "labels": FIELD_LABELS,
        "currencies": [c.value for c in Currency],
        "form": form,
        "results": results,
        "notice": notice,
        "unavailable": unavailable,
        "hours_ignored": hours_ignored,
        "rates_status": provider.status,
        # A disabled option is not submitted, so fall back to BRL until rates are ready
        "selected_currency": (
            form.currency.value if provider.status == STATUS_READY else BASE_CURRENCY.value
        ),
    }
    return templates.TemplateResponse(request, "index.html", context)


@router.get("/", response_class=HTMLResponse)
async def ui_home(
    request: Request,
    provider: RateProvider = Depends(get_rate_provider),
    settings: Settings = Depends(get_app_settings),
):
    form = new_form_state(settings)
    return _render(request, settings, provider, form, _empty_results(form.currency))


@router.post("/calculate", response_class=HTMLResponse)
async def ui_calculate(
    request: Request,
    price_per_hour: str = Form(""),
    cost_per_hour: str = Form(""),
    hours: str = Form(""),
    currency: str = Form("BRL"),
    previous_hours: Optional[str] = Form(None),
    provider: RateProvider = Depends(get_rate_provider),
    settings: Settings = Depends(get_app_settings),
):
    """Recompute on every submit; the currency selector submits on change too."""
    form = new_form_state(settings)
    form.price_raw = price_per_hour
    form.cost_raw = cost_per_hour
    if previous_hours is not None:
        # Restore the last committed slider value before applying the new one
        form.set_hours(previous_hours)
    hours_ignored = not form.set_hours(hours)
    form.select_currency(currency)

    figures = compute_inputs(form.to_inputs(), provider)
    if figures is None:
        if provider.status == STATUS_PENDING:
            message = "Cotações ainda carregando; tente novamente em instantes."
        else:
            message = f"Cotação de {form.currency.value} indisponível no momento."
        return _render(
            request,
            settings,
            provider,
            form,
            {"price": "-", "cost": "-", "profit": "-"},
            unavailable=message,
            hours_ignored=hours_ignored,
        )
    return _render(
        request,
        settings,
        provider,
        form,
        format_figures(figures),
        notice=provider.describe(figures.currency),
        hours_ignored=hours_ignored,
    )
