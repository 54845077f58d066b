"""Domain constants: supported currencies and their display conventions."""

from enum import Enum
from typing import Dict, NamedTuple


class Currency(str, Enum):
    BRL = "BRL"
    USD = "USD"
    EUR = "EUR"


BASE_CURRENCY = Currency.BRL

# Foreign currencies whose rate must come from a provider
FOREIGN_CURRENCIES = (Currency.USD, Currency.EUR)


class CurrencyFormat(NamedTuple):
    locale: str
    code: str
    symbol: str
    decimal_sep: str
    group_sep: str
    pattern: str  # "¤" is replaced by the symbol, "#" by the number


# Separators and symbol placement follow CLDR for each locale. The space
# between symbol and number is a no-break space, as browsers render it.
CURRENCY_FORMATS: Dict[Currency, CurrencyFormat] = {
    Currency.BRL: CurrencyFormat("pt-BR", "BRL", "R$", ",", ".", "¤\u00a0#"),
    Currency.USD: CurrencyFormat("en-US", "USD", "$", ".", ",", "¤#"),
    Currency.EUR: CurrencyFormat("de-DE", "EUR", "€", ",", ".", "#\u00a0¤"),
}

# Labels used by the HTML form (original UI is in Portuguese)
FIELD_LABELS: Dict[str, str] = {
    "price_per_hour": "Preço por Hora",
    "cost_per_hour": "Custo por Hora",
    "hours": "Quantidade de Horas",
    "price": "Preço do Projeto",
    "cost": "Custo do Projeto",
    "profit": "Ganho Líquido",
}
