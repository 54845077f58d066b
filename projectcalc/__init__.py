"""Project price calculator: hourly price/cost estimates with BRL conversion."""
