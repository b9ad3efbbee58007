"""Month and weekday names for the supported display locales."""

MONTH_NAMES = {
    "es": (
        "enero",
        "febrero",
        "marzo",
        "abril",
        "mayo",
        "junio",
        "julio",
        "agosto",
        "septiembre",
        "octubre",
        "noviembre",
        "diciembre",
    ),
    "en": (
        "January",
        "February",
        "March",
        "April",
        "May",
        "June",
        "July",
        "August",
        "September",
        "October",
        "November",
        "December",
    ),
}

# Sunday first, matching the grid layout
WEEKDAY_NAMES = {
    "es": ("Dom", "Lun", "Mar", "Mié", "Jue", "Vie", "Sáb"),
    "en": ("Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat"),
}

# Joining word between month and year ("marzo de 2024")
_MONTH_YEAR_FORMAT = {
    "es": "{month} de {year}",
    "en": "{month} {year}",
}


def month_label(year: int, month: int, locale: str = "es") -> str:
    """Format a "month year" label, falling back to Spanish for unknown locales."""
    if locale not in MONTH_NAMES:
        locale = "es"
    return _MONTH_YEAR_FORMAT[locale].format(
        month=MONTH_NAMES[locale][month - 1], year=year
    )


def weekday_names(locale: str = "es") -> tuple[str, ...]:
    return WEEKDAY_NAMES.get(locale, WEEKDAY_NAMES["es"])
