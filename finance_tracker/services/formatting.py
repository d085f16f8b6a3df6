import datetime as dt

WEEKDAY_SHORT = {
    "es": ["Lun", "Mar", "Mié", "Jue", "Vie", "Sáb", "Dom"],
    "en": ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"],
}

WEEKDAY_LONG = {
    "es": ["lunes", "martes", "miércoles", "jueves", "viernes", "sábado", "domingo"],
    "en": ["Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"],
}

MONTHS = {
    "es": ["enero", "febrero", "marzo", "abril", "mayo", "junio", "julio",
           "agosto", "septiembre", "octubre", "noviembre", "diciembre"],
    "en": ["January", "February", "March", "April", "May", "June", "July",
           "August", "September", "October", "November", "December"],
}

DEFAULT_LOCALE = "es"


def _locale(locale: str | None) -> str:
    return locale if locale in WEEKDAY_SHORT else DEFAULT_LOCALE


def weekday_labels(locale: str | None = None) -> list[str]:
    return WEEKDAY_SHORT[_locale(locale)]


def format_date_label(day: dt.date, locale: str | None = None) -> str:
    """Full date label, e.g. ``viernes, 1 de marzo de 2024``."""
    loc = _locale(locale)
    weekday = WEEKDAY_LONG[loc][day.weekday()]
    month = MONTHS[loc][day.month - 1]
    if loc == "es":
        return f"{weekday}, {day.day} de {month} de {day.year}"
    return f"{weekday}, {day.day} {month} {day.year}"


def format_cop(amount: float) -> str:
    """Colombian pesos without decimals, ``.`` as thousands separator."""
    rounded = int(round(abs(amount)))
    digits = f"{rounded:,}".replace(",", ".")
    sign = "-" if amount < 0 and rounded else ""
    return f"{sign}$ {digits}"
