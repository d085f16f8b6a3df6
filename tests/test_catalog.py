from datetime import date
from types import SimpleNamespace

from finance_tracker.services.catalog import FALLBACK_ICON, IconName, resolve_icon
from finance_tracker.services.finance import build_category_lookup
from finance_tracker.services.formatting import format_cop, format_date_label


def test_every_icon_has_an_asset():
    for icon in IconName:
        assert resolve_icon(icon.value).name == icon.value


def test_icon_component_names():
    assert resolve_icon("shopping-cart").component == "ShoppingCart"
    assert resolve_icon("first-aid-kit").component == "FirstAidKit"


def test_unknown_icon_falls_back():
    assert resolve_icon("rocket") == FALLBACK_ICON
    assert resolve_icon(None) == FALLBACK_ICON
    assert resolve_icon("") == FALLBACK_ICON


def test_format_cop():
    assert format_cop(0) == "$ 0"
    assert format_cop(1234567) == "$ 1.234.567"
    assert format_cop(999.6) == "$ 1.000"
    assert format_cop(-40000) == "-$ 40.000"


def test_format_date_label():
    assert format_date_label(date(2024, 3, 1)) == "viernes, 1 de marzo de 2024"
    assert format_date_label(date(2024, 12, 25), "en") == "Wednesday, 25 December 2024"
    # unknown locales use Spanish
    assert format_date_label(date(2024, 3, 1), "fr") == "viernes, 1 de marzo de 2024"


def test_user_categories_override_globals():
    shared = SimpleNamespace(id="c1", name="Comida")
    other = SimpleNamespace(id="c2", name="Salud")
    mine = SimpleNamespace(id="c1", name="Comida casera")

    lookup = build_category_lookup([shared, other], [mine])
    assert lookup["c1"] is mine
    assert lookup["c2"] is other
