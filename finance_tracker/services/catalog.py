"""
Closed catalogue of category icons and colors.

Icons are stored on categories by identifier (``"shopping-cart"``). The
front end renders them with Phosphor components, so every identifier maps
to a component name plus a plain-text glyph for clients that cannot load
the icon set. Unknown identifiers resolve to the fallback asset.
"""
from dataclasses import dataclass
from enum import Enum


class IconName(str, Enum):
    MONEY = "money"
    BRIEFCASE = "briefcase"
    TREND_UP = "trend-up"
    HAMBURGER = "hamburger"
    CAR = "car"
    SHOPPING_CART = "shopping-cart"
    FILE_TEXT = "file-text"
    FILM_SLATE = "film-slate"
    FIRST_AID_KIT = "first-aid-kit"
    BOOK = "book"
    HOUSE = "house"
    AIRPLANE = "airplane"
    GAME_CONTROLLER = "game-controller"
    COFFEE = "coffee"
    PILL = "pill"
    GRADUATION_CAP = "graduation-cap"
    WRENCH = "wrench"
    PALETTE = "palette"
    BARBELL = "barbell"
    PIZZA = "pizza"
    HEART = "heart"
    PAW_PRINT = "paw-print"
    CREDIT_CARD = "credit-card"
    BUS = "bus"
    LIGHTBULB = "lightbulb"


@dataclass(frozen=True)
class IconAsset:
    name: str
    component: str
    glyph: str


FALLBACK_ICON = IconAsset(name="question", component="Question", glyph="❓")

ICON_ASSETS: dict[IconName, IconAsset] = {
    IconName.MONEY: IconAsset("money", "Money", "💵"),
    IconName.BRIEFCASE: IconAsset("briefcase", "Briefcase", "💼"),
    IconName.TREND_UP: IconAsset("trend-up", "TrendUp", "📈"),
    IconName.HAMBURGER: IconAsset("hamburger", "Hamburger", "🍔"),
    IconName.CAR: IconAsset("car", "Car", "🚗"),
    IconName.SHOPPING_CART: IconAsset("shopping-cart", "ShoppingCart", "🛒"),
    IconName.FILE_TEXT: IconAsset("file-text", "FileText", "📄"),
    IconName.FILM_SLATE: IconAsset("film-slate", "FilmSlate", "🎬"),
    IconName.FIRST_AID_KIT: IconAsset("first-aid-kit", "FirstAidKit", "🩹"),
    IconName.BOOK: IconAsset("book", "Book", "📖"),
    IconName.HOUSE: IconAsset("house", "House", "🏠"),
    IconName.AIRPLANE: IconAsset("airplane", "Airplane", "✈️"),
    IconName.GAME_CONTROLLER: IconAsset("game-controller", "GameController", "🎮"),
    IconName.COFFEE: IconAsset("coffee", "Coffee", "☕"),
    IconName.PILL: IconAsset("pill", "Pill", "💊"),
    IconName.GRADUATION_CAP: IconAsset("graduation-cap", "GraduationCap", "🎓"),
    IconName.WRENCH: IconAsset("wrench", "Wrench", "🔧"),
    IconName.PALETTE: IconAsset("palette", "Palette", "🎨"),
    IconName.BARBELL: IconAsset("barbell", "Barbell", "🏋️"),
    IconName.PIZZA: IconAsset("pizza", "Pizza", "🍕"),
    IconName.HEART: IconAsset("heart", "Heart", "❤️"),
    IconName.PAW_PRINT: IconAsset("paw-print", "PawPrint", "🐾"),
    IconName.CREDIT_CARD: IconAsset("credit-card", "CreditCard", "💳"),
    IconName.BUS: IconAsset("bus", "Bus", "🚌"),
    IconName.LIGHTBULB: IconAsset("lightbulb", "Lightbulb", "💡"),
}


def resolve_icon(name: str | None) -> IconAsset:
    try:
        return ICON_ASSETS[IconName(name)]
    except ValueError:
        return FALLBACK_ICON


COLOR_OPTIONS = (
    "#ef4444",
    "#f59e0b",
    "#10b981",
    "#3b82f6",
    "#8b5cf6",
    "#ec4899",
    "#14b8a6",
    "#f43f5e",
    "#6366f1",
)

DEFAULT_ICON = IconName.MONEY
DEFAULT_COLOR = "#3b82f6"
DEFAULT_TYPE = "expense"

# Shared categories created on first start
DEFAULT_GLOBAL_CATEGORIES = [
    {"name": "Salario", "icon": "briefcase", "color": "#10b981", "type": "income"},
    {"name": "Inversiones", "icon": "trend-up", "color": "#14b8a6", "type": "income"},
    {"name": "Otros ingresos", "icon": "money", "color": "#3b82f6", "type": "income"},
    {"name": "Alimentación", "icon": "hamburger", "color": "#f59e0b", "type": "expense"},
    {"name": "Transporte", "icon": "car", "color": "#6366f1", "type": "expense"},
    {"name": "Mercado", "icon": "shopping-cart", "color": "#ef4444", "type": "expense"},
    {"name": "Servicios", "icon": "file-text", "color": "#8b5cf6", "type": "expense"},
    {"name": "Entretenimiento", "icon": "film-slate", "color": "#ec4899", "type": "expense"},
    {"name": "Salud", "icon": "first-aid-kit", "color": "#f43f5e", "type": "expense"},
    {"name": "Educación", "icon": "book", "color": "#3b82f6", "type": "expense"},
    {"name": "Hogar", "icon": "house", "color": "#14b8a6", "type": "expense"},
]
