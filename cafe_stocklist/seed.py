"""Built-in category lists each session starts from."""

from .models import CategorySection, StockItem
from .stock_model import StockModel

CAFE_STOCK = "Cafe Stock"
AKL_WLG = "AKL-WLG"

# ─── CAFE STOCK ───
_CAFE_CATEGORIES = [
    ("BREAKFAST", ["Growers Breakfast", "Breakfast Croissant", "Big Breakfast",
                   "Pancakes", "Chia Seeds", "Fruit Salads"]),
    ("SWEETS", ["Brownie Slices", "Cookie Time Biscuits", "Cookie Time GF Biscuits",
                "Carrot Cake", "ANZAC Biscuits", "Blueberry Muffins", "Cheese Scones"]),
    ("SALADS", ["Leafy Salad", "Smoked Chicken Pasta Salad"]),
    ("SANDWICHES AND WRAP", ["BLT", "Chicken Wrap", "Beef Pickle", "Ham and Cheese Toastie"]),
    ("HOT MEALS", ["Mac & Cheese", "Lasagne", "Roast Chicken", "Lamb Shank", "Beef Cheek"]),
    ("PIES", ["Steak and Cheese", "Vegetarian"]),
    ("SWEET AND ICE CREAM", ["KAPITI BOYSENBERRY", "KAPITI PASSIONFRUIT",
                             "KAPITI CHOCOLATE CUPS", "MEMPHIS BIK BIKKIE"]),
    ("CHEESEBOARD", ["Cheeseboard"]),
]

# ─── AKL-WLG RETAIL (name, par level) ───
_AKL_WLG_CATEGORIES = [
    ("SNACKS", [("Whittakers White Choc", "48"), ("Whittakers Brown Choc", "48"),
                ("ETA Nuts", "24")]),
    ("PROPER CHIPS", [("Sea Salt", "18"), ("Cider Vinegar", "18"), ("Garden Medly", "18")]),
    ("BEERS", [("Steinlager Ultra", "24"), ("Duncans Pilsner", "12"), ("Ruapehu Stout", "12"),
               ("Parrot dog Hazy IPA", "12"), ("Garage Project TINY", "12"),
               ("Panhead Supercharger", "12"), ("Sawmill Nimble", "12")]),
    ("PRE MIXES", [("Pals Vodka", "10"), ("Scapegrace Gin", "12"), ("Coruba Rum & Cola", "12"),
                   ("Apple Cider", "12"), ("AF Apero Spirtz", "12")]),
    ("WINES", [("Joiy the Gryphon 250ml", "24"), ("The Ned Sav 250ml", "24"),
               ("Matahiwi Cuvee 250ml", "24"), ("Summer Love 250ml", "24")]),
    ("SOFT DRINKS", [("H2go Water 750ml", "12"), ("NZ SP Water 500ml", "18"),
                     ("Bundaberg Lemon Lime", "10"), ("Bundaberg Ginger Beer", "10"),
                     ("7 UP", "10"), ("Pepsi", "10"), ("Pepsi Max", "10"),
                     ("McCoy Orange Juice", "15"), ("Boss Coffee", "6")]),
    ("750 ML WINE", [("Hunters 750ml", "6"), ("Kumeru Pinot Gris 750ml", "6"),
                     ("Dog Point Sav 750ml", "6"), ("Clearview Chardonnay 750ml", "6")]),
]


def cafe_stock_categories():
    return tuple(
        CategorySection(name, tuple(StockItem(name=product) for product in products))
        for name, products in _CAFE_CATEGORIES
    )


def akl_wlg_categories():
    return tuple(
        CategorySection(name, tuple(StockItem(name=product, par_level=par) for product, par in rows))
        for name, rows in _AKL_WLG_CATEGORIES
    )


SEEDS = {
    CAFE_STOCK: cafe_stock_categories,
    AKL_WLG: akl_wlg_categories,
}


def default_pages():
    """Fresh, independent models for every seeded page, keyed by page name."""
    return {page_name: StockModel(build()) for page_name, build in SEEDS.items()}
