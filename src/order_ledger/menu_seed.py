from decimal import Decimal

DEFAULT_MENU: list[tuple[str, Decimal]] = [
    ("Masala Dosa", Decimal("120.00")),
    ("Idli Sambar", Decimal("80.00")),
    ("Paneer Butter Masala", Decimal("260.00")),
    ("Veg Biryani", Decimal("220.00")),
    ("Butter Naan", Decimal("45.00")),
    ("Filter Coffee", Decimal("40.00")),
    ("Masala Chai", Decimal("30.00")),
    ("Gulab Jamun", Decimal("60.00")),
]
