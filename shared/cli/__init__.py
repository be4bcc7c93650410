from .helpers import run_async, validate, fmt_price, print_products

__all__ = ["run_async", "validate", "fmt_price", "print_products"]
