# Services Module
from .money import format_amount, round_money, to_decimal

__all__ = ["format_amount", "round_money", "to_decimal"]
