"""
Common Error Constants

User-facing messages for rejected cart operations. The UI shell decides
how to show them; the core only attaches them to results.
"""

# Selection errors
ERROR_NO_SELECTION = "Select a product before adding it to the cart"

# Quantity errors
ERROR_INVALID_QUANTITY_FORMAT = "Quantity must be a whole number"
ERROR_NON_POSITIVE_QUANTITY = "Quantity must be greater than zero"
