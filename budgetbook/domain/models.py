"""Domain type definitions for budgetbook.

These NewTypes provide semantic clarity and help with type checking:
- Money: Amount in cents (minor units)
- Label: Encoded purchase text, "<name> $<price>"
"""

from typing import NewType

# Money amounts are stored as cents (minor units) to avoid floating point errors
Money = NewType("Money", int)

# Label is always "<name> $<two-decimal price>" (e.g., "Lunch $9.99")
Label = NewType("Label", str)
