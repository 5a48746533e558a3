"""Core type definitions."""

from typing import NewType

# Address a node links to (e.g., "/#button", "/#/Components/Button")
# Compared by prefix against the current location
Address = NewType("Address", str)
