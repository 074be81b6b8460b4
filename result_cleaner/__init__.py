"""
Turns pasted Google / LinkedIn result listings into a contact table
and exports it as CSV.
"""

from .models import Contact
from .parser import parse, parse_contacts
from .writer import encode, contacts_to_csv

__version__ = "1.0.0"

__all__ = [
    "Contact",
    "parse",
    "parse_contacts",
    "encode",
    "contacts_to_csv",
]
