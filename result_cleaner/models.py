"""
Data models for the result cleaner.
"""

from dataclasses import dataclass, asdict
from typing import Dict, List


@dataclass(frozen=True)
class Contact:
    """One contact record extracted from a block of pasted text."""
    name: str = ""
    title: str = ""
    phone: str = ""  # Raw, not normalized
    email: str = ""
    url: str = ""

    def to_dict(self) -> Dict[str, str]:
        """Convert to dictionary for JSON serialization."""
        return asdict(self)

    def to_row(self) -> List[str]:
        """Field values in CSV column order."""
        return [self.name, self.title, self.phone, self.email, self.url]

    @property
    def is_empty(self) -> bool:
        """Check if every field is blank."""
        return not any(self.to_row())

    @property
    def is_complete(self) -> bool:
        """Check if contact has all critical fields."""
        return bool(self.name and self.email and self.phone)

