"""
Block parser: pasted search / LinkedIn results to Contact records.
"""

import logging
import re
from typing import List, Optional, Tuple

from .models import Contact

logger = logging.getLogger(__name__)


# Blank line (whitespace holding at least two newlines) separates blocks
BLOCK_SEPARATOR = re.compile(r'\n\s*\n')

# Regex patterns
EMAIL_PATTERN = re.compile(r'[A-Z0-9._%+-]+@[A-Z0-9.-]+\.[A-Z]{2,}', re.IGNORECASE | re.ASCII)
PHONE_PATTERN = re.compile(r'\+?[0-9][0-9.\-\s()]{6,}[0-9]')
URL_PATTERN = re.compile(r'https?://\S+', re.IGNORECASE)
DASH_PATTERN = re.compile(r'^(.+?)\s*-\s*(.+)$')

MIDDLE_DOT = '·'


def split_blocks(text: str) -> List[str]:
    """
    Split raw text into trimmed, non-empty blocks.

    Args:
        text: Raw pasted text

    Returns:
        Blocks in order of appearance
    """
    blocks = (block.strip() for block in BLOCK_SEPARATOR.split(text))
    return [block for block in blocks if block]


def extract_email(block: str) -> str:
    """
    Find the first email address in a block.

    Args:
        block: Block text

    Returns:
        Email or empty string
    """
    match = EMAIL_PATTERN.search(block)
    return match.group(0) if match else ""


def extract_phone(block: str) -> str:
    """
    Find the longest phone-like numeric run in a block.

    Follower counts or postal codes can match the pattern as well;
    the longest run is taken as the number.

    Args:
        block: Block text

    Returns:
        Phone text (whitespace-trimmed) or empty string
    """
    matches = [m.group(0) for m in PHONE_PATTERN.finditer(block)]
    if not matches:
        return ""

    # max() keeps the first of equally long runs
    return max(matches, key=len).strip()


def extract_url(block: str) -> str:
    """Find the first http(s) URL in a block."""
    match = URL_PATTERN.search(block)
    return match.group(0) if match else ""


def extract_name_and_title(first_line: str) -> Tuple[str, str]:
    """
    Split a headline into name and title.

    Handles "Name - Title ..." first, then "Name · Title · Company",
    otherwise the whole line is the name.

    Args:
        first_line: First non-empty line of a block

    Returns:
        Tuple of (name, title)
    """
    dash_match = DASH_PATTERN.match(first_line)
    if dash_match:
        return dash_match.group(1).strip(), dash_match.group(2).strip()

    if MIDDLE_DOT in first_line:
        name, _, title = first_line.partition(MIDDLE_DOT)
        return name.strip(), title.strip()

    return first_line.strip(), ""


def parse_block(block: str) -> Optional[Contact]:
    """
    Extract one contact from a block.

    Args:
        block: Block text

    Returns:
        Contact, or None when no field could be extracted
    """
    lines = [line.strip() for line in block.split('\n')]
    lines = [line for line in lines if line]
    first_line = lines[0] if lines else ""

    name, title = extract_name_and_title(first_line)

    contact = Contact(
        name=name,
        title=title,
        phone=extract_phone(block),
        email=extract_email(block),
        url=extract_url(block),
    )

    if contact.is_empty:
        return None

    return contact


def parse_contacts(text: str) -> List[Contact]:
    """
    Parse pasted result text into contacts.

    Args:
        text: Raw pasted text

    Returns:
        List of Contact objects in input order
    """
    blocks = split_blocks(text)

    contacts = []
    for block in blocks:
        contact = parse_block(block)
        if contact is not None:
            contacts.append(contact)

    logger.debug(f"Parsed {len(contacts)} contacts from {len(blocks)} blocks")

    return contacts


parse = parse_contacts
