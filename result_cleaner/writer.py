"""
CSV encoding and output file writers (CSV and JSON).
"""

import csv
import io
import json
from pathlib import Path
from datetime import datetime
from typing import List, Dict, Any, Optional, Sequence
from collections import defaultdict

from .models import Contact


# Column labels in row order: name, title, phone, email, url
CSV_HEADER = ['nama', 'jabatan', 'phone', 'email', 'url']

FIELDS = ['name', 'title', 'phone', 'email', 'url']


def contacts_to_csv(contacts: Sequence[Contact]) -> str:
    """
    Encode contacts as a CSV text blob.

    Every value, header included, is quoted with embedded quotes doubled.
    Rows are joined with "\\n" and there is no trailing newline.

    Args:
        contacts: List of Contact objects

    Returns:
        CSV text
    """
    buffer = io.StringIO()
    writer = csv.writer(buffer, quoting=csv.QUOTE_ALL, lineterminator='\n')
    writer.writerow(CSV_HEADER)

    for contact in contacts:
        writer.writerow(contact.to_row())

    # Drop the terminator after the last row
    return buffer.getvalue()[:-1]


encode = contacts_to_csv


def extract_domain(email: str) -> Optional[str]:
    """
    Extract domain from email address.

    Args:
        email: Email address

    Returns:
        Domain or None
    """
    if '@' in email:
        return email.split('@')[1].lower()
    return None


def calculate_field_stats(contacts: Sequence[Contact]) -> Dict[str, Any]:
    """
    Calculate field coverage and email domain statistics.

    Args:
        contacts: List of Contact objects

    Returns:
        Statistics dictionary
    """
    total = len(contacts)

    field_counts = {
        field: sum(1 for c in contacts if getattr(c, field))
        for field in FIELDS
    }

    domain_counts = defaultdict(int)
    for contact in contacts:
        domain = extract_domain(contact.email)
        if domain:
            domain_counts[domain] += 1

    top_domains = sorted(
        domain_counts.items(),
        key=lambda x: x[1],
        reverse=True
    )

    return {
        "totalContacts": total,
        "completeRecords": sum(1 for c in contacts if c.is_complete),
        "fieldCounts": field_counts,
        "fieldCoverage": {
            field: f"{(count / total * 100):.1f}" if total > 0 else "0.0"
            for field, count in field_counts.items()
        },
        "uniqueDomains": len(domain_counts),
        "topDomains": [
            {"domain": domain, "count": count}
            for domain, count in top_domains[:10]
        ],
    }


def _output_path(output_dir: str, prefix: str, suffix: str) -> Path:
    out_dir = Path(output_dir)
    out_dir.mkdir(parents=True, exist_ok=True)

    timestamp = datetime.now().strftime("%Y-%m-%dT%H-%M-%S-%f")[:-3]
    return out_dir / f"{prefix}-{timestamp}.{suffix}"


def write_json(
    contacts: List[Contact],
    source: str,
    output_dir: str = "output",
    prefix: str = "contacts"
) -> str:
    """
    Write contacts to JSON file.

    Args:
        contacts: List of Contact objects
        source: Where the raw text came from (path or "stdin")
        output_dir: Output directory
        prefix: Filename prefix

    Returns:
        Path to output file
    """
    output_path = _output_path(output_dir, prefix, "json")

    output = {
        "metadata": {
            "parsedAt": datetime.now().isoformat(timespec="seconds"),
            "source": source,
            "totalContacts": len(contacts),
            "fieldStats": calculate_field_stats(contacts)
        },
        "contacts": [contact.to_dict() for contact in contacts]
    }

    with open(output_path, 'w', encoding='utf-8') as f:
        json.dump(output, f, indent=2, ensure_ascii=False)

    return str(output_path)


def write_csv(
    contacts: List[Contact],
    output_dir: str = "output",
    prefix: str = "contacts"
) -> str:
    """
    Write contacts to CSV file.

    Args:
        contacts: List of Contact objects
        output_dir: Output directory
        prefix: Filename prefix

    Returns:
        Path to output file
    """
    output_path = _output_path(output_dir, prefix, "csv")

    with open(output_path, 'w', newline='', encoding='utf-8') as f:
        f.write(contacts_to_csv(contacts))

    return str(output_path)
