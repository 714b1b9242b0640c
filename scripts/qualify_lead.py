#!/usr/bin/env python3
"""
Lead Qualification Script

Qualifies a wizard intake snapshot (camelCase JSON) and prints the
resulting lead record as JSON.

Usage:
    python qualify_lead.py intake.json
    python qualify_lead.py intake.json --link
    cat intake.json | python qualify_lead.py -
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Any, List, Optional

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from pydantic import ValidationError

from api.models import LeadStateRequest
from services.lead_assembly_service import build_whatsapp_link, generate_lead_json


def load_intake(source: str) -> Any:
    """
    Read intake JSON from a file path, or from stdin when source is "-".

    Raises:
        ValueError: If the content is not valid JSON
    """
    if source == "-":
        raw = sys.stdin.read()
    else:
        raw = Path(source).read_text(encoding="utf-8")

    try:
        return json.loads(raw)
    except json.JSONDecodeError as e:
        raise ValueError(f"Intake is not valid JSON: {e}") from e


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description="Qualify an intake snapshot into a segmented lead"
    )
    parser.add_argument(
        "intake",
        help="Path to intake JSON file, or - to read stdin"
    )
    parser.add_argument(
        "--link",
        action="store_true",
        help="Also print the WhatsApp deep link"
    )
    parser.add_argument(
        "--storage-record",
        action="store_true",
        help="Print the flat storage row instead of the lead record"
    )
    args = parser.parse_args(argv)

    try:
        payload = load_intake(args.intake)
        state = LeadStateRequest.model_validate(payload).to_domain()
    except (OSError, ValueError, ValidationError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    lead = generate_lead_json(state)

    record = lead.to_storage_record() if args.storage_record else lead.to_dict()
    print(json.dumps(record, ensure_ascii=False, indent=2))

    if args.link:
        print(build_whatsapp_link(lead))

    return 0


if __name__ == "__main__":
    sys.exit(main())
