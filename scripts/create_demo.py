#!/usr/bin/env python3
"""
Create a demo household file to showcase the calculator.

Household: father with employment income and a rented flat, mother entered
           by net income, two adult children
Children:  Anna (19, pupil, lives with mother, privileged)
           Ben  (22, student in his own flat, mini job)

Usage:
    python scripts/create_demo.py [output.json]
    ur calc run demo_household.json
"""

import json
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from unterhalt_rechner.importers.household import load_household

DEMO = {
    "table_edition": 2025,
    "father": {
        "gross": 5200,
        "taxes": {"amount": 10800, "period": "yearly"},
        "mandatory_social_security": 850,
        "health_insurance": 450,
        "additional_pension": 250,
        "tax_refund": {"amount": 1200, "period": "yearly"},
        "properties": [
            {
                "label": "Wohnung Köln",
                "rent_income": 900,
                "operating_costs": 150,
                "interest": 300,
                "principal": 250,
            },
        ],
    },
    "mother": {"mode": "net", "net_income": 2100},
    "children": [
        {"name": "Anna", "age": 19, "general_school": True, "residence": "with_mother"},
        {
            "name": "Ben",
            "age": 22,
            "student": True,
            "residence": "own_household",
            "has_mini_job": True,
            "mini_job_income": 520,
        },
    ],
}

out = Path(sys.argv[1]) if len(sys.argv) > 1 else Path("demo_household.json")
if out.exists():
    print(f"{out} already exists. Delete it first if you want to recreate.")
    sys.exit(0)

out.write_text(json.dumps(DEMO, indent=2, ensure_ascii=False) + "\n", encoding="utf-8")

# Parse it back so a broken demo fails here, not in the CLI
household = load_household(out)
print(f"✓ Wrote {out} ({len(household.children)} children)")
print(f"  Run: ur calc run {out}")
