"""Düsseldorfer Tabelle 2025 (OLG Düsseldorf, valid from 2025-01-01).

Only the values relevant for adult children are kept:
  - 4th age tier (ab 18 Jahre), income groups 1–15
  - Bedarf Studierender mit eigenem Haushalt (Anm. A.7): €990
  - Kindergeld 2025: €255 (§ 66 EStG)
  - Selbstbehalt gegenüber Volljährigen: €1,750 (angemessen, Anm. A.5)
  - notwendiger Selbstbehalt (erwerbstätig): €1,450 (Anm. A.5)
"""

from .need_table import NeedTable, NeedTier

#: Income ceilings (bereinigtes Nettoeinkommen, EUR) of groups 1–15
CEILINGS_2025 = (2100, 2500, 2900, 3300, 3700, 4100, 4500, 4900, 5300, 5700, 6400, 7200, 8200, 9700, 11200)

#: Need of a child aged 18+ per income group
NEEDS_18_PLUS_2025 = (693, 728, 763, 797, 832, 888, 943, 998, 1054, 1109, 1165, 1220, 1276, 1331, 1386)

DUESSELDORF_2025 = NeedTable(
    edition=2025,
    tiers=tuple(NeedTier(c, n) for c, n in zip(CEILINGS_2025, NEEDS_18_PLUS_2025)),
    student_own_household_need=990,
    child_benefit=255,
    self_support_standard=1750,
    self_support_reduced=1450,
)
