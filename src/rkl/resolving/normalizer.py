#!/usr/bin/env python3
"""
RKL NORMALIZER - Middle Name Insertion
--------------------------------------
Bridges short aliases and real deployment names. Deployments are often
named <component><middle><version>, e.g. 'kg-sophon2', while operators
type 'kg2'. With middle '-sophon' the fragment 'kg2' becomes 'kg-sophon2'.

Author: RKL Team
Date: 2026-10-19
"""

import re
from typing import Optional

# Lazy prefix, then the maximal run of trailing ASCII digits (possibly empty)
_VERSION_SUFFIX = re.compile(r"(.*?)([0-9]*)", re.DOTALL)


def split_version_suffix(fragment: str):
    """Splits 's2s22' into ('s2s', '22'); only the trailing digit run counts."""
    match = _VERSION_SUFFIX.fullmatch(fragment)
    return match.group(1), match.group(2)


def fill_middle_name(fragment: str, middle: Optional[str]) -> str:
    """
    Inserts `middle` between the fragment's prefix and its trailing version
    digits. Without a middle name the fragment is returned unchanged.

        fill_middle_name("kg2", "-sophon")      -> "kg-sophon2"
        fill_middle_name("notebook", "-sophon") -> "notebook-sophon"
        fill_middle_name("2222", "-test")       -> "-test2222"
    """
    if not middle:
        return fragment
    prefix, suffix = split_version_suffix(fragment)
    return f"{prefix}{middle}{suffix}"
