"""Fixed pattern and keyword tables used by the extractor.

Compiled once at import and never mutated.
"""

import re
from typing import Tuple

# e.g. A01-001-15-02, N50-001-03-07, N62-002-03A-11
CABLE_ID_PATTERN = re.compile(r"\b([A-Z]{0,2}\d{2,3}-\d{3}-\d{2}[A-Z]?-\w+)\b", re.IGNORECASE)

ETHERNET_HINTS: Tuple[str, ...] = (
    "CAT5",
    "CAT6",
    "RJ45",
    "RJ-45",
    "LAN",
    "ETH",
    "Ethernet",
    "UTP",
    "FTP",
    "PoE",
    "CAT5e",
    "CAT6a",
)

# Ordered: first keyword found in the context decides the media label.
MEDIA_KEYWORDS: Tuple[Tuple[str, str], ...] = (
    ("CAT6", "CAT6"),
    ("CAT6a", "CAT6"),
    ("CAT5", "CAT5"),
    ("CAT5e", "CAT5e"),
    ("RJ45", "RJ45"),
    ("RJ-45", "RJ45"),
    ("LAN", "LAN"),
    ("UTP", "UTP"),
    ("FTP", "FTP"),
    ("PoE", "PoE"),
    ("Ethernet", "Ethernet"),
)

ENDPOINT_KEYWORDS: Tuple[str, ...] = (
    "RACK",
    "SWITCH",
    "SW",
    "HUB",
    "FW",
    "FIREWALL",
    "PC",
    "SERVER",
    "CONSOLE",
    "PANEL",
    "VDR",
    "ECDIS",
    "RADAR",
    "VSAT",
    "SMS",
    "IAS",
    "CCTV",
    "NVR",
    "CAM",
    "ROUTER",
    "AP",
    "TERMINAL",
    "DISPLAY",
    "MIMIC",
    "PLC",
    "UPS",
    "BMS",
    "GMDSS",
    "AIS",
    "GPS",
)

ENDPOINT_PREFIX_PATTERN = re.compile(r"^(RACK|SW|PANEL|CONSOLE)[-\w]*$")

CONTEXT_WINDOW_LINES = 3
UNKNOWN_ENDPOINT = "UNKNOWN"
UNKNOWN_MEDIA = "Unknown"
AMBIGUITY_GAP = 0.3


def _keyword_regex(keyword: str) -> re.Pattern[str]:
    # A hyphen in a keyword is optional in the text: RJ-45 also matches RJ45.
    return re.compile("-?".join(re.escape(part) for part in keyword.split("-")), re.IGNORECASE)


ETHERNET_HINT_PATTERNS: Tuple[re.Pattern[str], ...] = tuple(
    _keyword_regex(hint) for hint in ETHERNET_HINTS
)
MEDIA_PATTERNS: Tuple[Tuple[re.Pattern[str], str], ...] = tuple(
    (_keyword_regex(keyword), label) for keyword, label in MEDIA_KEYWORDS
)
