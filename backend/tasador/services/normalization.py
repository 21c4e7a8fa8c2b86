import re
from typing import Dict, List, Mapping, Pattern, Tuple


# Checked in order; the first prefix match wins.
COMPOSITE_BRANDS: Tuple[str, ...] = (
    "ALFA ROMEO",
    "ASTON MARTIN",
    "LAND ROVER",
    "ROLLS ROYCE",
    "MERCEDES BENZ",
)

BRAND_REWRITES: Tuple[Tuple[Pattern[str], str], ...] = (
    (re.compile(r"MERCEDES[-_ ]BENZ"), "MERCEDES BENZ"),
    (re.compile(r"ROLLS[-_ ]ROYCE"), "ROLLS ROYCE"),
)

STANDARD_VERSIONS: Dict[str, str] = {
    "200": "200",
    "180": "180",
    "PURETECH": "PureTech",
    "BLUEDCI": "BlueDCI",
    "TDI": "TDI",
    "ECOBOOST": "EcoBoost",
    "STSP": "Start&Stop",
}

# Canonical spellings map to themselves so canonicalizing twice is a no-op.
_VERSION_LOOKUP: Dict[str, str] = {
    **{canonical.upper(): canonical for canonical in STANDARD_VERSIONS.values()},
    **STANDARD_VERSIONS,
}


def unify_brand(name: str) -> str:
    normalized = name.upper()
    for pattern, replacement in BRAND_REWRITES:
        normalized = pattern.sub(replacement, normalized)
    return normalized


def unify_version(version: str) -> str:
    words = version.upper().split()
    return " ".join(_VERSION_LOOKUP.get(word, word) for word in words)


def _head_and_rest(tokens: List[str]) -> Tuple[str, str]:
    head = tokens[0] if tokens else ""
    return head, " ".join(tokens[1:])


def split_name(name: str) -> Tuple[str, str, str]:
    """Split a free-text listing name into (brand, model, raw version)."""
    normalized = unify_brand(name)

    for brand in COMPOSITE_BRANDS:
        if normalized.startswith(brand):
            model, version = _head_and_rest(normalized[len(brand):].split())
            return brand, model, version

    brand, rest = _head_and_rest(normalized.split())
    model, version = _head_and_rest(rest.split())
    return brand, model, version


def normalize_listing_fields(raw: Mapping) -> Dict:
    brand, model, version = split_name(str(raw.get("name") or ""))
    return {
        **raw,
        "marca": brand,
        "modelo": model,
        "version": unify_version(version),
    }
