from typing import Dict, Iterable, Optional


def normalize_header(header: Optional[object]) -> str:
    """Trim and case-fold a header cell so lookups ignore cosmetic differences"""
    if header is None:
        return ""
    return str(header).strip().lower()


def build_header_map(headers: Iterable[object]) -> Dict[str, int]:
    """Map normalized header text to its 1-based column position.

    Blank cells are left out. If a header repeats, the rightmost column wins.
    """
    header_map: Dict[str, int] = {}
    for index, header in enumerate(headers, start=1):
        key = normalize_header(header)
        if key:
            header_map[key] = index
    return header_map
