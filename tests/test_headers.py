from hiring_hub.layout.headers import build_header_map, normalize_header


def test_normalize_header_trims_and_lowercases():
    assert normalize_header("  Pipeline Progress ") == "pipeline progress"
    assert normalize_header(None) == ""
    assert normalize_header(42) == "42"


def test_build_header_map_uses_one_based_columns_and_skips_blanks():
    header_map = build_header_map(["Email Address", "", "  Opt-Out", None])

    assert header_map == {"email address": 1, "opt-out": 3}


def test_build_header_map_rightmost_duplicate_wins():
    assert build_header_map(["Error", "ERROR "]) == {"error": 2}
