# Copyright (c) 2025 mergestats Development Team
# SPDX-License-Identifier: GPL-3.0-or-later

"""Pytest configuration and fixtures for mergestats tests."""

import sys
from pathlib import Path
from typing import List

import pytest

TESTS_ROOT = Path(__file__).resolve().parent
SRC_ROOT = TESTS_ROOT.parent / "src"
if str(SRC_ROOT) not in sys.path:
    sys.path.insert(0, str(SRC_ROOT))

# Folder -> default markers that should apply to every test collected under it.
FOLDER_MARKERS = {
    "tests/unit/aggregate/": ["unit", "contract"],
    "tests/unit/commute/": ["unit", "contract"],
    "tests/unit/frequency/": ["unit", "frequency"],
    "tests/unit/minmax/": ["unit", "minmax"],
    "tests/unit/online/": ["unit", "moments"],
    "tests/unit/ordering/": ["unit", "order"],
    "tests/unit/sorted/": ["unit", "order"],
    "tests/unit/unsorted/": ["unit", "order"],
    "tests/unit/properties/": ["unit", "properties"],
    "tests/unit/summary/": ["unit", "summary"],
    "tests/unit/utils/": ["unit", "utils"],
}


def _normalize_path(path: Path) -> str:
    """Return a forward-slash path for prefix matching."""
    return str(path).replace("\\", "/")


def _apply_folder_markers(item: pytest.Item) -> None:
    """Attach default markers based on the test file location."""
    normalized = _normalize_path(Path(str(item.fspath)))
    applied: set[str] = set()
    for folder, markers in FOLDER_MARKERS.items():
        if folder in normalized:
            for marker in markers:
                if marker not in applied:
                    item.add_marker(getattr(pytest.mark, marker))
                    applied.add(marker)


def _parse_focus_option(raw: str) -> set[str]:
    return {chunk.strip() for chunk in raw.split(",") if chunk.strip()}


def pytest_addoption(parser: pytest.Parser) -> None:
    parser.addoption(
        "--focus",
        action="store",
        default="",
        help="Comma-separated domain markers (e.g. order,moments). Only matching tests run.",
    )


def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    focus = _parse_focus_option(config.getoption("--focus"))
    deselected: list[pytest.Item] = []
    selected: list[pytest.Item] = []

    for item in items:
        _apply_folder_markers(item)
        if not focus:
            continue
        tags = {mark.name for mark in item.iter_markers()}
        if focus.intersection(tags) or "all" in focus:
            selected.append(item)
        else:
            deselected.append(item)

    if focus and deselected:
        config.hook.pytest_deselected(items=deselected)
        items[:] = selected


def pytest_configure(config: pytest.Config) -> None:
    """Register the folder markers so they are known to pytest."""
    names = sorted({m for markers in FOLDER_MARKERS.values() for m in markers})
    for name in names:
        config.addinivalue_line("markers", f"{name}: tests under the {name} area")


@pytest.fixture
def frequency_samples() -> List[int]:
    return [1, 1, 2, 2, 2, 2, 2, 3, 4, 4, 4]


@pytest.fixture
def float_samples_with_nan() -> List[float]:
    return [3.0, float("nan"), 1.0, 2.0, float("nan"), 5.0]
