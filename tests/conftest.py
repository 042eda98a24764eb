from __future__ import annotations

import logging
from pathlib import Path
import sys

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from recipematch.domain import Recipe  # noqa: E402


@pytest.fixture(autouse=True)
def reset_package_logger():
    yield
    logger = logging.getLogger("recipematch")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)


@pytest.fixture()
def example_vault() -> Path:
    return ROOT / "fixtures" / "ExampleVault"


@pytest.fixture()
def example_csv() -> Path:
    return ROOT / "fixtures" / "catalog.csv"


@pytest.fixture()
def temp_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    monkeypatch.setenv("HOME", str(tmp_path))
    return tmp_path


@pytest.fixture()
def pork_catalog() -> list[Recipe]:
    return [
        Recipe(id="a", title="Garlic Pork", protein_tags=["pork"], herb_tags=["garlic"], cuisine="American"),
        Recipe(
            id="b",
            title="Rosemary Pork",
            protein_tags=["pork"],
            herb_tags=["rosemary"],
            pantry_tags=["salt"],
            cuisine="Italian",
        ),
        Recipe(id="c", title="Tofu Bowl", protein_tags=["tofu"], pantry_tags=["soy-sauce"], cuisine="Japanese"),
    ]
