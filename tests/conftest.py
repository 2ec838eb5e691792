from pathlib import Path
import pytest

@pytest.fixture(scope="session")
def project_root() -> Path:
    return Path(__file__).resolve().parents[1]

@pytest.fixture(scope="session")
def cfg_path(project_root: Path) -> Path:
    return project_root / "config" / "config.toml"

@pytest.fixture(scope="session")
def cfg(cfg_path: Path):
    from chartcore.config_model.model import load_config
    return load_config(str(cfg_path))

@pytest.fixture
def people_rows():
    # mixed validity on purpose: None, blank, text, bool, missing keys
    return [
        {"age": 34, "height": 171.5, "weight": 70.2, "sex": "F", "smoker": False},
        {"age": "41", "height": 180.0, "weight": 82.0, "sex": "M", "smoker": True},
        {"age": None, "height": 165.2, "weight": None, "sex": "F", "smoker": False},
        {"age": 29, "height": "", "weight": 58.9, "sex": None, "smoker": False},
        {"age": "n/a", "height": 175.0, "weight": 77.7, "sex": "M"},
        {"age": 52, "height": 168.4, "weight": 66.1, "sex": "F", "smoker": True},
        {"height": 190.3, "weight": 95.5, "sex": "M", "smoker": False},
        {"age": 47, "height": float("nan"), "weight": 71.0, "sex": "X", "smoker": True},
    ]
