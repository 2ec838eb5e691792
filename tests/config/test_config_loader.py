from pathlib import Path

import pytest
from pydantic import ValidationError

from chartcore.config_model.model import DEFAULT_PALETTE, RootCfg, load_config


def test_config_loads(cfg):
    assert cfg.env.project_name == "chartcore"
    assert cfg.summaries.bins == 15
    assert cfg.summaries.max_categories == 15
    assert cfg.summaries.other_label == "Other"
    assert cfg.axis.padding_ratio == pytest.approx(0.1)
    assert cfg.palette.colors == DEFAULT_PALETTE

def test_config_dir_recorded(cfg, cfg_path: Path):
    assert cfg._config_dir == cfg_path.parent.resolve()

def test_missing_sections_fall_back_to_defaults(tmp_path: Path):
    p = tmp_path / "partial.toml"
    p.write_text("[summaries]\nbins = 20\n", encoding="utf-8")
    cfg = RootCfg.from_toml(p)
    assert cfg.summaries.bins == 20
    assert cfg.summaries.max_categories == 15
    assert cfg.axis.max_decimals == 4

def test_bom_and_code_fences_are_tolerated(tmp_path: Path):
    p = tmp_path / "pasted.toml"
    p.write_text("\ufeff```\n[axis]\nmax_decimals = 3\n```", encoding="utf-8")
    assert RootCfg.from_toml(p).axis.max_decimals == 3

def test_unparseable_toml_raises_runtime_error(tmp_path: Path):
    p = tmp_path / "broken.toml"
    p.write_text("[summaries\nbins = ", encoding="utf-8")
    with pytest.raises(RuntimeError, match="Failed to parse TOML"):
        RootCfg.from_toml(p)

def test_invalid_values_are_rejected(tmp_path: Path):
    p = tmp_path / "bad.toml"
    p.write_text("[summaries]\nbins = 0\n", encoding="utf-8")
    with pytest.raises(ValidationError):
        RootCfg.from_toml(p)

def test_empty_palette_is_rejected(tmp_path: Path):
    p = tmp_path / "pal.toml"
    p.write_text("[palette]\ncolors = []\n", encoding="utf-8")
    with pytest.raises(ValidationError):
        RootCfg.from_toml(p)

def test_env_var_path(tmp_path: Path, monkeypatch):
    p = tmp_path / "env.toml"
    p.write_text("[summaries]\nmax_categories = 8\n", encoding="utf-8")
    monkeypatch.setenv("CHARTCORE_CFG", str(p))
    assert load_config().summaries.max_categories == 8

def test_defaults_when_no_file(tmp_path: Path, monkeypatch):
    monkeypatch.delenv("CHARTCORE_CFG", raising=False)
    monkeypatch.chdir(tmp_path)
    cfg = load_config()
    assert cfg.summaries.bins == 15
    assert cfg.logging.level == "INFO"
