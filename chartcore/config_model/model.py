from __future__ import annotations
from typing import List, Literal, Optional
from pathlib import Path
import os
from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    PrivateAttr,
    field_validator,
)


DEFAULT_PALETTE: List[str] = [
    "#3498db", "#2ecc71", "#e74c3c", "#f39c12", "#9b59b6",
    "#1abc9c", "#34495e", "#e67e22", "#95a5a6", "#d35400",
]


# ---------- Leaf models ----------

class EnvCfg(BaseModel):
    project_name: str = "chartcore"
    theme: str = "light"


class SummariesCfg(BaseModel):
    bins: int = Field(15, ge=1)
    max_categories: int = Field(15, ge=1)
    iqr_multiplier: float = Field(1.5, ge=1.0)
    unknown_label: str = "Unknown"
    other_label: str = "Other"
    categorical_missing: Literal["label", "drop"] = "label"


class AxisCfg(BaseModel):
    padding_ratio: float = Field(0.1, ge=0.0)
    zero_span_padding: float = Field(0.5, gt=0.0)
    tick_count: int = Field(5, ge=1)
    max_decimals: int = Field(4, ge=0)
    default_decimals: int = Field(2, ge=0)


class PaletteCfg(BaseModel):
    colors: List[str] = Field(default_factory=lambda: list(DEFAULT_PALETTE))

    @field_validator("colors")
    @classmethod
    def _non_empty(cls, v: List[str]) -> List[str]:
        if not v:
            raise ValueError("palette.colors must hold at least one colour")
        return v


class LoggingCfg(BaseModel):
    level: str = "INFO"
    structured_json: bool = True


# ---------- Root ----------

class RootCfg(BaseModel):
    model_config = ConfigDict(extra="ignore")

    env: EnvCfg = EnvCfg()
    summaries: SummariesCfg = SummariesCfg()
    axis: AxisCfg = AxisCfg()
    palette: PaletteCfg = PaletteCfg()
    logging: LoggingCfg = LoggingCfg()

    # Private attribute (not a field); where the config was read from
    _config_dir: Optional[Path] = PrivateAttr(default=None)

    @classmethod
    def from_toml(cls, path: str | os.PathLike[str]) -> "RootCfg":
        try:
            import tomllib  # py>=3.11
        except ImportError:
            import tomli as tomllib

        p = Path(path)

        def _parse_raw_dict() -> dict:
            # 1) Try normal binary parse
            try:
                with p.open("rb") as f:
                    return tomllib.load(f)
            except tomllib.TOMLDecodeError:
                pass

            # 2) Retry: decode with utf-8-sig (strips BOM), strip accidental wrappers, then loads()
            text = p.read_text(encoding="utf-8-sig", errors="replace")
            cleaned = text.strip()
            if cleaned.startswith("```"):
                cleaned = cleaned.lstrip("`").strip()
                if cleaned.endswith("```"):
                    cleaned = cleaned.rstrip("`").strip()
            cleaned = cleaned.lstrip("\ufeff\u200b\u200c\u200d\u2060")

            try:
                return tomllib.loads(cleaned)
            except tomllib.TOMLDecodeError as e:
                snippet = cleaned[:80].replace("\n", "\\n")
                raise RuntimeError(
                    f"Failed to parse TOML at {p} after BOM/cleanup. "
                    f"First chars: {snippet!r}"
                ) from e

        raw = _parse_raw_dict()

        # missing sections fall back to model defaults
        for section in ("env", "summaries", "axis", "palette", "logging"):
            raw.setdefault(section, {})

        cfg = cls(
            env=EnvCfg(**raw["env"]),
            summaries=SummariesCfg(**raw["summaries"]),
            axis=AxisCfg(**raw["axis"]),
            palette=PaletteCfg(**raw["palette"]),
            logging=LoggingCfg(**raw["logging"]),
        )
        cfg._config_dir = p.parent.resolve()
        return cfg

    @classmethod
    def load(cls, path: str | None = None) -> "RootCfg":
        final = Path(path or os.environ.get("CHARTCORE_CFG", "config/config.toml")).resolve()
        if path is None and not final.exists():
            return cls()
        return cls.from_toml(final)


def load_config(path: str | None = None) -> RootCfg:
    return RootCfg.load(path)
