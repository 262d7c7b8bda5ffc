import yaml
import os
from typing import Optional, Dict, Any
from pydantic import BaseModel, Field, field_validator


class ScoreWeights(BaseModel):
    """Target contribution of each sub-score to the 0-100 total (must sum to 100)."""
    cta: float = 20.0
    benefit: float = 20.0
    clarity: float = 15.0
    numeric: float = 10.0
    emotion: float = 10.0
    category: float = 25.0


class ScorerConfig(BaseModel):
    """
    Configuration for the copy scoring engine.

    Keyword tables are fixed in core.scorer.keyword_tables; only the
    aggregation weights and the recommendation threshold are tunable here.
    """
    weights: ScoreWeights = Field(default_factory=ScoreWeights)

    # A sub-score below this value (on its own 0-20 / 0-25 scale) yields a recommendation
    recommendation_threshold: float = 12.0

    @field_validator("weights")
    @classmethod
    def weights_sum_to_100(cls, value: ScoreWeights) -> ScoreWeights:
        total = sum(value.model_dump().values())
        if abs(total - 100.0) > 1e-6:
            raise ValueError(f"score weights must sum to 100, got {total}")
        return value


class WebConfig(BaseModel):
    """Web server configuration."""
    host: str = "127.0.0.1"
    port: int = 8787


class AppConfig(BaseModel):
    scorer: ScorerConfig = Field(default_factory=ScorerConfig)
    web: WebConfig = Field(default_factory=WebConfig)


def _apply_env_overrides(data: Dict[str, Any]) -> Dict[str, Any]:
    """Apply environment variable overrides on top of the YAML values."""
    env_host = os.environ.get("WEB_HOST")
    if env_host:
        data.setdefault('web', {})
        data['web']['host'] = env_host

    env_port = os.environ.get("WEB_PORT")
    if env_port:
        data.setdefault('web', {})
        data['web']['port'] = int(env_port)

    env_threshold = os.environ.get("ASO_RECOMMENDATION_THRESHOLD")
    if env_threshold:
        data.setdefault('scorer', {})
        data['scorer']['recommendation_threshold'] = float(env_threshold)

    return data


def load_config(config_path: Optional[str] = None) -> AppConfig:
    """
    Load AppConfig from YAML.

    An explicitly requested file must exist. Without a path, config.yaml in
    the working directory or the project root is used when present;
    otherwise the defaults apply.
    """
    if config_path is not None:
        if not os.path.exists(config_path):
            raise FileNotFoundError(f"Config file not found: {config_path}")
    else:
        base_dir = os.path.dirname(os.path.abspath(__file__))
        candidates = ["config.yaml", os.path.join(base_dir, "..", "config.yaml")]
        config_path = next((p for p in candidates if os.path.exists(p)), None)

    data: Dict[str, Any] = {}
    if config_path is not None:
        with open(config_path, "r") as f:
            data = yaml.safe_load(f) or {}

    data = _apply_env_overrides(data)

    return AppConfig(**data)
