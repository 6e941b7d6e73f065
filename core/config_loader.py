import yaml
import os
from typing import Optional, Dict, Any
from pydantic import BaseModel, Field


class DatabaseConfig(BaseModel):
    url: str


class AggregationWeights(BaseModel):
    """
    Fixed weights for the dimensions that team preferences do not weight.

    Skill/experience/location weights come from each team's preferences.
    """
    availability: float = 0.2
    team_size: float = 0.1


class CandidateDefaults(BaseModel):
    """Values assumed when a user's profile leaves a field unset."""
    experience_level: str = "intermediate"
    timezone: str = "UTC+8"


class RecommendationConfig(BaseModel):
    """Batch recommendation settings."""
    default_limit: int = 10
    max_limit: int = 50
    # 1 = score candidates sequentially; >1 = bounded thread pool
    max_workers: int = 1


class TeamMatchingConfig(BaseModel):
    """
    Top-level team matching configuration.
    """
    enabled: bool = True

    weights: AggregationWeights = Field(default_factory=AggregationWeights)
    candidate_defaults: CandidateDefaults = Field(default_factory=CandidateDefaults)
    recommendations: RecommendationConfig = Field(default_factory=RecommendationConfig)

    # Overrides applied on top of the built-in default team preferences,
    # e.g. {"preferred_team_size": 5}
    default_preferences: Dict[str, Any] = Field(default_factory=dict)


class AppConfig(BaseModel):
    database: DatabaseConfig
    matching: Optional[TeamMatchingConfig] = TeamMatchingConfig()


def load_config(config_path: str = "config.yaml") -> AppConfig:
    # If not found at relative path (e.g. running from root), try path next to the package
    if not os.path.exists(config_path):
        base_dir = os.path.dirname(os.path.abspath(__file__))
        config_path = os.path.join(base_dir, "..", "config.yaml")

    with open(config_path, "r") as f:
        data = yaml.safe_load(f) or {}

    # Allow env var override for DB URL
    env_db_url = os.environ.get("DATABASE_URL")
    if env_db_url:
        if 'database' not in data or data['database'] is None:
            data['database'] = {}
        data['database']['url'] = env_db_url

    # Allow env var override for batch worker count
    env_max_workers = os.environ.get("MATCHING_MAX_WORKERS")
    if env_max_workers:
        if 'matching' not in data or data['matching'] is None:
            data['matching'] = {}
        if 'recommendations' not in data['matching'] or data['matching']['recommendations'] is None:
            data['matching']['recommendations'] = {}
        data['matching']['recommendations']['max_workers'] = int(env_max_workers)

    return AppConfig(**data)
