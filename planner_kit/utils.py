import yaml
from pathlib import Path
from typing import Any, Dict, Optional
from .models import DocumentProfile, DocumentProfiles, PlannerPreferences, TabPreferences

CONFIG_DIR = Path("config")


def _load_yaml(path: Path, label: str) -> Dict[str, Any]:
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"{label} file not found at {path}")

    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f)

    # An empty file is an empty mapping
    return data or {}


def load_document_profiles(path: Path = CONFIG_DIR / "document_profiles.yaml") -> DocumentProfiles:
    """Loads document profiles from YAML file."""
    return DocumentProfiles(**_load_yaml(path, "Document profiles"))


def get_profile(name: str = "letter", path: Path = CONFIG_DIR / "document_profiles.yaml") -> DocumentProfile:
    """Helper to get a specific document profile."""
    profiles = load_document_profiles(path)
    if name not in profiles.profiles:
        raise ValueError(f"Profile '{name}' not found. Available: {list(profiles.profiles.keys())}")
    return profiles.profiles[name]


def merge_preferences(*layers: Optional[Dict[str, Any]]) -> PlannerPreferences:
    """
    Resolves planner preferences once: later layers override earlier ones,
    unset fields keep their defaults. ``None`` layers are skipped.
    """
    merged: Dict[str, Any] = {}
    for layer in layers:
        if layer:
            merged.update({k: v for k, v in layer.items() if v is not None})
    return PlannerPreferences(**merged)


def load_preferences(path: Path = CONFIG_DIR / "preferences.yaml", **overrides: Any) -> PlannerPreferences:
    """Loads planner preferences from YAML file, applying keyword overrides on top."""
    data = _load_yaml(path, "Preferences")
    return merge_preferences(data.get("planner"), overrides)


def load_tab_preferences(path: Path = CONFIG_DIR / "preferences.yaml") -> TabPreferences:
    data = _load_yaml(path, "Preferences")
    return TabPreferences(**(data.get("tabs") or {}))
