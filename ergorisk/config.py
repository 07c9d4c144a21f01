"""Configuration settings for the ergonomics risk engine"""
import os
from typing import Dict, Any, Optional

# Logging
LOG_LEVEL = os.getenv("ERGORISK_LOG_LEVEL", "INFO")

# Workspace geometry. Ideal desk height = user height * ratio; a rough
# approximation, tune per population.
DESK_HEIGHT_RATIO = float(os.getenv("ERGORISK_DESK_HEIGHT_RATIO", "0.45"))

# Optional override for the recommendation template catalogue
TEMPLATES_PATH: Optional[str] = os.getenv("ERGORISK_TEMPLATES_PATH") or None


def get_config() -> Dict[str, Any]:
    """Get all configuration as a dictionary"""
    return {
        "log_level": LOG_LEVEL,
        "desk_height_ratio": DESK_HEIGHT_RATIO,
        "templates_path": TEMPLATES_PATH,
    }
