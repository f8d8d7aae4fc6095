"""socialprobe - username presence and profile lookup across platforms."""

from socialprobe.models.platform import Platform, Provenance
from socialprobe.models.profile import Profile
from socialprobe.models.result import ProfileQuery, ProfileResult
from socialprobe.config import ProbeConfig
from socialprobe.core.orchestrator import ProfileService
from socialprobe.core.exporter import to_json, to_dict, save_json, merge_results

__version__ = "0.1.0"

__all__ = [
    # Main interface
    "ProfileService",
    "ProbeConfig",
    # Models
    "Platform",
    "Provenance",
    "Profile",
    "ProfileQuery",
    "ProfileResult",
    # Export utilities
    "to_json",
    "to_dict",
    "save_json",
    "merge_results",
    "__version__",
]
