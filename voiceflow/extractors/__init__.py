"""Per-intent entity extractors for voice commands."""

from .assign_extractor import AssignExtractor
from .base import Extractor, first_match, normalize
from .brief_extractor import BriefExtractor
from .navigation_extractor import NavigationExtractor
from .project_extractor import ProjectExtractor
from .sow_extractor import SowExtractor
from .stage_extractor import StageExtractor
from .status_extractor import StatusExtractor, is_mark_or_set, match_direct_action
from .task_extractor import TaskExtractor

__all__ = [
    "AssignExtractor",
    "BriefExtractor",
    "Extractor",
    "NavigationExtractor",
    "ProjectExtractor",
    "SowExtractor",
    "StageExtractor",
    "StatusExtractor",
    "TaskExtractor",
    "first_match",
    "is_mark_or_set",
    "match_direct_action",
    "normalize",
]
