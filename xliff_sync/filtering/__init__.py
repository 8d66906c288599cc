"""Translation unit filtering and note overrides."""

from .unit_filter import TranslationUnitFilter, should_exclude, is_action_extension_file
from .comment_overrides import CommentOverrideStore

__all__ = [
    "TranslationUnitFilter",
    "should_exclude",
    "is_action_extension_file",
    "CommentOverrideStore",
]
