"""
SessionLib - Editing session and configuration

This module provides the EditingSession that owns an image and its history,
and the EditorConfig it is built from.
"""

from PE_Libs.SessionLib.editor_config import EditorConfig, load_config, save_config
from PE_Libs.SessionLib.editing_session import EditingSession

__all__ = [
    "EditorConfig",
    "load_config",
    "save_config",
    "EditingSession",
]
