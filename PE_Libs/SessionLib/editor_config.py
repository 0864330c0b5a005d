"""
Editor configuration for Patch Editor.

EditorConfig gathers the settings a session is built from: history capacity,
the redo policy and the filter compatibility switches. It round-trips through
plain dictionaries and JSON files.

Classes:
    EditorConfig: Session settings

Functions:
    load_config: Read an EditorConfig from a JSON file
    save_config: Write an EditorConfig to a JSON file
"""

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Union

from PE_Libs.ImageEditingLib.filter_engine import FilterOptions
from PE_Libs.constants import (
    BOUNDARY_MODES,
    BOUNDARY_SKIP,
    FIELD_BOUNDARY_MODE,
    FIELD_CLAMP_CONTRAST_LOW,
    FIELD_CLEAR_REDO_ON_APPLY,
    FIELD_HISTORY_CAPACITY,
    FIELD_SATURATE_EDGES,
    STACK_SIZE,
)


@dataclass
class EditorConfig:
    """Configuration for an editing session.

    Attributes:
        history_capacity: Records kept per undo/redo stack (>= 1)
        clear_redo_on_apply: Empty the redo stack when a new operation is applied
        boundary_mode: Convolution boundary handling ('skip', 'renormalize', 'row_break')
        saturate_edges: Clip edge magnitudes at 255 instead of wrapping
        clamp_contrast_low: Clip negative contrast results at 0 instead of wrapping
    """
    history_capacity: int = STACK_SIZE
    clear_redo_on_apply: bool = False
    boundary_mode: str = BOUNDARY_SKIP
    saturate_edges: bool = False
    clamp_contrast_low: bool = False

    def __post_init__(self):
        if isinstance(self.history_capacity, bool) or not isinstance(self.history_capacity, int):
            raise ValueError(
                f"history_capacity must be an integer, got {self.history_capacity!r}"
            )
        if self.history_capacity < 1:
            raise ValueError(f"history_capacity must be >= 1, got {self.history_capacity}")

        for field_name in (FIELD_CLEAR_REDO_ON_APPLY, FIELD_SATURATE_EDGES, FIELD_CLAMP_CONTRAST_LOW):
            value = getattr(self, field_name)
            if not isinstance(value, bool):
                raise ValueError(f"{field_name} must be true or false, got {value!r}")

        if self.boundary_mode not in BOUNDARY_MODES:
            raise ValueError(
                f"Unknown boundary_mode: {self.boundary_mode}. "
                f"Valid modes: {', '.join(BOUNDARY_MODES)}"
            )

    def filter_options(self) -> FilterOptions:
        """Build the FilterOptions these settings describe."""
        return FilterOptions(
            boundary_mode=self.boundary_mode,
            saturate_edges=self.saturate_edges,
            clamp_contrast_low=self.clamp_contrast_low,
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            FIELD_HISTORY_CAPACITY: self.history_capacity,
            FIELD_CLEAR_REDO_ON_APPLY: self.clear_redo_on_apply,
            FIELD_BOUNDARY_MODE: self.boundary_mode,
            FIELD_SATURATE_EDGES: self.saturate_edges,
            FIELD_CLAMP_CONTRAST_LOW: self.clamp_contrast_low,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "EditorConfig":
        """Create from dictionary, ignoring unknown keys."""
        filtered = {k: v for k, v in data.items()
                    if k in cls.__dataclass_fields__}
        return cls(**filtered)


def load_config(file_path: Union[str, Path]) -> EditorConfig:
    """
    Load an EditorConfig from a JSON file.

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the file is not a JSON object or holds invalid values
    """
    path = Path(file_path)
    data = json.loads(path.read_text(encoding="utf-8"))

    if not isinstance(data, dict):
        raise ValueError(f"Config file must contain a JSON object: {path}")

    return EditorConfig.from_dict(data)


def save_config(config: EditorConfig, file_path: Union[str, Path]) -> Path:
    """Write an EditorConfig to a JSON file and return its path."""
    path = Path(file_path)
    path.write_text(json.dumps(config.to_dict(), indent=2), encoding="utf-8")
    return path
