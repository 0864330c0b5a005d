"""
HistoryLib - Bounded undo/redo history for Patch Editor.
"""

from PE_Libs.HistoryLib.operation_history import BoundedStack, OperationHistory

__all__ = [
    "BoundedStack",
    "OperationHistory",
]
