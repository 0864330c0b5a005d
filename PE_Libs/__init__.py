"""
PE_Libs - Patch Editor Library Modules

This package contains core functionality for the Patch Editor project,
organized into specialized sub-packages:

- ImageEditingLib: Pixel buffers, patches, filters, compositing and image I/O
- HistoryLib: Bounded undo/redo operation history
- SessionLib: Editing session and editor configuration
"""

__version__ = "0.1.0"
