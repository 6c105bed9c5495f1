"""Utilities package"""
from .file_scanner import ProtoFileScanner
from .format_utils import RESULT_WIDTH, chunk_text, wrap_to_width, render_result
from .dialogs import DialogResult, ask_directory

__all__ = [
    'ProtoFileScanner', 'RESULT_WIDTH', 'chunk_text', 'wrap_to_width',
    'render_result', 'DialogResult', 'ask_directory'
]
