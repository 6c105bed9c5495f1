"""Compiler invocation package"""
from .languages import LANGUAGES, LANGUAGE_FLAGS, get_language_flag
from .command_builder import build_command, format_command
from .process_runner import ExecutionResult, ProcessRunner, PROTOC_EXECUTABLE
from .compile_service import CompileService, GenerationOutcome, validate_selection

__all__ = [
    'LANGUAGES', 'LANGUAGE_FLAGS', 'get_language_flag',
    'build_command', 'format_command',
    'ExecutionResult', 'ProcessRunner', 'PROTOC_EXECUTABLE',
    'CompileService', 'GenerationOutcome', 'validate_selection'
]
