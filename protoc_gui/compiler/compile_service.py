from typing import List, Optional

from protoc_gui.compiler.command_builder import build_command, format_command
from protoc_gui.compiler.languages import get_language_flag
from protoc_gui.compiler.process_runner import ExecutionResult, ProcessRunner, PROTOC_EXECUTABLE
from protoc_gui.controller.context import SelectionState
from protoc_gui.infrastructure.interfaces import ICommandRunner
from protoc_gui.utils.format_utils import RESULT_WIDTH, render_result

ERROR_NO_INPUT_DIR = "[ERROR] Input directory not selected"
ERROR_NO_INPUT_FILES = "[ERROR] Select at least 1 input file"
ERROR_NO_OUTPUT_DIR = "[ERROR] Output directory not selected"
ERROR_NO_LANGUAGE = "[ERROR] Output language not selected"


def validate_selection(state: SelectionState) -> List[str]:
    """Messages for every missing choice, in display order."""
    errors = []
    if not state.input_dir:
        errors.append(ERROR_NO_INPUT_DIR)
    if not state.selected_files():
        errors.append(ERROR_NO_INPUT_FILES)
    if not state.output_dir:
        errors.append(ERROR_NO_OUTPUT_DIR)
    if not get_language_flag(state.output_language):
        errors.append(ERROR_NO_LANGUAGE)
    return errors


class GenerationOutcome:
    """What one press of Generate produced."""

    def __init__(self, errors: List[str],
                 result: Optional[ExecutionResult] = None, width: int = RESULT_WIDTH):
        self.errors = errors
        self.result = result
        self.width = width

    @property
    def ok(self) -> bool:
        return not self.errors and self.result is not None and self.result.ok

    @property
    def display_text(self) -> str:
        if self.errors:
            return "\n".join(self.errors)
        if self.result is None:
            return ""
        return render_result(self.result, self.width)


class CompileService:
    """
    Validates a selection, builds the protoc command and runs it.
    Has no UI dependencies; the GUI controller and the CLI both use it.
    """

    def __init__(self, runner: Optional[ICommandRunner] = None,
                 executable: str = PROTOC_EXECUTABLE, width: int = RESULT_WIDTH):
        self.runner = runner or ProcessRunner()
        self.executable = executable
        self.width = width

    def generate(self, state: SelectionState) -> GenerationOutcome:
        errors = validate_selection(state)
        if errors:
            for error in errors:
                print(error)
            return GenerationOutcome(errors, width=self.width)

        command = build_command(
            state.input_dir,
            state.input_files,
            state.output_dir,
            get_language_flag(state.output_language),
        )
        print(f"[PROTOC] {format_command(self.executable, command)}")

        result = self.runner.run(self.executable, command)

        if result.ok:
            print(f"[SUCCESS] Generated {state.output_language} code for "
                  f"{len(state.selected_files())} file(s) in {state.output_dir}")
        else:
            print(f"[ERROR] protoc failed: {result.exit_error}")
            if result.stderr:
                print(result.stderr)
            if result.stdout:
                print(result.stdout)

        return GenerationOutcome([], result=result, width=self.width)
