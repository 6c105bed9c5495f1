import threading
from typing import TYPE_CHECKING, Optional

from protoc_gui.compiler.compile_service import CompileService, GenerationOutcome
from protoc_gui.controller.context import SelectionState
from protoc_gui.utils.dialogs import DialogResult
from protoc_gui.utils.file_scanner import ProtoFileScanner

if TYPE_CHECKING:
    from protoc_gui.gui.main_window import ProtocGUI


class CompileController:
    """
    Handles the GUI events (directory picks, checkboxes, language, Generate).
    Delegates the compile itself to CompileService.
    Responsible for Threading and UI Updates.
    Owns the Application State (Context).
    """

    def __init__(self, gui: "ProtocGUI", service: Optional[CompileService] = None):
        self.gui = gui
        self.service = service or CompileService()
        self.context = SelectionState()
        self._busy = False
        self._worker: Optional[threading.Thread] = None

        # Connect button commands
        self.gui.btn_generate.config(command=self.action_generate)

    @property
    def busy(self) -> bool:
        return self._busy

    def on_input_directory(self, result: DialogResult) -> None:
        """Scan the chosen directory and show its .proto files."""
        if result.is_cancelled:
            return
        if result.is_failed:
            print(f"[ERROR] Directory dialog failed: {result.reason}")
            self.gui.show_input_error(result.reason)
            return

        folder = result.path
        try:
            file_names = ProtoFileScanner.list_proto_files(folder)
        except OSError as e:
            print(f"[ERROR] Could not read {folder}: {e}")
            self.gui.show_input_error(str(e))
            return

        self.context.set_input_directory(folder, file_names)
        self.gui.show_input_error("")
        self.gui.show_input_directory(folder)
        self.gui.file_manager.render_file_list(self.context.input_files)
        print(f"[INFO] Found {len(file_names)} .proto file(s) in {folder}")

    def on_output_directory(self, result: DialogResult) -> None:
        if result.is_cancelled:
            return
        if result.is_failed:
            print(f"[ERROR] Directory dialog failed: {result.reason}")
            self.gui.show_result(result.reason)
            return

        self.context.output_dir = result.path
        self.gui.show_output_directory(result.path)

    def on_language(self, label: str) -> None:
        self.context.output_language = label or None

    def on_file_toggled(self, file_name: str, included: bool) -> None:
        self.context.set_file_included(file_name, included)

    def action_generate(self) -> None:
        """Button callback: Generate"""
        if self._busy:
            print("[WARN] protoc is still running, request ignored")
            return

        self._busy = True
        self.gui.set_generate_enabled(False)
        self.gui.show_result("Running protoc...")
        snapshot = self.context.copy()

        def worker():
            try:
                outcome = self.service.generate(snapshot)
            except Exception as e:
                print(f"[ERROR] Generation failed: {e}")
                outcome = GenerationOutcome([f"[ERROR] Generation failed: {e}"])
            self.gui.root.after(0, lambda: self._finish(outcome))

        self._worker = threading.Thread(target=worker, daemon=True)
        self._worker.start()

    def _finish(self, outcome: GenerationOutcome) -> None:
        """Runs on the Tk thread once the worker is done."""
        self._busy = False
        self.gui.set_generate_enabled(True)
        self.gui.show_result(outcome.display_text)
