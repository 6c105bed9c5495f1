"""Directory selection and the .proto checklist"""
import tkinter as tk
from tkinter import ttk, filedialog
from typing import TYPE_CHECKING, Dict

from protoc_gui.utils.dialogs import ask_directory

if TYPE_CHECKING:
    from protoc_gui.gui.main_window import ProtocGUI

INPUT_DIALOG_TITLE = "Protoc files directory"
OUTPUT_DIALOG_TITLE = "Output files directory"


class FileManager:
    """Handles directory selection and the per-file checkboxes"""

    def __init__(self, gui: "ProtocGUI"):
        self.gui = gui

        # Connect button commands
        self.gui.btn_select_input.config(command=self.browse_input_folder)
        self.gui.btn_select_output.config(command=self.browse_output_folder)

    def browse_input_folder(self) -> None:
        """Open folder browser and hand the outcome to the controller"""
        result = ask_directory(INPUT_DIALOG_TITLE, filedialog.askdirectory)
        self.gui.controller.on_input_directory(result)

    def browse_output_folder(self) -> None:
        result = ask_directory(OUTPUT_DIALOG_TITLE, filedialog.askdirectory)
        self.gui.controller.on_output_directory(result)

    def render_file_list(self, input_files: Dict[str, bool]) -> None:
        """Rebuild the checkbox list from the selection state"""
        for child in self.gui.file_frame.winfo_children():
            child.destroy()

        if not input_files:
            ttk.Label(self.gui.file_frame, text="(No .proto files found)").pack(anchor="w")
            return

        for file_name in sorted(input_files):
            var = tk.BooleanVar(value=input_files[file_name])
            ttk.Checkbutton(
                self.gui.file_frame,
                text=file_name,
                variable=var,
                command=lambda n=file_name, v=var: self.gui.controller.on_file_toggled(n, v.get())
            ).pack(anchor="w", padx=4)
