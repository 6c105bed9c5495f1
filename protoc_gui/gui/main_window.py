#!/usr/bin/env python3
"""Main GUI window for Proto GUI"""
import tkinter as tk
from tkinter import ttk
from typing import Optional

from protoc_gui.compiler.compile_service import CompileService
from protoc_gui.compiler.languages import LANGUAGES
from protoc_gui.compiler.process_runner import PROTOC_EXECUTABLE
from protoc_gui.controller.compile_controller import CompileController
from protoc_gui.gui.file_manager import FileManager
from protoc_gui.gui.thread_safe_console import ThreadSafeConsole

# Global UI constants
MAIN_WINDOW_TITLE = "Proto GUI"
MAIN_WINDOW_GEOMETRY = "700x600"
INPUT_PLACEHOLDER = "(Select proto files directory)"
OUTPUT_PLACEHOLDER = "(Select output directory)"
LOG_FRAME_HEIGHT = 8


class ProtocGUI:
    """Main window: input directory, output directory/language, Generate"""

    def __init__(self, root: tk.Tk, protoc: str = PROTOC_EXECUTABLE,
                 service: Optional[CompileService] = None):
        self.root = root
        self.root.title(MAIN_WINDOW_TITLE)
        self.root.geometry(MAIN_WINDOW_GEOMETRY)

        # UI variables
        self.input_path_var = tk.StringVar(value=INPUT_PLACEHOLDER)
        self.input_error_var = tk.StringVar()
        self.output_path_var = tk.StringVar(value=OUTPUT_PLACEHOLDER)
        self.result_var = tk.StringVar()

        self._setup_styles()
        self._setup_input_frame()
        ttk.Separator(root, orient="horizontal").pack(fill="x", padx=10, pady=4)
        self._setup_output_frame()
        ttk.Separator(root, orient="horizontal").pack(fill="x", padx=10, pady=4)
        self._setup_log_frame()
        self._setup_submit_frame()

        # Sub-components AFTER all widgets are created
        self.controller = CompileController(self, service or CompileService(executable=protoc))
        self.file_manager = FileManager(self)

        self.console = ThreadSafeConsole()
        self.console.set_target(self.text_log)
        self.console.redirect_sys_output()
        self.console.start_polling(self.root)

    def _setup_styles(self) -> None:
        style = ttk.Style()
        try:
            style.theme_use("clam")
        except tk.TclError:
            pass
        style.configure("Accent.TButton", foreground="white", background="#007acc")
        style.map("Accent.TButton", background=[("active", "#2b88d8")])
        style.configure("Header.TLabel", font=("TkDefaultFont", 10, "bold underline"))
        style.configure("Error.TLabel", foreground="red")

    def _setup_input_frame(self) -> None:
        """Header, chosen directory, select button and the file checklist"""
        frame = ttk.Frame(self.root)
        frame.pack(fill="x", padx=10, pady=(8, 0))

        ttk.Label(frame, text="Protocol Buffer directory", style="Header.TLabel").pack(anchor="w")

        row = ttk.Frame(frame)
        row.pack(fill="x", pady=4)
        ttk.Label(row, textvariable=self.input_path_var).pack(side="left")
        self.btn_select_input = ttk.Button(row, text="Select input directory", style="Accent.TButton")
        self.btn_select_input.pack(side="right")

        self.file_frame = ttk.Frame(frame)
        self.file_frame.pack(fill="x")

        ttk.Label(frame, textvariable=self.input_error_var, style="Error.TLabel").pack(anchor="w")

    def _setup_output_frame(self) -> None:
        frame = ttk.Frame(self.root)
        frame.pack(fill="x", padx=10)

        ttk.Label(frame, text="Output directory", style="Header.TLabel").pack(anchor="w")

        row = ttk.Frame(frame)
        row.pack(fill="x", pady=4)
        ttk.Label(row, textvariable=self.output_path_var).pack(side="left")
        self.btn_select_output = ttk.Button(row, text="Select output directory", style="Accent.TButton")
        self.btn_select_output.pack(side="right")

        lang_row = ttk.Frame(frame)
        lang_row.pack(fill="x", pady=4)
        ttk.Label(lang_row, text="Output language").pack(side="left")
        self.language_combo = ttk.Combobox(lang_row, values=LANGUAGES, state="readonly", width=16)
        self.language_combo.pack(side="right")
        self.language_combo.bind(
            "<<ComboboxSelected>>",
            lambda event: self.controller.on_language(self.language_combo.get())
        )

    def _setup_log_frame(self) -> None:
        """Log panel fed by ThreadSafeConsole"""
        log_frame = ttk.LabelFrame(self.root, text="Log")
        log_frame.pack(side="bottom", fill="both", expand=True, padx=10, pady=(0, 8))

        self.text_log = tk.Text(log_frame, height=LOG_FRAME_HEIGHT, state="disabled", wrap="word")
        self.text_log.tag_config("error", foreground="red")
        self.text_log.tag_config("warn", foreground="#b36b00")
        self.text_log.tag_config("success", foreground="#2e7d32")
        self.text_log.tag_config("command", foreground="#007acc")
        self.text_log.tag_config("info", foreground="gray20")

        log_scroll = ttk.Scrollbar(log_frame, orient="vertical", command=self.text_log.yview)
        self.text_log.config(yscrollcommand=log_scroll.set)
        self.text_log.pack(side="left", fill="both", expand=True, padx=2, pady=2)
        log_scroll.pack(side="right", fill="y")

    def _setup_submit_frame(self) -> None:
        """Result label above the Generate button"""
        frame = ttk.Frame(self.root)
        frame.pack(side="bottom", fill="x", padx=10, pady=8)

        ttk.Label(frame, textvariable=self.result_var, justify="left").pack(anchor="w", fill="x")
        self.btn_generate = ttk.Button(frame, text="Generate", style="Accent.TButton")
        self.btn_generate.pack(fill="x", pady=(6, 0))

    # Called by CompileController on the Tk thread
    def show_input_directory(self, path: str) -> None:
        self.input_path_var.set(path)

    def show_input_error(self, text: str) -> None:
        self.input_error_var.set(text)

    def show_output_directory(self, path: str) -> None:
        self.output_path_var.set(path)

    def show_result(self, text: str) -> None:
        self.result_var.set(text)

    def set_generate_enabled(self, enabled: bool) -> None:
        self.btn_generate.config(state="normal" if enabled else "disabled")
