import queue
import tkinter as tk
from protoc_gui.utils.logger import LogQueue


def message_tag(msg: str) -> str:
    """Text widget tag for a log line."""
    upper_msg = msg.upper()
    if "[ERROR]" in upper_msg:
        return "error"
    if "[WARN]" in upper_msg:
        return "warn"
    if "[SUCCESS]" in upper_msg:
        return "success"
    if "[PROTOC]" in upper_msg:
        return "command"
    return "info"


class ThreadSafeConsole:
    """
    UI Bridge that polls the thread-safe LogQueue and updates the Tkinter widget.
    """
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super(ThreadSafeConsole, cls).__new__(cls)
            cls._instance.logger = LogQueue()
            cls._instance.target_widget = None
        return cls._instance

    def set_target(self, widget: tk.Text):
        self.target_widget = widget

    def redirect_sys_output(self):
        self.logger.redirect_sys_output()

    def start_polling(self, root: tk.Tk, interval_ms=100):
        """Start the periodic poll of the queue."""
        def poll():
            try:
                if not root.winfo_exists():
                    return

                q = self.logger.get_queue()
                while True:
                    try:
                        msg = q.get_nowait()
                    except queue.Empty:
                        break
                    self._safe_append(msg)

                root.after(interval_ms, poll)

            except (tk.TclError, RuntimeError):
                # "invalid command name" from Tcl once the window is gone
                self.logger.restore_sys_output()
                return

        root.after(interval_ms, poll)

    def _safe_append(self, msg):
        """Append to widget. Must call in main thread."""
        target = self.target_widget
        if not target:
            return

        try:
            target.config(state="normal")
            target.insert("end", msg, message_tag(msg))
            target.see("end")
            target.config(state="disabled")
        except tk.TclError:
            # Widget might be destroyed
            pass
