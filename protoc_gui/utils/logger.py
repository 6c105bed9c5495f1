import queue
import sys

class LogQueue:
    """
    Singleton-like helper to redirect stdout/stderr to a queue.
    Decouples logging mechanism from Tkinter. Everything written is also
    echoed to the real console.
    """
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super(LogQueue, cls).__new__(cls)
            cls._instance.queue = queue.Queue()
            cls._instance.is_redirected = False
            cls._instance.console = sys.__stdout__
        return cls._instance

    def write(self, msg):
        if not msg:
            return
        self.queue.put(msg)
        if self.console is not None:
            self.console.write(msg)

    def flush(self):
        if self.console is not None:
            self.console.flush()

    def get_queue(self) -> queue.Queue:
        return self.queue

    def redirect_sys_output(self):
        if not self.is_redirected:
            sys.stdout = self
            sys.stderr = self
            self.is_redirected = True

    def restore_sys_output(self):
        if self.is_redirected:
            sys.stdout = sys.__stdout__
            sys.stderr = sys.__stderr__
            self.is_redirected = False
