import threading

from protoc_gui.compiler.compile_service import CompileService
from protoc_gui.compiler.process_runner import ExecutionResult
from protoc_gui.controller.compile_controller import CompileController
from protoc_gui.utils.dialogs import DialogResult
from protoc_gui.infrastructure.interfaces import ICommandRunner


class FakeButton:
    def __init__(self):
        self.options = {}

    def config(self, **kwargs):
        self.options.update(kwargs)


class FakeRoot:
    def after(self, ms, func):
        func()


class FakeFileManager:
    def __init__(self):
        self.rendered = None

    def render_file_list(self, input_files):
        self.rendered = dict(input_files)


class FakeGUI:
    def __init__(self):
        self.root = FakeRoot()
        self.btn_generate = FakeButton()
        self.file_manager = FakeFileManager()
        self.input_dir = None
        self.input_error = None
        self.output_dir = None
        self.results = []
        self.enabled_states = []

    def show_input_directory(self, path):
        self.input_dir = path

    def show_input_error(self, text):
        self.input_error = text

    def show_output_directory(self, path):
        self.output_dir = path

    def show_result(self, text):
        self.results.append(text)

    def set_generate_enabled(self, enabled):
        self.enabled_states.append(enabled)


class BlockingRunner(ICommandRunner):
    """Holds the worker inside run() until released."""

    def __init__(self):
        self.started = threading.Event()
        self.release = threading.Event()
        self.calls = 0

    def run(self, executable, args):
        self.calls += 1
        self.started.set()
        self.release.wait(5)
        return ExecutionResult(stdout="done")


def _controller(runner):
    gui = FakeGUI()
    return gui, CompileController(gui, CompileService(runner=runner))


def test_generate_button_is_wired(fake_runner):
    gui, controller = _controller(fake_runner)

    assert gui.btn_generate.options["command"] == controller.action_generate


def test_directory_scan_registers_proto_files(proto_dir, fake_runner):
    gui, controller = _controller(fake_runner)

    controller.on_input_directory(DialogResult.selected(str(proto_dir)))

    assert controller.context.input_dir == str(proto_dir)
    assert controller.context.input_files == {"a.proto": True, "b.proto": True}
    assert gui.file_manager.rendered == {"a.proto": True, "b.proto": True}
    assert gui.input_dir == str(proto_dir)


def test_cancelled_dialog_changes_nothing(proto_dir, fake_runner):
    gui, controller = _controller(fake_runner)
    controller.on_input_directory(DialogResult.selected(str(proto_dir)))

    controller.on_input_directory(DialogResult.cancelled())
    controller.on_output_directory(DialogResult.cancelled())

    assert controller.context.input_dir == str(proto_dir)
    assert controller.context.output_dir is None


def test_failed_dialog_is_shown_not_raised(fake_runner, capsys):
    gui, controller = _controller(fake_runner)

    controller.on_input_directory(DialogResult.failed("boom"))

    assert gui.input_error == "boom"
    assert controller.context.input_dir is None
    assert "[ERROR] Directory dialog failed: boom" in capsys.readouterr().out


def test_unreadable_directory_populates_nothing(tmp_path, fake_runner):
    gui, controller = _controller(fake_runner)

    controller.on_input_directory(DialogResult.selected(str(tmp_path / "gone")))

    assert "gone" in gui.input_error
    assert not gui.input_error.startswith("[ERROR]")
    assert controller.context.input_files == {}
    assert gui.file_manager.rendered is None


def test_generate_runs_in_worker_and_reenables_button(proto_dir, tmp_path, fake_runner):
    gui, controller = _controller(fake_runner)
    controller.on_input_directory(DialogResult.selected(str(proto_dir)))
    controller.on_file_toggled("b.proto", False)
    controller.on_output_directory(DialogResult.selected(str(tmp_path)))
    controller.on_language("Python")

    controller.action_generate()
    controller._worker.join(5)

    executable, args = fake_runner.calls[0]
    assert executable == "protoc"
    assert args[0].endswith("a.proto")
    assert not any(arg.endswith("b.proto") for arg in args)
    assert args[-2:] == ["--python_out", str(tmp_path)]
    assert gui.enabled_states == [False, True]
    assert gui.results[-1].startswith("[SUCCESS]")
    assert not controller.busy


def test_validation_errors_reach_result_label(fake_runner):
    gui, controller = _controller(fake_runner)

    controller.action_generate()
    controller._worker.join(5)

    assert fake_runner.calls == []
    assert gui.results[-1].splitlines() == [
        "[ERROR] Input directory not selected",
        "[ERROR] Select at least 1 input file",
        "[ERROR] Output directory not selected",
        "[ERROR] Output language not selected",
    ]


def test_second_request_while_running_is_rejected(proto_dir, tmp_path, capsys):
    runner = BlockingRunner()
    gui, controller = _controller(runner)
    controller.on_input_directory(DialogResult.selected(str(proto_dir)))
    controller.on_output_directory(DialogResult.selected(str(tmp_path)))
    controller.on_language("C++")

    controller.action_generate()
    assert runner.started.wait(5)
    first_worker = controller._worker
    controller.action_generate()
    runner.release.set()
    first_worker.join(5)

    assert runner.calls == 1
    assert controller._worker is first_worker
    assert "[WARN] protoc is still running" in capsys.readouterr().out
    assert not controller.busy


def test_failed_output_dialog_shows_raw_reason(fake_runner):
    gui, controller = _controller(fake_runner)

    controller.on_output_directory(DialogResult.failed("dialog unavailable"))

    assert gui.results == ["dialog unavailable"]
    assert controller.context.output_dir is None
