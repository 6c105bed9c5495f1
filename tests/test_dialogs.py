from protoc_gui.utils.dialogs import DialogResult, ask_directory


def test_selected_path():
    result = ask_directory("Pick", lambda **kwargs: "/home/me/protos")

    assert result == DialogResult.selected("/home/me/protos")
    assert result.is_selected


def test_empty_answer_is_cancel():
    assert ask_directory("Pick", lambda **kwargs: "").is_cancelled
    assert ask_directory("Pick", lambda **kwargs: ()).is_cancelled
    assert ask_directory("Pick", lambda **kwargs: None).is_cancelled


def test_chooser_exception_is_failure_not_crash():
    def broken(**kwargs):
        raise RuntimeError("no display name and no $DISPLAY")

    result = ask_directory("Pick", broken)

    assert result.is_failed
    assert result.reason == "no display name and no $DISPLAY"


def test_title_is_passed_to_chooser():
    seen = {}

    def chooser(**kwargs):
        seen.update(kwargs)
        return "/x"

    ask_directory("Protoc files directory", chooser)

    assert seen["title"] == "Protoc files directory"
