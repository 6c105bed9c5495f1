from typing import List, TYPE_CHECKING

if TYPE_CHECKING:
    from protoc_gui.compiler.process_runner import ExecutionResult

# Column width used for compiler error text in the result label
RESULT_WIDTH = 600


def chunk_text(text: str, width: int = RESULT_WIDTH) -> List[str]:
    """Split text into consecutive pieces of at most `width` characters."""
    if width < 1:
        raise ValueError(f"width must be >= 1, got {width}")
    if len(text) <= width:
        return [text]
    return [text[i:i + width] for i in range(0, len(text), width)]


def wrap_to_width(text: str, width: int = RESULT_WIDTH) -> str:
    """
    Hard-wrap text every `width` characters.
    Does not look at words or existing line breaks, so a chunk may end
    mid-word.
    """
    return "\n".join(chunk_text(text, width))


def render_result(result: "ExecutionResult", width: int = RESULT_WIDTH) -> str:
    """
    Text shown in the result label: wrapped stderr, then stdout as is.
    A failed run starts with the exit error.
    """
    if result.ok and not result.stderr and not result.stdout:
        return "[SUCCESS] protoc finished without output"
    text = wrap_to_width(result.stderr, width) + "\n" + result.stdout
    if not result.ok:
        text = f"[ERROR] {result.exit_error}\n" + text
    return text
