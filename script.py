import argparse
import sys
from protoc_gui.compiler.compile_service import CompileService
from protoc_gui.compiler.languages import LANGUAGES
from protoc_gui.compiler.process_runner import PROTOC_EXECUTABLE
from protoc_gui.controller.context import SelectionState
from protoc_gui.utils.file_scanner import ProtoFileScanner

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Proto GUI headless CLI")

    # Input/Output
    parser.add_argument("-i", "--input_dir", type=str, help="Directory holding the .proto files")
    parser.add_argument("-o", "--output_dir", type=str, help="Directory for the generated code")
    parser.add_argument("-l", "--language", type=str, choices=LANGUAGES, help="Output language")

    # Selection
    parser.add_argument("-x", "--exclude", type=str, action="append", default=[],
                        help="File name to leave out (repeatable)")

    parser.add_argument("--protoc", type=str, default=PROTOC_EXECUTABLE, help="protoc executable")
    return parser

def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    state = SelectionState()
    if args.input_dir:
        try:
            file_names = ProtoFileScanner.list_proto_files(args.input_dir)
        except OSError as e:
            print(f"[ERROR] Could not read {args.input_dir}: {e}")
            return 1
        state.set_input_directory(args.input_dir, file_names)
        for name in args.exclude:
            if name in state.input_files:
                state.set_file_included(name, False)
            else:
                print(f"[WARN] --exclude {name}: no such .proto file in {args.input_dir}")
    state.output_dir = args.output_dir
    state.output_language = args.language

    outcome = CompileService(executable=args.protoc).generate(state)
    if outcome.ok:
        print(outcome.display_text)
    return 0 if outcome.ok else 1

if __name__ == "__main__":
    sys.exit(main())
