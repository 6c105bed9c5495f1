import os
from typing import Dict, List


def build_command(input_dir: str, input_files: Dict[str, bool],
                  output_dir: str, output_flag: str) -> List[str]:
    """
    Assemble the protoc argument list.

    Args:
        input_dir (str): Directory holding the .proto files, also used as --proto_path.
        input_files (Dict[str, bool]): Filename -> included flag.
        output_dir (str): Directory the generated code is written to.
        output_flag (str): Language flag such as "--go_out".

    Returns:
        List[str]: Included file paths (sorted by filename), then
        "--proto_path", input_dir, output_flag, output_dir.
    """
    command = [
        os.path.join(input_dir, file_name)
        for file_name in sorted(input_files)
        if input_files[file_name]
    ]
    command += ["--proto_path", input_dir]
    command += [output_flag, output_dir]
    return command


def format_command(executable: str, args: List[str]) -> str:
    """Command line as echoed to the console"""
    return " ".join([executable] + list(args))
