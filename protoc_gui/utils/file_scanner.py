import os
from typing import List


class ProtoFileScanner:
    """
    Finds the protocol buffer definitions in a directory.
    Decouples file system access from the GUI.
    """

    SUPPORTED_EXTENSIONS = (".proto",)

    @classmethod
    def list_proto_files(cls, path: str) -> List[str]:
        """
        Lists the .proto files directly inside a directory (no recursion).

        Args:
            path (str): The directory to scan.

        Returns:
            List[str]: Sorted file names, without the directory part.

        Raises:
            OSError: If the directory cannot be read.
        """
        names = []
        with os.scandir(path) as it:
            for entry in it:
                if entry.is_dir():
                    continue
                if entry.name.endswith(cls.SUPPORTED_EXTENSIONS):
                    names.append(entry.name)
        return sorted(names)

