from typing import Dict, List, Optional


class SelectionState:
    """
    Holds the user's current directory, file and language choices.
    Owned by the controller and passed explicitly to the service.
    """
    def __init__(self):
        self.input_dir: Optional[str] = None
        self.input_files: Dict[str, bool] = {}
        self.output_dir: Optional[str] = None
        self.output_language: Optional[str] = None

    def set_input_directory(self, path: str, file_names: List[str]) -> None:
        """
        Record the scanned input directory.
        New names are registered as included. A rescan of the same directory
        keeps the flags already set; a different directory replaces the set.
        """
        # Unlike the original, which only ever added names, a new directory
        # starts a fresh set so old names are never joined onto it.
        if path != self.input_dir:
            self.input_files = {}
        self.input_dir = path
        for name in file_names:
            self.input_files.setdefault(name, True)

    def set_file_included(self, name: str, included: bool) -> None:
        if name not in self.input_files:
            raise KeyError(name)
        self.input_files[name] = bool(included)

    def copy(self) -> "SelectionState":
        """Independent snapshot, safe to hand to a worker thread."""
        snapshot = SelectionState()
        snapshot.input_dir = self.input_dir
        snapshot.input_files = dict(self.input_files)
        snapshot.output_dir = self.output_dir
        snapshot.output_language = self.output_language
        return snapshot

    def selected_files(self) -> List[str]:
        return sorted(name for name, included in self.input_files.items() if included)
