from __future__ import annotations


class AnalysisError(RuntimeError):
    """Fatal condition that stops the whole analysis."""

    def __init__(self, path: str, message: str):
        super().__init__(f"{message} '{path}'")
        self.path = path


class DirectoryOpenError(AnalysisError):
    def __init__(self, path: str):
        super().__init__(path, "could not open directory")


class TextFileOpenError(AnalysisError):
    def __init__(self, path: str):
        super().__init__(path, "could not open file")
