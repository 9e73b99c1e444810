"""Exceptions raised by the note graph pipeline."""


class NoteGraphError(Exception):
    """Base class for errors that abort a graph build."""


class OutputError(NoteGraphError):
    """An output artefact could not be written."""
