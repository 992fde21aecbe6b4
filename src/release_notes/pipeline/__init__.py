"""Pipeline - Runs reader, extractor, resolver, assembler and sinks in order."""

from release_notes.pipeline.models import RunOptions
from release_notes.pipeline.pipeline import ReleaseNotesPipeline

__all__ = [
    "ReleaseNotesPipeline",
    "RunOptions",
]
