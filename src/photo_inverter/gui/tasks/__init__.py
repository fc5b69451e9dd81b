"""Background workers used by the edit view."""

from .invert_render_worker import InvertRenderSignals, InvertRenderWorker

__all__ = ["InvertRenderSignals", "InvertRenderWorker"]
