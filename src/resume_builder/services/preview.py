"""Live preview surface for the resume being edited.

The preview holds the most recent rendering of the resume. PDF export
captures whatever is mounted here, so exporting before anything has been
shown is refused.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager

from resume_builder.models.exceptions import PreviewNotRenderedError
from resume_builder.models.resume import Resume
from resume_builder.templates import RenderedResume, get_template

logger = logging.getLogger(__name__)

__all__ = ["PREVIEW_FIRST_MESSAGE", "ResumePreview"]

PREVIEW_FIRST_MESSAGE = "Please preview your resume first before exporting to PDF."

_DIMMED_OPACITY = 0.5


class ResumePreview:
    """The mounted preview of a resume.

    Attributes:
        opacity: Display opacity; lowered while a capture is running.
    """

    def __init__(self) -> None:
        self._rendered: RenderedResume | None = None
        self.opacity: float = 1.0

    @property
    def is_mounted(self) -> bool:
        return self._rendered is not None

    @property
    def element(self) -> RenderedResume:
        """Return the mounted rendering.

        Raises:
            PreviewNotRenderedError: If nothing has been shown yet.
        """
        if self._rendered is None:
            raise PreviewNotRenderedError(PREVIEW_FIRST_MESSAGE)
        return self._rendered

    def show(self, resume: Resume) -> RenderedResume:
        """Render *resume* with its own template style and mount it."""
        self._rendered = get_template(resume.template_style).render(resume)
        logger.debug(
            "Preview rendered with %s template (%d sections)",
            resume.template_style,
            len(self._rendered.sections),
        )
        return self._rendered

    def refresh(self, resume: Resume) -> None:
        """Re-render *resume* if the preview is currently mounted."""
        if self.is_mounted:
            self.show(resume)

    def unmount(self) -> None:
        self._rendered = None
        self.opacity = 1.0

    @contextmanager
    def dimmed(self) -> Iterator[None]:
        """Lower the opacity for the duration of the block, then restore it."""
        original = self.opacity
        self.opacity = _DIMMED_OPACITY
        try:
            yield
        finally:
            self.opacity = original
