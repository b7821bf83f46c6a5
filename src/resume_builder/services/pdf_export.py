"""PDF export of the mounted resume preview.

Export runs in two stages behind narrow interfaces: a screen capture turns
the rendered preview into a raster image, and a document assembler places
that image on an A4 page. Both are external collaborators; this module owns
the precondition check, the fit-to-page math and the filename.
"""

from __future__ import annotations

import logging
import subprocess
import tempfile
import threading
from dataclasses import dataclass
from io import BytesIO
from pathlib import Path
from typing import Protocol

from fpdf import FPDF
from PIL import Image

from resume_builder.models.exceptions import ExportFailedError, ExportInProgressError
from resume_builder.services.preview import ResumePreview
from resume_builder.templates import RenderedResume
from resume_builder.utils.export import resume_filename

logger = logging.getLogger(__name__)

__all__ = [
    "A4_SIZE_MM",
    "CAPTURE_BACKGROUND",
    "CAPTURE_SCALE",
    "DocumentAssembler",
    "ExportedFile",
    "FpdfAssembler",
    "LatexScreenCapture",
    "PdfExporter",
    "Placement",
    "RasterImage",
    "ScreenCapture",
    "fit_to_page",
]

A4_SIZE_MM: tuple[float, float] = (210.0, 297.0)
CAPTURE_SCALE = 2
CAPTURE_BACKGROUND = "#ffffff"

EXPORT_FAILED_MESSAGE = "Failed to generate PDF. Please try again."
EXPORT_BUSY_MESSAGE = "A PDF export is already in progress."


@dataclass(frozen=True, slots=True)
class RasterImage:
    """Captured pixels of the preview.

    Attributes:
        data: Encoded image bytes.
        width: Width in pixels.
        height: Height in pixels.
        format: Encoding of *data*.
    """

    data: bytes
    width: int
    height: int
    format: str = "PNG"


@dataclass(frozen=True, slots=True)
class ExportedFile:
    """A file ready to be handed to the user."""

    filename: str
    content: bytes
    media_type: str


@dataclass(frozen=True, slots=True)
class Placement:
    """Where an image lands on a page, in page units."""

    x: float
    y: float
    width: float
    height: float


class ScreenCapture(Protocol):
    """Turns a rendered preview into pixels."""

    def capture(self, element: RenderedResume, *, scale: int, background: str) -> RasterImage: ...


class DocumentAssembler(Protocol):
    """Lays a raster image out on a fixed-size page and returns file bytes."""

    def assemble(self, image: RasterImage, page_size: tuple[float, float]) -> bytes: ...


def fit_to_page(
    image_width: float,
    image_height: float,
    page_width: float,
    page_height: float,
) -> Placement:
    """Scale an image to fit the page, keeping its aspect ratio, and center it.

    Raises:
        ValueError: If any dimension is not positive.
    """
    if min(image_width, image_height, page_width, page_height) <= 0:
        raise ValueError("Image and page dimensions must be positive")

    image_ratio = image_width / image_height
    page_ratio = page_width / page_height

    width, height = page_width, page_height
    if image_ratio > page_ratio:
        height = page_width / image_ratio
    else:
        width = page_height * image_ratio

    return Placement(
        x=(page_width - width) / 2,
        y=(page_height - height) / 2,
        width=width,
        height=height,
    )


class FpdfAssembler:
    """Single-page PDF assembler built on fpdf2. Page sizes are in millimetres."""

    def assemble(self, image: RasterImage, page_size: tuple[float, float]) -> bytes:
        page_width, page_height = page_size
        placement = fit_to_page(image.width, image.height, page_width, page_height)

        pdf = FPDF(orientation="P", unit="mm", format=(page_width, page_height))
        pdf.set_auto_page_break(auto=False)
        pdf.add_page()
        pdf.image(
            BytesIO(image.data),
            x=placement.x,
            y=placement.y,
            w=placement.width,
            h=placement.height,
        )
        return bytes(pdf.output())


class LatexScreenCapture:
    """Captures a preview by compiling its LaTeX and rasterizing page one.

    Requires *compiler* (``pdflatex``) and *rasterizer* (``pdftoppm`` from
    poppler) on the system path.
    """

    def __init__(self, compiler: str = "pdflatex", rasterizer: str = "pdftoppm") -> None:
        self.compiler = compiler
        self.rasterizer = rasterizer

    def capture(self, element: RenderedResume, *, scale: int, background: str) -> RasterImage:
        with tempfile.TemporaryDirectory() as tmp_dir:
            stem = Path(tmp_dir) / "preview"
            # PyLaTeX appends .pdf/.tex automatically
            element.document.generate_pdf(str(stem), clean_tex=False, compiler=self.compiler)
            subprocess.run(
                [
                    self.rasterizer,
                    "-png",
                    "-singlefile",
                    "-r",
                    str(72 * scale),
                    f"{stem}.pdf",
                    str(stem),
                ],
                check=True,
                capture_output=True,
            )
            raw = Path(f"{stem}.png").read_bytes()

        with Image.open(BytesIO(raw)) as img:
            flat = Image.new("RGB", img.size, background)
            flat.paste(img, mask=img.getchannel("A") if "A" in img.getbands() else None)
            buffer = BytesIO()
            flat.save(buffer, format="PNG")
            return RasterImage(data=buffer.getvalue(), width=flat.width, height=flat.height)


class PdfExporter:
    """Runs the capture-then-assemble pipeline for one preview at a time.

    A second export requested while one is still running is rejected with
    :class:`ExportInProgressError` rather than queued.
    """

    def __init__(
        self,
        capture: ScreenCapture | None = None,
        assembler: DocumentAssembler | None = None,
        *,
        page_size: tuple[float, float] = A4_SIZE_MM,
    ) -> None:
        self.capture = capture or LatexScreenCapture()
        self.assembler = assembler or FpdfAssembler()
        self.page_size = page_size
        self._lock = threading.Lock()

    @property
    def busy(self) -> bool:
        return self._lock.locked()

    def export(self, preview: ResumePreview) -> ExportedFile:
        """Export the mounted *preview* as an A4 PDF.

        Raises:
            PreviewNotRenderedError: If the preview has not been shown yet.
            ExportInProgressError: If another export is still running.
            ExportFailedError: If the capture or assembly stage fails.
        """
        if not self._lock.acquire(blocking=False):
            raise ExportInProgressError(EXPORT_BUSY_MESSAGE)
        try:
            element = preview.element
            try:
                with preview.dimmed():
                    image = self.capture.capture(
                        element,
                        scale=CAPTURE_SCALE,
                        background=CAPTURE_BACKGROUND,
                    )
                content = self.assembler.assemble(image, self.page_size)
            except Exception as exc:
                logger.exception("Error generating PDF")
                raise ExportFailedError(EXPORT_FAILED_MESSAGE) from exc
        finally:
            self._lock.release()

        filename = resume_filename(element.resume.personal_info.full_name, "pdf")
        logger.info("Exported %s (%d bytes)", filename, len(content))
        return ExportedFile(filename=filename, content=content, media_type="application/pdf")
