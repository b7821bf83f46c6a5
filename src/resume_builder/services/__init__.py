"""Services"""

from resume_builder.services.autosave import DebouncedAutosave
from resume_builder.services.editor import ResumeEditor
from resume_builder.services.gateway import ResumeGateway
from resume_builder.services.pdf_export import FpdfAssembler, LatexScreenCapture, PdfExporter
from resume_builder.services.preview import ResumePreview
from resume_builder.services.suggestions import (
    analyze_resume,
    generate_summary_template,
    improve_achievement,
)

__all__ = [
    "DebouncedAutosave",
    "FpdfAssembler",
    "LatexScreenCapture",
    "PdfExporter",
    "ResumeEditor",
    "ResumeGateway",
    "ResumePreview",
    "analyze_resume",
    "generate_summary_template",
    "improve_achievement",
]
