"""Utility functions and helpers"""

from resume_builder.utils.export import export_to_text, resume_filename, write_text_export

__all__ = [
    "export_to_text",
    "resume_filename",
    "write_text_export",
]
