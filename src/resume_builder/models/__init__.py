"""Resume document model and domain exceptions"""

from resume_builder.models.exceptions import (
    AuthorizationError,
    ExportFailedError,
    ExportInProgressError,
    GatewayError,
    PreviewNotRenderedError,
    SaveUnavailableError,
)
from resume_builder.models.resume import (
    Certification,
    Education,
    PersonalInfo,
    Project,
    Resume,
    Skills,
    TemplateStyle,
    WorkExperience,
    coerce_template_style,
    demo_resume,
    empty_resume,
)

__all__ = [
    "AuthorizationError",
    "Certification",
    "Education",
    "ExportFailedError",
    "ExportInProgressError",
    "GatewayError",
    "PersonalInfo",
    "PreviewNotRenderedError",
    "Project",
    "Resume",
    "SaveUnavailableError",
    "Skills",
    "TemplateStyle",
    "WorkExperience",
    "coerce_template_style",
    "demo_resume",
    "empty_resume",
]
