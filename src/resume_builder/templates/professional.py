"""Professional resume template.

Serif body, centered name over a heavy rule, title-case section headers
underlined with a rule, bullet-separated contact details and comma-joined
skill lists.
"""

from __future__ import annotations

from pylatex import Document, NoEscape, Package

from resume_builder.models.resume import Resume, TemplateStyle
from resume_builder.templates.base import ResumeTemplate

__all__ = ["ProfessionalResumeTemplate"]

# ---------------------------------------------------------------------------
# LaTeX preamble fragments
# ---------------------------------------------------------------------------

_PACKAGES: list[Package] = [
    Package("geometry", options=NoEscape("a4paper,margin=0.75in")),
    Package("titlesec"),
    Package("enumitem"),
    Package("fontenc", options=NoEscape("T1")),
]

_PREAMBLE_SETUP = r"""
\pagestyle{empty}
\setlength{\parindent}{0pt}
\raggedbottom
\titleformat{\section}{\large\bfseries\scshape}{}{0em}{}[\titlerule]
\titlespacing*{\section}{0pt}{10pt}{6pt}
\setlist[itemize]{noitemsep, topsep=2pt, leftmargin=1.5em}
\pdfgentounicode=1
"""

_SEPARATOR = r" \textbullet{} "
_LINE_BREAK = r" \\ "

_SKILL_LABELS = (
    ("technical", "Technical"),
    ("tools", "Tools"),
    ("soft", "Soft Skills"),
    ("languages", "Languages"),
)


class ProfessionalResumeTemplate(ResumeTemplate):
    """Classic serif resume with a centered header."""

    style = TemplateStyle.PROFESSIONAL

    @property
    def name(self) -> str:  # pragma: no cover
        return "Professional"

    def _create_document(self) -> Document:
        doc = Document(
            documentclass="article",
            document_options=["11pt"],
            page_numbers=True,
            indent=True,
            lmodern=False,
            textcomp=False,
            microtype=False,
            fontenc=None,
            inputenc=None,
        )
        doc.packages = [p for p in doc.packages if "lastpage" not in p.dumps()]

        for pkg in _PACKAGES:
            doc.packages.append(pkg)
        doc.preamble.append(NoEscape(_PREAMBLE_SETUP))
        return doc

    # -- heading -----------------------------------------------------------

    def _add_contact(self, doc: Document, resume: Resume) -> None:
        esc = self.escape_latex
        info = resume.personal_info

        first = [esc(v) for v in (info.email, info.phone, info.location) if v]
        second = [esc(v) for v in (info.linkedin, info.website) if v]
        rows = [_SEPARATOR.join(row) for row in (first, second) if row]

        heading = r"\begin{center}"
        heading += rf"{{\Huge\bfseries {esc(self.display_name(resume))}}}"
        if rows:
            heading += r" \\ \vspace{4pt}"
            heading += rf"\small {_LINE_BREAK.join(rows)}"
        heading += r"\end{center}"
        heading += r"\vspace{-8pt}\noindent\rule{\textwidth}{1.2pt}"
        doc.append(NoEscape(heading))

    # -- summary -----------------------------------------------------------

    def _add_summary(self, doc: Document, resume: Resume) -> None:
        lines = [
            r"\section*{Professional Summary}",
            self.escape_latex(resume.professional_summary),
        ]
        doc.append(NoEscape("\n".join(lines)))

    # -- experience --------------------------------------------------------

    def _add_experience(self, doc: Document, resume: Resume) -> None:
        esc = self.escape_latex
        lines = [r"\section*{Work Experience}"]

        for job in resume.work_experience:
            date_range = self.format_date_range(job.start_date, job.end_label)
            lines.append(rf"\textbf{{{esc(job.position)}}} \hfill {{\small {date_range}}} \\")
            lines.append(rf"\textit{{{esc(job.company)} $|$ {esc(job.location)}}}")

            achievements = self.non_blank(job.achievements)
            if achievements:
                lines.append(r"\begin{itemize}")
                for achievement in achievements:
                    lines.append(rf"\item {esc(achievement)}")
                lines.append(r"\end{itemize}")
            lines.append(r"\par\vspace{4pt}")

        doc.append(NoEscape("\n".join(lines)))

    # -- education ---------------------------------------------------------

    def _add_education(self, doc: Document, resume: Resume) -> None:
        esc = self.escape_latex
        lines = [r"\section*{Education}"]

        for edu in resume.education:
            degree = f"{esc(edu.degree)} in {esc(edu.field)}"
            lines.append(rf"\textbf{{{degree}}} \hfill {{\small {esc(edu.graduation_date)}}} \\")
            lines.append(rf"\textit{{{esc(edu.institution)} $|$ {esc(edu.location)}}}")
            if edu.gpa:
                lines.append(rf"\\ {{\small GPA: {esc(edu.gpa)}}}")
            lines.append(r"\par\vspace{4pt}")

        doc.append(NoEscape("\n".join(lines)))

    # -- skills ------------------------------------------------------------

    def _add_skills(self, doc: Document, resume: Resume) -> None:
        esc = self.escape_latex
        rows = [
            rf"\textbf{{{label}:}} {esc(', '.join(resume.skills.category(key)))}"
            for key, label in _SKILL_LABELS
            if resume.skills.category(key)
        ]
        lines = [r"\section*{Skills}", f"{_LINE_BREAK}\n".join(rows)]
        doc.append(NoEscape("\n".join(lines)))

    # -- projects ----------------------------------------------------------

    def _add_projects(self, doc: Document, resume: Resume) -> None:
        esc = self.escape_latex
        lines = [r"\section*{Projects}"]

        for project in resume.projects:
            parts = [esc(project.description)]
            if project.name.strip():
                parts.insert(0, rf"\textbf{{{esc(project.name)}}}")
            if project.technologies:
                joined = esc(", ".join(project.technologies))
                parts.append(rf"{{\small \textbf{{Technologies:}} {joined}}}")
            if project.link and project.link.strip():
                parts.append(rf"{{\small \textbf{{Link:}} {esc(project.link)}}}")
            block = self.stacked_lines(parts)
            if block:
                lines.append(block)

            highlights = self.non_blank(project.highlights)
            if highlights:
                lines.append(r"\begin{itemize}")
                for highlight in highlights:
                    lines.append(rf"\item {esc(highlight)}")
                lines.append(r"\end{itemize}")
            lines.append(r"\par\vspace{4pt}")

        doc.append(NoEscape("\n".join(lines)))

    # -- certifications ----------------------------------------------------

    def _add_certifications(self, doc: Document, resume: Resume) -> None:
        esc = self.escape_latex
        lines = [r"\section*{Certifications}"]

        for cert in resume.certifications:
            details = f"{esc(cert.issuer)} $|$ {esc(cert.date)}"
            if cert.expiry_date:
                details += f" $|$ Expires: {esc(cert.expiry_date)}"
            lines.append(rf"\textbf{{{esc(cert.name)}}} \\")
            lines.append(details)
            lines.append(r"\par\vspace{2pt}")

        doc.append(NoEscape("\n".join(lines)))
