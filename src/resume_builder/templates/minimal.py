"""Minimal resume template.

Light serif name, small body text, thin gray rules under plain section
headers and comma-separated details throughout.
"""

from __future__ import annotations

from pylatex import Document, NoEscape, Package

from resume_builder.models.resume import Resume, TemplateStyle
from resume_builder.templates.base import ResumeTemplate

__all__ = ["MinimalResumeTemplate"]

_PACKAGES: list[Package] = [
    Package("geometry", options=NoEscape("a4paper,margin=1in")),
    Package("titlesec"),
    Package("enumitem"),
    Package("xcolor"),
    Package("fontenc", options=NoEscape("T1")),
]

_PREAMBLE_SETUP = r"""
\pagestyle{empty}
\setlength{\parindent}{0pt}
\raggedbottom
\titleformat{\section}{\normalsize\mdseries}{}{0em}{}[{\color{gray}\titlerule[0.4pt]}]
\titlespacing*{\section}{0pt}{8pt}{4pt}
\setlist[itemize]{nosep, leftmargin=1.2em}
\pdfgentounicode=1
"""

_SEPARATOR = r" \textbullet{} "


class MinimalResumeTemplate(ResumeTemplate):
    """Understated single-column resume."""

    style = TemplateStyle.MINIMAL

    @property
    def name(self) -> str:  # pragma: no cover
        return "Minimal"

    def _create_document(self) -> Document:
        doc = Document(
            documentclass="article",
            document_options=["10pt"],
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

    def _add_contact(self, doc: Document, resume: Resume) -> None:
        esc = self.escape_latex
        parts = [esc(value) for value in self.contact_values(resume)]

        heading = rf"{{\LARGE {esc(self.display_name(resume))}}}"
        if parts:
            heading += rf" \\ {{\small\color{{gray}} {_SEPARATOR.join(parts)}}}"
        heading += r"\par\vspace{8pt}"
        doc.append(NoEscape(heading))

    def _add_summary(self, doc: Document, resume: Resume) -> None:
        lines = [
            r"\section*{Summary}",
            rf"{{\small {self.escape_latex(resume.professional_summary)}}}",
        ]
        doc.append(NoEscape("\n".join(lines)))

    def _add_experience(self, doc: Document, resume: Resume) -> None:
        esc = self.escape_latex
        lines = [r"\section*{Experience}"]

        for job in resume.work_experience:
            date_range = self.format_date_range(job.start_date, job.end_label)
            lines.append(rf"{esc(job.position)} \hfill {{\footnotesize {date_range}}} \\")
            lines.append(rf"{{\small\itshape {esc(job.company)}, {esc(job.location)}}}")

            achievements = self.non_blank(job.achievements)
            if achievements:
                lines.append(r"\begin{itemize}\small")
                for achievement in achievements:
                    lines.append(rf"\item {esc(achievement)}")
                lines.append(r"\end{itemize}")
            lines.append(r"\par\vspace{4pt}")

        doc.append(NoEscape("\n".join(lines)))

    def _add_education(self, doc: Document, resume: Resume) -> None:
        esc = self.escape_latex
        lines = [r"\section*{Education}"]

        for edu in resume.education:
            lines.append(
                rf"{esc(edu.degree)}, {esc(edu.field)} \hfill "
                rf"{{\footnotesize {esc(edu.graduation_date)}}} \\"
            )
            lines.append(rf"{{\small\itshape {esc(edu.institution)}, {esc(edu.location)}}}")
            if edu.gpa:
                lines.append(rf"\\ {{\small GPA: {esc(edu.gpa)}}}")
            lines.append(r"\par\vspace{2pt}")

        doc.append(NoEscape("\n".join(lines)))

    def _add_skills(self, doc: Document, resume: Resume) -> None:
        esc = self.escape_latex
        labels = (
            ("technical", "Technical"),
            ("tools", "Tools"),
            ("soft", "Soft Skills"),
            ("languages", "Languages"),
        )
        lines = [r"\section*{Skills}"]
        for key, label in labels:
            skills = resume.skills.category(key)
            if skills:
                lines.append(rf"{{\small {label}: {esc(', '.join(skills))}}}\par")

        doc.append(NoEscape("\n".join(lines)))

    def _add_projects(self, doc: Document, resume: Resume) -> None:
        esc = self.escape_latex
        lines = [r"\section*{Projects}"]

        for project in resume.projects:
            parts = [
                rf"{{\small {esc(value)}}}"
                for value in (project.name, project.description)
                if value.strip()
            ]
            if project.technologies:
                parts.append(rf"{{\footnotesize {esc(', '.join(project.technologies))}}}")
            block = self.stacked_lines(parts)
            if block:
                lines.append(block)

            highlights = self.non_blank(project.highlights)
            if highlights:
                lines.append(r"\begin{itemize}\small")
                for highlight in highlights:
                    lines.append(rf"\item {esc(highlight)}")
                lines.append(r"\end{itemize}")
            lines.append(r"\par\vspace{2pt}")

        doc.append(NoEscape("\n".join(lines)))

    def _add_certifications(self, doc: Document, resume: Resume) -> None:
        esc = self.escape_latex
        lines = [r"\section*{Certifications}"]

        for cert in resume.certifications:
            details = f"{esc(cert.issuer)}, {esc(cert.date)}"
            if cert.expiry_date:
                details += f", expires {esc(cert.expiry_date)}"
            lines.append(rf"{{\small {esc(cert.name)} --- {details}}}\par")

        doc.append(NoEscape("\n".join(lines)))
