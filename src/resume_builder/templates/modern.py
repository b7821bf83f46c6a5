"""Modern resume template.

Helvetica sans-serif, large left-aligned name in accent blue, upper-case
section headers over a colored rule, pipe-separated contact line and
bullet-joined skill lists.
"""

from __future__ import annotations

from pylatex import Document, NoEscape, Package

from resume_builder.models.resume import Resume, TemplateStyle
from resume_builder.templates.base import ResumeTemplate

__all__ = ["ModernResumeTemplate"]

# ---------------------------------------------------------------------------
# LaTeX preamble fragments
# ---------------------------------------------------------------------------

_PACKAGES: list[Package] = [
    Package("geometry", options=NoEscape("a4paper,margin=0.7in")),
    Package("titlesec"),
    Package("enumitem"),
    Package("xcolor"),
    Package("fontenc", options=NoEscape("T1")),
    Package("helvet"),
]

_PREAMBLE_SETUP = r"""
\renewcommand{\familydefault}{\sfdefault}
\definecolor{accent}{HTML}{2563EB}
\definecolor{accentdark}{HTML}{1D4ED8}
\pagestyle{empty}
\setlength{\parindent}{0pt}
\raggedbottom
\raggedright
\titleformat{\section}{\Large\bfseries\color{accent}}{}{0em}{}[{\color{accent}\titlerule[1.5pt]}]
\titlespacing*{\section}{0pt}{10pt}{6pt}
\setlist[itemize]{noitemsep, topsep=2pt, leftmargin=1.5em}
\pdfgentounicode=1
"""

_HEADER_SEPARATOR = r" $|$ "
_SEPARATOR = r" \textbullet{} "


class ModernResumeTemplate(ResumeTemplate):
    """Modern sans-serif resume with accent colors."""

    style = TemplateStyle.MODERN

    @property
    def name(self) -> str:  # pragma: no cover
        return "Modern"

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

    # -- heading -----------------------------------------------------------

    def _add_contact(self, doc: Document, resume: Resume) -> None:
        esc = self.escape_latex
        parts = [esc(value) for value in self.contact_values(resume)]

        heading = rf"{{\fontsize{{28}}{{32}}\selectfont\bfseries\color{{accent}} "
        heading += rf"{esc(self.display_name(resume))}}}"
        if parts:
            heading += r" \\ \vspace{4pt}"
            heading += rf"{{\small {_HEADER_SEPARATOR.join(parts)}}}"
        heading += r"\par\vspace{6pt}"
        doc.append(NoEscape(heading))

    # -- summary -----------------------------------------------------------

    def _add_summary(self, doc: Document, resume: Resume) -> None:
        lines = [
            r"\section*{PROFESSIONAL SUMMARY}",
            self.escape_latex(resume.professional_summary),
        ]
        doc.append(NoEscape("\n".join(lines)))

    # -- experience --------------------------------------------------------

    def _add_experience(self, doc: Document, resume: Resume) -> None:
        esc = self.escape_latex
        lines = [r"\section*{EXPERIENCE}"]

        for job in resume.work_experience:
            date_range = self.format_date_range(job.start_date, job.end_label)
            lines.append(rf"{{\large\bfseries {esc(job.position)}}} \hfill {date_range} \\")
            company = f"{esc(job.company)}{_SEPARATOR}{esc(job.location)}"
            lines.append(rf"{{\color{{accentdark}} {company}}}")

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
        lines = [r"\section*{EDUCATION}"]

        for edu in resume.education:
            degree = f"{esc(edu.degree)} in {esc(edu.field)}"
            lines.append(rf"{{\large\bfseries {degree}}} \hfill {esc(edu.graduation_date)} \\")
            institution = f"{esc(edu.institution)}{_SEPARATOR}{esc(edu.location)}"
            lines.append(rf"{{\color{{accentdark}} {institution}}}")
            if edu.gpa:
                lines.append(rf"\\ GPA: {esc(edu.gpa)}")
            lines.append(r"\par\vspace{4pt}")

        doc.append(NoEscape("\n".join(lines)))

    # -- skills ------------------------------------------------------------

    def _add_skills(self, doc: Document, resume: Resume) -> None:
        esc = self.escape_latex
        labels = (
            ("technical", "Technical"),
            ("tools", "Tools"),
            ("soft", "Soft Skills"),
            ("languages", "Languages"),
        )
        lines = [r"\section*{SKILLS}"]
        for key, label in labels:
            skills = resume.skills.category(key)
            if skills:
                joined = _SEPARATOR.join(esc(skill) for skill in skills)
                lines.append(rf"{{\bfseries\color{{accentdark}} {label}:}} {joined}\par")

        doc.append(NoEscape("\n".join(lines)))

    # -- projects ----------------------------------------------------------

    def _add_projects(self, doc: Document, resume: Resume) -> None:
        esc = self.escape_latex
        lines = [r"\section*{PROJECTS}"]

        for project in resume.projects:
            parts = [esc(project.description)]
            if project.name.strip():
                parts.insert(0, rf"{{\large\bfseries {esc(project.name)}}}")
            if project.technologies:
                joined = _SEPARATOR.join(esc(tech) for tech in project.technologies)
                parts.append(rf"{{\bfseries\color{{accentdark}} Tech:}} {joined}")
            if project.link and project.link.strip():
                parts.append(rf"{{\small {esc(project.link)}}}")
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
        lines = [r"\section*{CERTIFICATIONS}"]

        for cert in resume.certifications:
            details = f"{esc(cert.issuer)}{_SEPARATOR}{esc(cert.date)}"
            if cert.expiry_date:
                details += f"{_SEPARATOR}Expires: {esc(cert.expiry_date)}"
            lines.append(self.stacked_lines([rf"\textbf{{{esc(cert.name)}}}", details]))
            lines.append(r"\par\vspace{2pt}")

        doc.append(NoEscape("\n".join(lines)))
