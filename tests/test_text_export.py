"""Tests for the plain-text resume export."""

from __future__ import annotations

from pathlib import Path

from resume_builder.models.resume import (
    Certification,
    Education,
    PersonalInfo,
    Project,
    Resume,
    Skills,
    WorkExperience,
    empty_resume,
)
from resume_builder.utils.export import (
    _sanitize_filename,
    export_to_text,
    resume_filename,
    write_text_export,
)


def _full_resume() -> Resume:
    return Resume(
        personal_info=PersonalInfo(
            full_name="Ada Lovelace",
            email="ada@example.com",
            phone="555-0100",
            location="London",
            linkedin="linkedin.com/in/ada",
        ),
        professional_summary="Mathematician.",
        work_experience=(
            WorkExperience(
                company="Analytical Engines",
                position="Programmer",
                location="London",
                start_date="1842",
                end_date="1843",
                current=True,
                achievements=("Wrote the first algorithm", "", "  "),
            ),
        ),
        education=(
            Education(
                institution="Home",
                degree="Tutoring",
                field="Mathematics",
                location="London",
                graduation_date="1835",
                gpa="4.0",
            ),
        ),
        skills=Skills(technical=("Math", "Logic"), languages=("English", "French")),
        projects=(
            Project(
                name="Note G",
                description="Bernoulli numbers",
                technologies=("Engine",),
                link="https://x",
                highlights=("Published",),
            ),
        ),
        certifications=(
            Certification(name="Royal Society", issuer="RS", date="1840", expiry_date="1850"),
            Certification(name="B", issuer="C", date="D"),
        ),
    )


class TestExportToText:
    """Byte-for-byte checks of the export layout."""

    def test_name_only(self) -> None:
        resume = empty_resume().model_copy(
            update={"personal_info": PersonalInfo(full_name="Jane Q. Public", linkedin="", website="")}
        )
        assert export_to_text(resume) == "JANE Q. PUBLIC\n==============\n\n"

    def test_empty_resume_exports_nothing(self) -> None:
        assert export_to_text(empty_resume()) == ""

    def test_full_resume(self) -> None:
        expected = (
            "ADA LOVELACE\n"
            "============\n"
            "\n"
            "ada@example.com\n"
            "555-0100\n"
            "London\n"
            "linkedin.com/in/ada\n"
            "\n"
            "PROFESSIONAL SUMMARY\n"
            "--------------------\n"
            "Mathematician.\n"
            "\n"
            "WORK EXPERIENCE\n"
            "---------------\n"
            "Programmer\n"
            "Analytical Engines | London\n"
            "1842 - Present\n"
            "  • Wrote the first algorithm\n"
            "  •   \n"
            "\n"
            "EDUCATION\n"
            "---------\n"
            "Tutoring in Mathematics\n"
            "Home | London\n"
            "1835\n"
            "GPA: 4.0\n"
            "\n"
            "SKILLS\n"
            "------\n"
            "Technical: Math, Logic\n"
            "Languages: English, French\n"
            "\n"
            "PROJECTS\n"
            "--------\n"
            "Note G\n"
            "Bernoulli numbers\n"
            "Technologies: Engine\n"
            "Link: https://x\n"
            "  • Published\n"
            "\n"
            "CERTIFICATIONS\n"
            "--------------\n"
            "Royal Society\n"
            "RS | 1840 | Expires: 1850\n"
            "\n"
            "B\n"
            "C | D\n"
            "\n"
        )
        assert export_to_text(_full_resume()) == expected

    def test_end_date_used_when_not_current(self) -> None:
        job = WorkExperience(position="Dev", company="X", location="Y", start_date="2019", end_date="2021")
        text = export_to_text(Resume(work_experience=(job,)))
        assert "2019 - 2021\n" in text

    def test_contact_lines_without_name(self) -> None:
        resume = Resume(personal_info=PersonalInfo(email="a@b.c", website="a.dev"))
        assert export_to_text(resume) == "a@b.c\na.dev\n\n"

    def test_whitespace_summary_is_omitted(self) -> None:
        assert export_to_text(Resume(professional_summary="   ")) == ""

    def test_skill_category_order(self) -> None:
        skills = Skills(languages=("English",), soft=("Mentoring",), tools=("Git",), technical=("Go",))
        text = export_to_text(Resume(skills=skills))
        assert text == (
            "SKILLS\n"
            "------\n"
            "Technical: Go\n"
            "Tools: Git\n"
            "Soft Skills: Mentoring\n"
            "Languages: English\n"
            "\n"
        )

    def test_education_without_gpa(self) -> None:
        edu = Education(institution="MIT", degree="B.S.", field="CS", location="MA", graduation_date="2020")
        text = export_to_text(Resume(education=(edu,)))
        assert "GPA" not in text


class TestResumeFilename:
    """Tests for download filename derivation."""

    def test_whitespace_becomes_underscores(self) -> None:
        assert resume_filename("Jane  Q. Public", "txt") == "Jane_Q._Public.txt"

    def test_blank_name_defaults_to_resume(self) -> None:
        assert resume_filename("   ", "pdf") == "resume.pdf"

    def test_dots_and_edge_whitespace_are_kept(self) -> None:
        assert resume_filename("John Smith Jr.", "pdf") == "John_Smith_Jr..pdf"
        assert resume_filename(" Jane\t", "txt") == "_Jane_.txt"

    def test_invalid_characters_replaced(self) -> None:
        assert _sanitize_filename('a<b>:c') == "a_b__c"


class TestWriteTextExport:
    def test_writes_file_named_after_person(self, tmp_path: Path) -> None:
        path = write_text_export(_full_resume(), tmp_path / "out")
        assert path.name == "Ada_Lovelace.txt"
        assert path.read_text(encoding="utf-8").startswith("ADA LOVELACE\n")
