from docx import Document
from docx.shared import Pt

from resume_tailor.services.docx_builder import generate_word_document, split_sections

RESUME = """JOHN DOE
john@example.com | 555-0100

PROFESSIONAL SUMMARY
Product leader with 10 years of experience.

EXPERIENCE
Senior PM, Initech
- Shipped the roadmap
- Ran discovery


"""


def test_split_sections_drops_blank_lines():
    sections = split_sections(RESUME)

    assert [s[0] for s in sections] == ["JOHN DOE", "PROFESSIONAL SUMMARY", "EXPERIENCE"]
    assert sections[2] == ["EXPERIENCE", "Senior PM, Initech", "- Shipped the roadmap", "- Ran discovery"]


def test_split_sections_handles_whitespace_only_separators():
    assert split_sections("A\n   \nB") == [["A"], ["B"]]
    assert split_sections("\n\n") == []


def test_document_has_bold_headings_and_spacer_paragraphs():
    doc = Document(generate_word_document(RESUME))

    texts = [p.text for p in doc.paragraphs]
    assert texts == [
        "JOHN DOE",
        "john@example.com | 555-0100",
        "",
        "PROFESSIONAL SUMMARY",
        "Product leader with 10 years of experience.",
        "",
        "EXPERIENCE",
        "Senior PM, Initech",
        "- Shipped the roadmap",
        "- Ran discovery",
        "",
    ]
    headings = [p for p in doc.paragraphs if p.runs and p.runs[0].bold]
    assert [p.text for p in headings] == ["JOHN DOE", "PROFESSIONAL SUMMARY", "EXPERIENCE"]


def test_document_uses_arial_11_on_letter_paper():
    doc = Document(generate_word_document(RESUME))

    normal = doc.styles["Normal"]
    assert normal.font.name == "Arial"
    assert normal.font.size == Pt(11)
    assert normal.paragraph_format.space_after == Pt(0)

    section = doc.sections[0]
    assert round(section.page_width.inches, 2) == 8.5
    assert round(section.page_height.inches, 2) == 11
    assert round(section.left_margin.inches, 2) == 1
