"""
DOCX Builder Service — turn the plain-text résumé returned by the LLM into a Word document.

Formatting:
  - Arial 11pt throughout, no spacing after paragraphs
  - Sections are separated by blank lines in the text
  - The first line of each section is a bold heading
  - An empty paragraph after each section
  - Letter page with 1" margins
"""

from __future__ import annotations

import io
import logging
import re

from docx import Document
from docx.shared import Pt, Inches
from docx.oxml.ns import qn

logger = logging.getLogger(__name__)

DOCX_FILENAME = "optimized-resume.docx"
DOCX_MEDIA_TYPE = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"

_SECTION_SPLIT = re.compile(r"\n\s*\n")


def split_sections(resume_text: str) -> list[list[str]]:
    """Split text into sections (blank-line separated), each a list of non-empty lines."""
    sections = []
    for chunk in _SECTION_SPLIT.split(resume_text):
        lines = [line for line in chunk.split("\n") if line.strip()]
        if lines:
            sections.append(lines)
    return sections


def generate_word_document(resume_text: str) -> io.BytesIO:
    """
    Generate a DOCX from plain résumé text.

    Returns a BytesIO buffer containing the DOCX file.
    """
    doc = Document()

    # ── Page size + margins ──────────────────────────────────────────────
    for section in doc.sections:
        section.page_width = Inches(8.5)
        section.page_height = Inches(11)
        section.top_margin = Inches(1)
        section.bottom_margin = Inches(1)
        section.left_margin = Inches(1)
        section.right_margin = Inches(1)
        section.header_distance = Inches(0.5)
        section.footer_distance = Inches(0.5)

    # ── Default font ─────────────────────────────────────────────────────
    style = doc.styles["Normal"]
    style.font.name = "Arial"
    style.font.size = Pt(11)
    # East-Asian font slot, otherwise Word falls back to the theme font
    style.element.rPr.rFonts.set(qn("w:eastAsia"), "Arial")
    style.paragraph_format.space_before = Pt(0)
    style.paragraph_format.space_after = Pt(0)
    style.paragraph_format.line_spacing = 1.15

    # ── Sections ─────────────────────────────────────────────────────────
    sections = split_sections(resume_text)
    for lines in sections:
        heading, body = lines[0], lines[1:]

        heading_para = doc.add_paragraph()
        heading_run = heading_para.add_run(heading)
        heading_run.bold = True

        for line in body:
            doc.add_paragraph(line)

        # Line break after each section
        doc.add_paragraph()

    # ── Write to buffer ──────────────────────────────────────────────────
    buffer = io.BytesIO()
    doc.save(buffer)
    buffer.seek(0)

    logger.info(f"DOCX generated: {len(sections)} sections, {len(resume_text)} chars")
    return buffer
