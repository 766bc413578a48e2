"""
Helper methods for script page configuration in python-docx
"""
from docx.enum.section import WD_ORIENTATION
from docx.enum.text import WD_ALIGN_PARAGRAPH
from docx.oxml import OxmlElement
from docx.oxml.ns import qn
from docx.shared import Mm, Pt, RGBColor


def configure_vertical_section(section, page_format):
    """
    Size the section to the paper and switch it to tategaki (tbRl) flow
    """
    section.page_width = Mm(page_format['width'])
    section.page_height = Mm(page_format['height'])
    section.orientation = WD_ORIENTATION.PORTRAIT

    margins = page_format['margins']
    section.top_margin = Mm(margins['top'])
    section.bottom_margin = Mm(margins['bottom'])
    section.left_margin = Mm(margins['outer'])
    section.right_margin = Mm(margins['inner'])

    sectPr = section._sectPr
    text_dir = sectPr.find(qn('w:textDirection'))
    if text_dir is None:
        text_dir = OxmlElement('w:textDirection')
        sectPr.append(text_dir)
    text_dir.set(qn('w:val'), 'tbRl')


def configure_line_paragraph(paragraph, text, font_name, font_size_points, is_scene=False):
    """
    Fill one paragraph with one visual line of the page.

    Scene lines are set bold and slightly larger, matching the extra space
    they take in the page budget.
    """
    fmt = paragraph.paragraph_format
    fmt.space_before = Pt(0)
    fmt.space_after = Pt(0)
    fmt.line_spacing = 1.0

    pPr = paragraph._p.get_or_add_pPr()
    text_dir = OxmlElement('w:textDirection')
    text_dir.set(qn('w:val'), 'tbRl')
    pPr.append(text_dir)

    # Empty paragraphs still need a run so the line keeps its height
    run = paragraph.add_run(text)
    run.font.name = font_name
    run.font.color.rgb = RGBColor(0, 0, 0)
    if is_scene:
        run.font.bold = True
        run.font.size = Pt(font_size_points * 1.2)
    else:
        run.font.size = Pt(font_size_points)

    # East Asian font slot, otherwise Word substitutes its own CJK face
    rPr = run._r.get_or_add_rPr()
    rFonts = rPr.find(qn('w:rFonts'))
    if rFonts is None:
        rFonts = OxmlElement('w:rFonts')
        rPr.insert(0, rFonts)
    rFonts.set(qn('w:eastAsia'), font_name)
    return run


def add_bookmark(paragraph, bookmark_id, name):
    """Wrap the paragraph contents in a named bookmark"""
    start = OxmlElement('w:bookmarkStart')
    start.set(qn('w:id'), str(bookmark_id))
    start.set(qn('w:name'), name)

    end = OxmlElement('w:bookmarkEnd')
    end.set(qn('w:id'), str(bookmark_id))

    p = paragraph._p
    pPr = p.pPr
    if pPr is not None:
        pPr.addnext(start)
    else:
        p.insert(0, start)
    p.append(end)


def add_page_number_field(section, font_name, font_size_points=9):
    """Centered PAGE field in the section footer"""
    footer_para = section.footer.paragraphs[0]
    footer_para.alignment = WD_ALIGN_PARAGRAPH.CENTER
    footer_para.clear()

    run = footer_para.add_run()
    run.font.size = Pt(font_size_points)
    run.font.name = font_name
    run.font.color.rgb = RGBColor(0, 0, 0)

    fldChar1 = OxmlElement('w:fldChar')
    fldChar1.set(qn('w:fldCharType'), 'begin')

    instrText = OxmlElement('w:instrText')
    instrText.text = 'PAGE'

    fldChar2 = OxmlElement('w:fldChar')
    fldChar2.set(qn('w:fldCharType'), 'end')

    run._r.append(fldChar1)
    run._r.append(instrText)
    run._r.append(fldChar2)
    return run
