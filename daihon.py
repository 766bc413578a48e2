#!/usr/bin/env python3
"""
Daihon Tategaki Formatter - Lay out Japanese script text on vertical script paper
Wraps raw script lines with kinsoku rules, numbers scene headings and splits
the result into fixed-capacity B5 pages, then renders them to DOCX
"""

import argparse
import json
import logging
import math
import sys
from fractions import Fraction
from pathlib import Path
from typing import Dict, Iterator, List, NamedTuple, Optional, Tuple

import chardet
from docx import Document
from rich.console import Console
from rich.panel import Panel
from rich.progress import Progress, BarColumn, TextColumn, TimeRemainingColumn, TaskProgressColumn
from rich.table import Table
from rich.text import Text

from daihon_helpers import (
    add_bookmark,
    add_page_number_field,
    configure_line_paragraph,
    configure_vertical_section,
)
from sizes import PageSizeSelector

logging.basicConfig(level=logging.INFO, format='[%(levelname)s] %(message)s')


# B5 script paper: 17 vertical lines of 29 character cells
MAX_LINES = 17
MAX_CHARS_PER_LINE = 29
# Scene lines carry an annotation and take more room than body lines
SCENE_LINE_WEIGHT = 1.8
# How far back from the line end a kinsoku-compliant break is searched
MAX_BREAK_BACKTRACK = 5

SCENE_MARKERS = frozenset('◯○◎◇□＊☆')
LABEL_OPEN = '【'
LABEL_CLOSE = '】'
SCENE_LABEL_WIDTH = 4
DIALOGUE_CLOSERS = ('」', '』')
DIALOGUE_INDENT = '\u3000' * 4


class RawLine(NamedTuple):
    index: int
    text: str


class LineRecord(NamedTuple):
    """One visual line of a page"""
    text: str
    is_scene: bool = False
    source_line_index: Optional[int] = None

    def to_dict(self) -> Dict:
        return {
            'text': self.text,
            'is_scene': self.is_scene,
            'source_line_index': self.source_line_index,
        }


class SceneHeading(NamedTuple):
    """Classification of a raw line.

    ``kind`` is ``'manual'`` for a bracket-labelled heading, ``'auto'`` for a
    bare marker that takes the next scene number and ``None`` for ordinary
    lines. ``text`` is the line with the label or number substituted.
    """
    kind: Optional[str]
    label: Optional[str]
    display_label: Optional[str]
    text: str
    scene_number: Optional[int] = None

    @property
    def is_scene(self) -> bool:
        return self.kind is not None


class SceneOutlineEntry(NamedTuple):
    line_index: int
    kind: str
    label: str
    display_text: str


class KinsokuLineBreaker:
    """Japanese line breaking (kinsoku shori) over fixed character classes"""

    # Characters that must never begin a line
    LINE_START_FORBIDDEN = frozenset([
        # Terminal punctuation
        '。', '、', '？', '！',
        # Closing brackets and quotes
        '」', '』', '）', '〕', '］', '｝', '〉', '》', '】', '〗', '〙', '〛',
        # Prolonged sound mark, colons
        'ー', '：', '；'
    ])

    # Characters that must never end a line
    LINE_END_FORBIDDEN = frozenset([
        '「', '『', '（', '〔', '［', '｛', '〈', '《', '【', '〖', '〘', '〚'
    ])

    @classmethod
    def can_break_after(cls, char, next_char=None):
        """Check whether a line may end after ``char`` when ``next_char`` follows"""
        if char in cls.LINE_END_FORBIDDEN:
            return False
        if next_char and next_char in cls.LINE_START_FORBIDDEN:
            return False
        return True

    @classmethod
    def find_break_point(cls, text, max_length):
        """
        Return the number of characters to keep on the current line.

        Searches back from ``max_length`` for at most MAX_BREAK_BACKTRACK
        positions; when none of them is compliant the line is cut at
        ``max_length`` anyway.
        """
        if len(text) <= max_length:
            return max_length

        lower_bound = max(1, max_length - MAX_BREAK_BACKTRACK)
        for i in range(max_length, lower_bound, -1):
            if i >= len(text):
                continue
            if cls.can_break_after(text[i - 1], text[i]):
                return i

        return max_length


can_break_after = KinsokuLineBreaker.can_break_after
find_break_point = KinsokuLineBreaker.find_break_point


def split_raw_lines(text: str) -> List[RawLine]:
    """Split input on newlines, keeping each line's 0-based position"""
    return [RawLine(index, line) for index, line in enumerate(text.split('\n'))]


def _leading_whitespace(line):
    return line[:len(line) - len(line.lstrip())]


def _manual_label(stripped):
    """Return the bracket label of ``【label】<marker>...`` or None"""
    if not stripped.startswith(LABEL_OPEN):
        return None
    close = stripped.find(LABEL_CLOSE, 1)
    # Label must hold at least one character
    if close <= 1:
        return None
    if close + 1 >= len(stripped) or stripped[close + 1] not in SCENE_MARKERS:
        return None
    return stripped[1:close]


def format_scene_label(label: str) -> str:
    """Normalize a manual label to 5 cells: right-aligned in 4 plus a space, or cut to 5"""
    if len(label) <= SCENE_LABEL_WIDTH:
        return label.rjust(SCENE_LABEL_WIDTH) + ' '
    return label[:SCENE_LABEL_WIDTH + 1]


def format_scene_number(scene_number: int) -> str:
    return str(scene_number).rjust(SCENE_LABEL_WIDTH) + ' '


def classify_heading(line: str, scene_number: int) -> Tuple[SceneHeading, int]:
    """
    Classify one raw line and return it with the next scene number.

    Manual headings keep the line's leading whitespace; auto headings replace
    the whitespace and marker with the padded scene number. Only auto
    headings advance the counter.
    """
    stripped = line.strip()

    label = _manual_label(stripped)
    if label is not None:
        display_label = format_scene_label(label)
        # Drop 【 label 】 and the marker
        body = line.lstrip()[len(label) + 3:]
        text = _leading_whitespace(line) + display_label + body
        return SceneHeading('manual', label, display_label, text), scene_number

    if stripped and stripped[0] in SCENE_MARKERS:
        display_label = format_scene_number(scene_number)
        text = display_label + line.lstrip()[1:]
        heading = SceneHeading('auto', str(scene_number), display_label, text, scene_number)
        return heading, scene_number + 1

    return SceneHeading(None, None, None, line), scene_number


def _wrap_segments(text: str, continuation_indent: str, max_chars_per_line: int) -> Iterator[str]:
    """Yield the visual lines of an over-long line, indenting continuations"""
    first_break = find_break_point(text, max_chars_per_line)
    yield text[:first_break]

    remaining = text[first_break:]
    while remaining:
        available = max_chars_per_line - len(continuation_indent)
        if available <= 0:
            # Indent leaves no room, break at full width without it
            break_point = find_break_point(remaining, max_chars_per_line)
            yield remaining[:break_point]
        elif len(remaining) <= available:
            yield continuation_indent + remaining
            break
        else:
            break_point = find_break_point(remaining, available)
            yield continuation_indent + remaining[:break_point]
        remaining = remaining[break_point:]


def wrap_raw_line(raw_line: RawLine, scene_number: int,
                  max_chars_per_line: int = MAX_CHARS_PER_LINE) -> Tuple[List[LineRecord], SceneHeading, int]:
    """
    Turn one raw line into its visual line records.

    Returns the records, the line's classification and the scene number for
    the next line.
    """
    line = raw_line.text
    if not line:
        heading = SceneHeading(None, None, None, line)
        return [LineRecord('', False, raw_line.index)], heading, scene_number

    heading, next_scene_number = classify_heading(line, scene_number)
    text = heading.text

    if heading.is_scene:
        continuation_indent = _leading_whitespace(text)
    elif line.strip().endswith(DIALOGUE_CLOSERS):
        continuation_indent = DIALOGUE_INDENT
    else:
        continuation_indent = _leading_whitespace(line)

    if len(text) <= max_chars_per_line:
        segments = [text]
    else:
        segments = _wrap_segments(text, continuation_indent, max_chars_per_line)

    records = [LineRecord(segment, heading.is_scene, raw_line.index) for segment in segments]
    return records, heading, next_scene_number


def format_script_lines(text: str, max_chars_per_line: int = MAX_CHARS_PER_LINE) -> List[LineRecord]:
    """Wrap every raw line of ``text`` into visual line records, in order"""
    records = []
    scene_number = 1
    for raw_line in split_raw_lines(text):
        line_records, _, scene_number = wrap_raw_line(raw_line, scene_number, max_chars_per_line)
        records.extend(line_records)
    return records


def record_weight(record: LineRecord, scene_line_weight=SCENE_LINE_WEIGHT) -> Fraction:
    """Page budget a record uses, as an exact fraction"""
    if record.is_scene:
        return Fraction(str(scene_line_weight))
    return Fraction(1)


def _seal_page(page, weight, max_lines):
    while math.ceil(weight) < max_lines:
        page.append(LineRecord('', False))
        weight += 1
    return tuple(page)


def compose_pages(records, max_lines: int = MAX_LINES,
                  scene_line_weight=SCENE_LINE_WEIGHT) -> List[Tuple[LineRecord, ...]]:
    """
    Pack line records into pages of ``max_lines`` weighted lines.

    A page is sealed as soon as the next record would overflow it and is
    padded with blank lines until its weight rounds up to ``max_lines``.
    Always returns at least one page.
    """
    pages = []
    current_page = []
    current_weight = Fraction(0)

    # Exact sums: floats would put 8 body lines plus 5 scene lines at
    # 17.000000000000004 and push the last record onto a new page
    for record in records:
        weight = record_weight(record, scene_line_weight)
        if current_weight + weight > max_lines and current_page:
            pages.append(_seal_page(current_page, current_weight, max_lines))
            current_page = []
            current_weight = Fraction(0)

        current_page.append(record)
        current_weight += weight

    if current_page:
        pages.append(_seal_page(current_page, current_weight, max_lines))

    if not pages:
        pages.append(tuple(LineRecord('', False) for _ in range(max_lines)))

    return pages


def format_vertical_text_to_pages(text: str, max_chars_per_line: int = MAX_CHARS_PER_LINE,
                                  max_lines: int = MAX_LINES,
                                  scene_line_weight=SCENE_LINE_WEIGHT) -> List[Tuple[LineRecord, ...]]:
    """Format script text into pages for vertical B5 layout"""
    records = format_script_lines(text, max_chars_per_line)
    pages = compose_pages(records, max_lines, scene_line_weight)
    logging.debug(f"Formatted {len(records)} visual lines into {len(pages)} page(s)")
    return pages


class DaihonPageFormatter:
    """Page formatter bound to one paper format"""

    def __init__(self, page_format=None):
        self.page_format = page_format or PageSizeSelector.default_format()
        grid = self.page_format['grid']
        if grid['lines'] < 1 or grid['chars'] < 1:
            raise ValueError(f"Page grid must hold at least one line of one character, got {grid}")
        self.max_lines = grid['lines']
        self.max_chars_per_line = grid['chars']
        self.scene_line_weight = self.page_format.get('scene_line_weight', SCENE_LINE_WEIGHT)

    def format_lines(self, text):
        return format_script_lines(text, self.max_chars_per_line)

    def format_pages(self, text):
        return format_vertical_text_to_pages(
            text,
            max_chars_per_line=self.max_chars_per_line,
            max_lines=self.max_lines,
            scene_line_weight=self.scene_line_weight,
        )


def build_scene_outline(text: str) -> List[SceneOutlineEntry]:
    """List the scene headings of ``text`` with the numbers the pages show"""
    outline = []
    scene_number = 1
    for raw_line in split_raw_lines(text):
        heading, scene_number = classify_heading(raw_line.text, scene_number)
        if heading.is_scene:
            outline.append(SceneOutlineEntry(
                raw_line.index, heading.kind, heading.display_label, heading.text.strip()
            ))
    return outline


def line_start_offset(text: str, line_index: int) -> int:
    """Character offset in ``text`` where raw line ``line_index`` starts"""
    lines = text.split('\n')
    if not 0 <= line_index < len(lines):
        raise IndexError(f"Line {line_index} is outside the document ({len(lines)} lines)")
    return sum(len(line) + 1 for line in lines[:line_index])


def find_record_location(pages, line_index: int) -> Optional[Tuple[int, int]]:
    """1-based (page, row) of the first visual line derived from a raw line"""
    for page_num, page in enumerate(pages, 1):
        for row_num, record in enumerate(page, 1):
            if record.source_line_index == line_index:
                return page_num, row_num
    return None


class ScriptPageValidator:
    """Validator for formatted script pages"""

    def __init__(self, page_format: Optional[Dict] = None):
        self.page_format = page_format or PageSizeSelector.default_format()
        self.max_lines = self.page_format['grid']['lines']
        self.max_chars_per_line = self.page_format['grid']['chars']
        self.scene_line_weight = self.page_format.get('scene_line_weight', SCENE_LINE_WEIGHT)

    def validate_line_lengths(self, pages) -> List[Dict]:
        """Every visual line must fit in the line's character cells"""
        violations = []

        for page_num, page in enumerate(pages, 1):
            for row_num, record in enumerate(page, 1):
                if len(record.text) > self.max_chars_per_line:
                    violations.append({
                        'type': 'line_overflow',
                        'page': page_num,
                        'row': row_num,
                        'message': f'Line has {len(record.text)} characters, expected max {self.max_chars_per_line}',
                        'severity': 'critical'
                    })

        return violations

    def validate_page_capacity(self, pages) -> List[Dict]:
        """Every page must be filled to exactly its weighted capacity"""
        violations = []

        if not pages:
            violations.append({
                'type': 'no_pages',
                'message': 'Document has no pages',
                'severity': 'critical'
            })

        for page_num, page in enumerate(pages, 1):
            total = sum(record_weight(record, self.scene_line_weight) for record in page)
            if math.ceil(total) != self.max_lines:
                violations.append({
                    'type': 'page_capacity',
                    'page': page_num,
                    'message': f'Page weight {float(total):.1f} does not fill {self.max_lines} lines',
                    'severity': 'critical'
                })

        return violations

    def validate_line_breaking_rules(self, pages) -> List[Dict]:
        """Report wrap points where the forced break broke 禁則処理 (kinsoku) rules"""
        violations = []
        previous = None

        for page_num, page in enumerate(pages, 1):
            for row_num, record in enumerate(page, 1):
                is_continuation = (
                    previous is not None
                    and record.source_line_index is not None
                    and record.source_line_index == previous.source_line_index
                )
                if is_continuation:
                    head = record.text.lstrip()
                    if head and head[0] in KinsokuLineBreaker.LINE_START_FORBIDDEN:
                        violations.append({
                            'type': 'gyoutou_kinsoku',
                            'page': page_num,
                            'row': row_num,
                            'character': head[0],
                            'message': f'Character "{head[0]}" starts a wrapped line',
                            'severity': 'low'
                        })
                    if previous.text and previous.text[-1] in KinsokuLineBreaker.LINE_END_FORBIDDEN:
                        violations.append({
                            'type': 'gyoumatsu_kinsoku',
                            'page': page_num,
                            'row': row_num,
                            'character': previous.text[-1],
                            'message': f'Character "{previous.text[-1]}" ends the line before a wrap',
                            'severity': 'low'
                        })
                previous = record

        return violations

    def run_complete_validation(self, pages) -> Dict:
        """Run all validation checks and return a report"""
        all_violations = []

        all_violations.extend(self.validate_page_capacity(pages))
        all_violations.extend(self.validate_line_lengths(pages))
        all_violations.extend(self.validate_line_breaking_rules(pages))

        critical = [v for v in all_violations if v.get('severity') == 'critical']
        high = [v for v in all_violations if v.get('severity') == 'high']
        medium = [v for v in all_violations if v.get('severity') == 'medium']
        low = [v for v in all_violations if v.get('severity') == 'low']

        return {
            'status': 'non_compliant' if critical or high else 'compliant',
            'total_violations': len(all_violations),
            'critical': critical,
            'high': high,
            'medium': medium,
            'low': low,
            'all_violations': all_violations,
            'compliance_score': max(0, 100 - len(all_violations) * 2)
        }


class DaihonDocumentBuilder:
    """DOCX document builder for vertical script pages"""

    def __init__(self, font_name='Noto Serif JP', page_format=None):
        self.doc = Document()
        self.font_name = font_name
        self.page_format = page_format or PageSizeSelector.default_format()
        self.formatter = DaihonPageFormatter(self.page_format)
        self.pages = []

        self.setup_page_layout()

    def setup_page_layout(self):
        """Setup page layout with proper dimensions and margins"""
        section = self.doc.sections[0]
        configure_vertical_section(section, self.page_format)
        add_page_number_field(section, self.font_name)

    def create_daihon_document(self, text):
        """Format the script text into pages held by the builder"""
        self.pages = self.formatter.format_pages(text)
        return self.pages

    def generate_docx_content(self, progress_callback=None):
        """
        Write one DOCX page per formatted page.

        Every visual line becomes its own paragraph. The first line taken
        from each source line carries a ``line_<n>`` bookmark so the
        document can be searched back to the script.
        """
        if not self._validate_page_data(self.pages):
            raise ValueError("Page data validation failed - cannot generate DOCX")

        # Clear existing paragraphs
        while len(self.doc.paragraphs) > 0:
            p = self.doc.paragraphs[0]
            p._element.getparent().remove(p._element)

        character_size = self.page_format.get('character_size', 7)
        font_size_points = max(8, min(14, character_size * 1.2))

        bookmarked = set()
        for page_index, page in enumerate(self.pages):
            for row_index, record in enumerate(page):
                paragraph = self.doc.add_paragraph()
                configure_line_paragraph(
                    paragraph, record.text, self.font_name, font_size_points, is_scene=record.is_scene
                )
                if page_index > 0 and row_index == 0:
                    paragraph.paragraph_format.page_break_before = True

                index = record.source_line_index
                if index is not None and index not in bookmarked:
                    add_bookmark(paragraph, len(bookmarked), f'line_{index}')
                    bookmarked.add(index)

            if progress_callback:
                progress_callback(page_index + 1, len(self.pages))

    def export_pages_json(self, output_path=None):
        """Export the formatted pages as JSON"""
        metadata = []
        for page_num, page in enumerate(self.pages, 1):
            metadata.append({
                'page_num': page_num,
                'lines': [record.to_dict() for record in page]
            })

        json_str = json.dumps(metadata, ensure_ascii=False, indent=2)
        if output_path:
            with open(output_path, 'w', encoding='utf-8') as f:
                f.write(json_str)
        return json_str

    def save(self, output_path):
        self.doc.save(output_path)

    def _validate_page_data(self, pages):
        """Structural check before anything is written"""
        if not pages:
            return False

        report = ScriptPageValidator(self.page_format).run_complete_validation(pages)
        for violation in report['critical']:
            logging.error(violation['message'])
        return not report['critical']


def render_page_preview(page, page_number: int) -> Panel:
    """Terminal preview of one page, scene lines highlighted"""
    body = Text()
    for row, record in enumerate(page):
        if row:
            body.append('\n')
        body.append(record.text, style='bold magenta' if record.is_scene else None)
    return Panel(body, title=f"Page {page_number}", expand=False)


def read_script_file(input_path) -> str:
    """
    Read a script file with encoding detection.

    Line endings are normalized to ``\\n``; surrounding blank lines are
    kept since they are part of the page layout.
    """
    with open(input_path, 'rb') as f:
        raw_data = f.read()

    encoding_result = chardet.detect(raw_data)
    detected_encoding = encoding_result['encoding'] if (encoding_result['confidence'] or 0) > 0.7 else 'utf-8'
    try:
        text = raw_data.decode(detected_encoding)
    except (UnicodeDecodeError, LookupError):
        logging.warning(f"Could not decode as {detected_encoding}, falling back to UTF-8")
        text = raw_data.decode('utf-8', errors='ignore')

    text = text.lstrip('\ufeff')
    return text.replace('\r\n', '\n').replace('\r', '\n')


def _display_validation_report(console, report: Dict):
    """Display validation report in formatted tables"""
    summary_table = Table(title="Validation Summary")
    summary_table.add_column("Metric", style="cyan")
    summary_table.add_column("Value", style="green")

    summary_table.add_row("Total Violations", str(report['total_violations']))
    summary_table.add_row("Critical", f"[red]{len(report['critical'])}[/red]")
    summary_table.add_row("High", f"[orange1]{len(report['high'])}[/orange1]")
    summary_table.add_row("Medium", f"[yellow]{len(report['medium'])}[/yellow]")
    summary_table.add_row("Low", f"[green]{len(report['low'])}[/green]")
    summary_table.add_row("Compliance Score", f"{report['compliance_score']}/100")

    console.print(summary_table)

    if report['critical'] or report['low']:
        violations_table = Table(title="Violations")
        violations_table.add_column("Type", style="cyan")
        violations_table.add_column("Location", style="yellow")
        violations_table.add_column("Message", style="white")

        for violation in report['critical'] + report['low']:
            location = f"Page {violation.get('page', 'N/A')}"
            if 'row' in violation:
                location += f", Line {violation['row']}"
            colour = 'red' if violation['severity'] == 'critical' else 'green'
            violations_table.add_row(
                f"[{colour}]{violation['type']}[/{colour}]",
                location,
                violation['message']
            )

        console.print(violations_table)


def _display_outline(console, outline):
    table = Table(title="Scene Outline")
    table.add_column("Line", style="cyan", justify="right")
    table.add_column("Kind", style="magenta")
    table.add_column("Heading", style="white")

    for entry in outline:
        table.add_row(str(entry.line_index + 1), entry.kind, entry.display_text)

    console.print(table)


def main():
    """Command line entry point"""
    parser = argparse.ArgumentParser(description="Japanese vertical script (daihon) DOCX formatter")
    parser.add_argument("input", nargs="?", help="Input text file")
    parser.add_argument("-o", "--output", help="Output DOCX file")
    parser.add_argument("--json", help="Export formatted pages as JSON to file")
    parser.add_argument("--format", default=PageSizeSelector.DEFAULT_FORMAT,
                        help="Page format (b5, a4, a5 or custom)")
    parser.add_argument("--outline", action="store_true", help="Print the scene outline")
    parser.add_argument("--preview", action="store_true", help="Print a preview of every page")
    parser.add_argument("--skip-verification", action="store_true", help="Skip page validation")
    parser.add_argument("--verification-report", help="Save validation report to file")
    args = parser.parse_args()

    console = Console()

    console.print("[bold yellow]Daihon Tategaki Formatter[/bold yellow]")
    console.print("[green]Vertical script pages with kinsoku line breaking and scene numbering[/green]")
    console.print()

    if not args.input:
        console.print("[bold red]No input file specified.[/bold red]")
        sys.exit(1)

    input_path = Path(args.input)
    if not input_path.exists():
        console.print(f"[bold red]Error: Input file '{input_path}' not found.[/bold red]")
        sys.exit(1)

    try:
        text = read_script_file(input_path)
    except OSError as e:
        console.print(f"[bold red]Error reading file: {e}[/bold red]")
        sys.exit(1)

    if args.format.lower() == "custom":
        page_format = PageSizeSelector(console=console).select_page_size()
    else:
        page_format = PageSizeSelector.get_format(args.format)
        if page_format is None:
            console.print(f"[bold red]Error: Unknown page format '{args.format}'.[/bold red]")
            sys.exit(1)

    builder = DaihonDocumentBuilder(page_format=page_format)

    outline = build_scene_outline(text)
    console.print("[bold cyan]Script Analysis:[/bold cyan]")
    console.print(f"  [bold]Lines:[/bold] {len(split_raw_lines(text))}")
    console.print(f"  [bold]Scene headings:[/bold] {len(outline)}")
    console.print(f"  [bold]Characters:[/bold] ~{len(text):,}")

    if args.outline:
        _display_outline(console, outline)

    with Progress(
        TextColumn("[progress.description]{task.description}"),
        BarColumn(),
        TaskProgressColumn(),
        TimeRemainingColumn(),
        console=console,
    ) as progress:

        task = progress.add_task("Formatting script...", total=100)

        pages = builder.create_daihon_document(text)
        progress.update(task, advance=30, description="Preparing DOCX generation...")

        progress_per_page = 50 / max(1, len(pages))

        def progress_callback(current_page, total_pages):
            progress.update(task, advance=progress_per_page,
                            description=f"Generating DOCX... Page {current_page}/{total_pages}")

        try:
            builder.generate_docx_content(progress_callback=progress_callback)
        except ValueError as e:
            logging.critical(f"Failed to generate document: {e}")
            sys.exit(1)

        output_path = Path(args.output) if args.output else \
            input_path.with_name(f"{input_path.stem}_{page_format['name']}.docx")
        builder.save(output_path)

        progress.update(task, advance=20, description="Document saved")

    if args.preview:
        for page_num, page in enumerate(pages, 1):
            console.print(render_page_preview(page, page_num))

    if not args.skip_verification:
        report = ScriptPageValidator(page_format).run_complete_validation(pages)
        _display_validation_report(console, report)

        if args.verification_report:
            with open(args.verification_report, 'w', encoding='utf-8') as f:
                json.dump(report, f, ensure_ascii=False, indent=2)
            console.print(f"[bold green]✓ Validation report saved:[/bold green] {args.verification_report}")

    console.print()
    console.print(f"[bold green]✓ DOCX file saved:[/bold green] {output_path}")
    console.print(f"[bold green]✓ Pages generated:[/bold green] {len(pages)}")

    if args.json:
        builder.export_pages_json(args.json)
        console.print(f"[bold green]✓ Pages JSON saved:[/bold green] {args.json}")


if __name__ == "__main__":
    main()
