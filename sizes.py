"""
Interactive page size selector for the Daihon Tategaki Formatter
Script paper formats with pre-computed line grids and fast lookups
"""
from rich.console import Console
from rich.prompt import Prompt
from rich.table import Table
from rich import box

# Spacing between vertical lines relative to the character cell
LINE_PITCH = 1.2


class PageSizeSelector:
    """Page size selector for script paper with pre-computed grids"""

    # 'lines' is the number of vertical lines per page, 'chars' the number of
    # character cells per line.
    PAGE_FORMATS = {
        'b5': {
            'name': 'B5',
            'width': 182,
            'height': 257,
            'grid': {'lines': 17, 'chars': 29},
            'margins': {'top': 20, 'bottom': 20, 'inner': 15, 'outer': 15},
            'description': 'Standard rehearsal script (daihon) paper',
            'character_size': 7,
            'scene_line_weight': 1.8
        },
        'a4': {
            'name': 'A4',
            'width': 210,
            'height': 297,
            'grid': {'lines': 17, 'chars': 30},
            'margins': {'top': 25, 'bottom': 25, 'inner': 20, 'outer': 20},
            'description': 'Office paper script',
            'character_size': 8,
            'scene_line_weight': 1.8
        },
        'a5': {
            'name': 'A5',
            'width': 148,
            'height': 210,
            'grid': {'lines': 14, 'chars': 25},
            'margins': {'top': 15, 'bottom': 15, 'inner': 12, 'outer': 12},
            'description': 'Pocket script for stage rehearsal',
            'character_size': 7,
            'scene_line_weight': 1.8
        },
        'custom': {
            'name': 'Custom',
            'width': 0,
            'height': 0,
            'grid': {'lines': 0, 'chars': 0},
            'margins': {'top': 0, 'bottom': 0, 'inner': 0, 'outer': 0},
            'description': 'Custom user-defined format',
            'character_size': 0,
            'scene_line_weight': 1.8
        }
    }

    DEFAULT_FORMAT = 'b5'

    # Display order for the selection table
    COMMON_SIZES = [
        PAGE_FORMATS['b5'],
        PAGE_FORMATS['a4'],
        PAGE_FORMATS['a5'],
        PAGE_FORMATS['custom'],
    ]

    # The custom entry is only a menu placeholder, its grid is built by select_page_size
    _FORMAT_LOOKUP = {name.lower(): fmt for name, fmt in PAGE_FORMATS.items() if name != 'custom'}

    def __init__(self, console=None):
        self.console = console or Console()

    @classmethod
    def get_format(cls, format_name):
        """Case-insensitive format lookup, None when unknown"""
        fmt = cls._FORMAT_LOOKUP.get(format_name.lower())
        if fmt is None:
            return None
        # Callers may adjust the grid, never hand out the shared table entry
        return {**fmt, 'grid': dict(fmt['grid']), 'margins': dict(fmt['margins'])}

    @classmethod
    def default_format(cls):
        return cls.get_format(cls.DEFAULT_FORMAT)

    @staticmethod
    def calculate_grid_dimensions(page_width, page_height, margins, character_size=None):
        """
        Derive the line grid for a page in vertical writing.

        Characters run down the page height, lines advance across the width.
        """
        text_width = page_width - margins['inner'] - margins['outer']
        text_height = page_height - margins['top'] - margins['bottom']

        if character_size is None:
            character_size = 6 if text_height < 150 else 7 if text_height < 220 else 8

        chars = max(15, int(text_height / character_size))
        lines = max(10, int(text_width / (character_size * LINE_PITCH)))

        return {
            'lines': lines,
            'chars': chars,
            'characters_per_page': lines * chars,
            'character_size': character_size
        }

    def show_sizes(self):
        """Print the available script formats"""
        table = Table(title="Script Paper Formats", box=box.ROUNDED, expand=False)

        table.add_column("#", style="cyan", width=3, justify="right")
        table.add_column("Format", style="green", width=10)
        table.add_column("Size", style="blue", width=22, justify="center")
        table.add_column("Grid", style="magenta", width=18, justify="center")
        table.add_column("Description", style="yellow")

        for i, size in enumerate(self.COMMON_SIZES, 1):
            if size["name"] == "Custom":
                size_info = "Custom"
                grid_info = "Custom"
            else:
                width_in = size['width'] * 0.0393701
                height_in = size['height'] * 0.0393701
                size_info = f"{size['width']}×{size['height']}mm ({width_in:.1f}\"×{height_in:.1f}\")"
                grid_info = f"{size['grid']['lines']} lines × {size['grid']['chars']}"

            table.add_row(
                str(i),
                size["name"],
                size_info,
                grid_info,
                size["description"]
            )

        self.console.print(table)

    def select_page_size(self):
        """Ask for a format, building a custom one from prompted dimensions"""
        self.show_sizes()
        self.console.print("\n[bold cyan]Select a page format:[/bold cyan]")

        valid_choices = [str(i) for i in range(1, len(self.COMMON_SIZES) + 1)]

        choice = Prompt.ask(
            "Enter selection",
            choices=valid_choices,
            default="1",
            console=self.console
        )

        selected = self.COMMON_SIZES[int(choice) - 1]

        if selected["name"] == "Custom":
            self.console.print("\n[bold cyan]Custom Page Dimensions:[/bold cyan]")

            width = int(Prompt.ask("Width (mm)", default="182", console=self.console))
            height = int(Prompt.ask("Height (mm)", default="257", console=self.console))

            self.console.print("\n[bold cyan]Margins:[/bold cyan]")
            top = int(Prompt.ask("Top margin (mm)", default="20", console=self.console))
            bottom = int(Prompt.ask("Bottom margin (mm)", default="20", console=self.console))
            inner = int(Prompt.ask("Inner margin (mm)", default="15", console=self.console))
            outer = int(Prompt.ask("Outer margin (mm)", default="15", console=self.console))

            margins = {'top': top, 'bottom': bottom, 'inner': inner, 'outer': outer}
            grid = self.calculate_grid_dimensions(width, height, margins)

            custom_size = {
                "name": "Custom",
                "width": width,
                "height": height,
                "grid": {'lines': grid['lines'], 'chars': grid['chars']},
                "margins": margins,
                "description": f"Custom {width}×{height}mm format",
                "character_size": grid['character_size'],
                "scene_line_weight": selected['scene_line_weight']
            }

            self.console.print(f"\n[bold green]✓ Custom format created:[/bold green] {width}×{height}mm")
            self.console.print(f"[bold green]✓ Grid:[/bold green] {grid['lines']} lines × {grid['chars']} characters")

            return custom_size

        self.console.print(f"\n[bold green]✓ Selected:[/bold green] {selected['name']} ({selected['width']}×{selected['height']}mm)")
        self.console.print(f"[bold green]✓ Grid:[/bold green] {selected['grid']['lines']} lines × {selected['grid']['chars']} characters")

        return self.get_format(selected['name'])
