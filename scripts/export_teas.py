import sys
import os
from rich.console import Console
from rich.table import Table

# Ensure src is in python path
sys.path.append(os.path.join(os.path.dirname(__file__), "..", "src"))

from tea_timer.core.duration import format_steep_time
from tea_timer.core.models import default_catalog, dump_catalog

console = Console()

def main(path="teas.json"):
    """Write the built-in teas to a JSON file usable with --file."""
    teas = default_catalog()

    table = Table(title="Built-in Teas")
    table.add_column("ID", style="cyan")
    table.add_column("Name", style="green")
    table.add_column("Type")
    table.add_column("Steep Time")
    table.add_column("Temp")
    for t in teas:
        table.add_row(str(t.id), t.name, t.category, format_steep_time(t.steep_time), f"{t.temperature}°")
    console.print(table)

    with open(path, "w", encoding="utf-8") as f:
        f.write(dump_catalog(teas))
    console.print(f"\n[bold green]Saved {len(teas)} teas to {path}[/bold green]")

if __name__ == "__main__":
    main(*sys.argv[1:2])
