"""Plain-text listing of a cycle basis for terminal output."""
from __future__ import annotations

from cyclebasis.cycles.fundamental import CycleBasis


def format_report(basis: CycleBasis, label: str = "Fundamental cycles") -> str:
    """One line per cycle, closed by repeating its first node."""
    lines = [
        f"=== {label} ===",
        f"Cycles:            {len(basis):,}",
        f"Components:        {basis.components:,}",
        f"Tree nodes:        {len(basis.tree):,}",
    ]
    if basis.cycles:
        lines.append("")
        width = len(str(len(basis)))
        for i, cycle in enumerate(basis.cycles, 1):
            walk = " - ".join(str(n) for n in (*cycle, cycle[0]))
            lines.append(f"  {i:>{width}}. [{len(cycle)}] {walk}")
    return "\n".join(lines)
