"""
Chart Panel - Rolling price chart.

Uses Unicode block characters for reliable terminal rendering.
The x-axis is labelled in seconds ago, derived from the tick interval.
"""

from textual.widgets import Static

# Chart dimensions
CHART_HEIGHT = 12

# Unicode block characters for vertical bar chart (8 levels)
BLOCKS = " ▁▂▃▄▅▆▇█"

COLOR_UP = "#22cc66"
COLOR_DOWN = "#ff5555"
COLOR_FLAT = "#888888"


def format_seconds_ago(index: int, length: int, step_ms: int) -> str:
    """
    Label for the point at `index` in a window of `length` points.

    The newest point sits one tick before "now", so it reads -0s at 200ms
    steps and the oldest of 100 points reads -20s.
    """
    ticks_back = length - index
    return f"-{ticks_back * step_ms / 1000:.0f}s"


def format_price(value: float) -> str:
    return f"{value:.0f}€"


def change_percent(first: float, last: float) -> float:
    """Percent move from first to last, signed by direction even below zero."""
    if first == 0:
        return 0.0
    return (last - first) / abs(first) * 100


def build_chart(prices: list[float], height: int = CHART_HEIGHT) -> list[str]:
    """
    Build block-character rows, top to bottom, one column per price.

    Args:
        prices: Prices oldest to newest
        height: Number of rows

    Returns:
        List of plain text rows (no markup)
    """
    if not prices:
        return []

    min_price = min(prices)
    max_price = max(prices)
    price_range = max_price - min_price

    if price_range == 0:
        # Flat line - show middle
        normalized = [0.5] * len(prices)
    else:
        normalized = [(p - min_price) / price_range for p in prices]

    rows = []
    for row in range(height - 1, -1, -1):
        row_threshold = row / (height - 1) if height > 1 else 0
        next_threshold = (row + 1) / (height - 1) if height > 1 else 1
        chars = []
        for val in normalized:
            if val < row_threshold:
                chars.append(" ")
            elif row == height - 1 or val >= next_threshold:
                chars.append("█")
            else:
                # Partial block
                level = int((val - row_threshold) / (next_threshold - row_threshold) * 8)
                chars.append(BLOCKS[min(level + 1, 8)])
        rows.append("".join(chars))
    return rows


class ChartPanel(Static):
    """
    Price chart for the rolling history window.
    """

    DEFAULT_CSS = """
    ChartPanel {
        height: 1fr;
        background: #0a0a0a;
        border: solid #333333;
        padding: 1 2;
    }
    """

    def __init__(self, step_ms: int, **kwargs):
        super().__init__(**kwargs)
        self.step_ms = step_ms
        self._prices: list[float] = []

    def update_prices(self, prices: list[float]) -> None:
        """
        Redraw the chart.

        Args:
            prices: Rolling window, oldest first
        """
        self._prices = list(prices)
        self.update(self._render_chart())

    def _render_chart(self) -> str:
        if not self._prices:
            return "[dim]Waiting for the market to open...[/dim]"

        first, last = self._prices[0], self._prices[-1]
        if last > first:
            color, trend = COLOR_UP, "▲"
        elif last < first:
            color, trend = COLOR_DOWN, "▼"
        else:
            color, trend = COLOR_FLAT, "─"

        change_pct = change_percent(first, last)
        header = (
            f"[bold cyan]STOCK[/bold cyan]  "
            f"[bold]{format_price(last)}[/bold]  "
            f"[{color}]{trend} {change_pct:+.2f}%[/{color}]"
        )

        rows = build_chart(self._prices)
        max_label = format_price(max(self._prices))
        min_label = format_price(min(self._prices))
        lines = []
        for i, row in enumerate(rows):
            if i == 0:
                label = f" {max_label}"
            elif i == len(rows) - 1:
                label = f" {min_label}"
            else:
                label = ""
            lines.append(f"[{color}]{row}[/{color}][dim]{label}[/dim]")

        length = len(self._prices)
        oldest = format_seconds_ago(0, length, self.step_ms)
        newest = format_seconds_ago(length - 1, length, self.step_ms)
        padding = max(1, length - len(oldest) - len(newest))
        axis = f"[dim]{oldest}{' ' * padding}{newest}[/dim]"

        return header + "\n\n" + "\n".join(lines) + "\n" + axis
