"""
Command-line interface for the trading game.

Handles argument parsing, builds the game configuration, and either
launches the dashboard or runs a headless session that prints a summary.
"""

import argparse
import asyncio
import logging
import sys

from trader.core.config import PRESETS, GameConfig, get_preset
from trader.simulation.engine import SimulationEngine
from trader.simulation.models import GameSnapshot


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the argument parser."""
    parser = argparse.ArgumentParser(
        description="Single-player stock trading game",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    # Play (default: game ends when the stock collapses)
    %(prog)s

    # Prices never end the game, wider walk
    %(prog)s --mode endless

    # Reproducible headless run
    %(prog)s --headless --ticks 500 --seed 42
        """,
    )
    parser.add_argument(
        "--mode",
        "-m",
        choices=sorted(PRESETS),
        default="collapse",
        help="Insolvency policy preset (default: collapse)",
    )
    parser.add_argument(
        "--cash", "-c", type=float, default=None, help="Starting cash (default: 1000)"
    )
    parser.add_argument(
        "--seed", type=int, default=None, help="Random seed (default: fresh every run)"
    )
    parser.add_argument(
        "--stddev", type=float, default=None, help="Std deviation of the per-tick price step"
    )
    parser.add_argument(
        "--interval-ms",
        type=int,
        default=None,
        help="Milliseconds between ticks (default: 200)",
    )
    parser.add_argument(
        "--headless",
        action="store_true",
        help="Run without the dashboard and print a summary",
    )
    parser.add_argument(
        "--ticks",
        "-t",
        type=int,
        default=None,
        help="Stop a headless run after N ticks (default: until game over)",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: INFO)",
    )
    return parser


def build_config(args: argparse.Namespace) -> GameConfig:
    """Apply command-line overrides on top of the chosen preset."""
    return get_preset(args.mode).with_overrides(
        initial_cash=args.cash,
        seed=args.seed,
        stddev=args.stddev,
        tick_interval_ms=args.interval_ms,
    )


def print_summary(snapshot: GameSnapshot) -> None:
    """Print final session results."""
    price = snapshot.latest_price
    roi = snapshot.roi_per_minute

    print("\n" + "=" * 50)
    print("📊 SESSION RESULTS")
    print("=" * 50)
    if snapshot.is_over:
        print("💥 Stock collapsed - remaining shares sold for 0")
    print(f"⏱️  Duration:      {snapshot.elapsed_seconds:.1f}s ({snapshot.ticks} ticks)")
    print(f"📈 Last price:    {price:.2f}€" if price is not None else "📈 Last price:    —")
    print(f"💰 Cash:          {snapshot.cash:.2f}€")
    print(f"📦 Shares:        {snapshot.shares}")
    print(f"💼 Worth:         {snapshot.net_worth:.2f}€")
    print(f"💵 Total profit:  {snapshot.total_profit:+.2f}€")
    print(f"🚀 ROI / minute:  {roi:.2f}%" if roi is not None else "🚀 ROI / minute:  n/a")
    print("=" * 50 + "\n")


def run_headless(config: GameConfig, max_ticks: int | None = None) -> GameSnapshot:
    """
    Drive the engine on an asyncio timer without a UI.

    Args:
        config: Game configuration
        max_ticks: Stop after this many ticks (None = until game over)

    Returns:
        Final snapshot
    """
    if max_ticks is None and not config.enforce_insolvency:
        raise ValueError("An endless game needs --ticks in headless mode")
    if max_ticks is not None and max_ticks < 0:
        raise ValueError("--ticks must not be negative")

    engine = SimulationEngine(config)
    try:
        asyncio.run(engine.run(max_ticks=max_ticks))
    except KeyboardInterrupt:
        print("\n\n⚠️ Session interrupted by user")
    return engine.snapshot()


def main(argv: list[str] | None = None) -> None:
    parser = create_parser()
    args = parser.parse_args(argv)

    try:
        config = build_config(args)
    except ValueError as e:
        print(f"❌ Error: {e}")
        sys.exit(1)

    if args.headless:
        logging.basicConfig(
            level=getattr(logging, args.log_level),
            format='%(asctime)s [%(name)s] %(levelname)s: %(message)s',
        )
        try:
            snapshot = run_headless(config, max_ticks=args.ticks)
        except ValueError as e:
            print(f"❌ Error: {e}")
            sys.exit(1)
        print_summary(snapshot)
        return

    from trader.ui.dashboard import SuperTraderApp, configure_logging

    configure_logging(level=getattr(logging, args.log_level))
    app = SuperTraderApp(config)
    app.run()


if __name__ == "__main__":
    main()
