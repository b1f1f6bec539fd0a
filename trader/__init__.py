"""
super-trader: a single-player stock trading game in the terminal.

Packages:
- core: configuration and the rolling price history
- simulation: price walk, portfolio, session clock and the tick engine
- ui: textual dashboard and command-line entry point
"""
