"""
Terminal UI for the trading game.

Dark-themed dashboard showing:
- Rolling price chart
- Buy / Sell controls
- Account stats (worth, profit, ROI)
"""
