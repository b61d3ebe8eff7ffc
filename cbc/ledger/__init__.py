"""Partnership ledger.

This package holds the bookkeeping side of the tracker:
- partner contributions (capital put into the fund)
- period snapshots (reported account value at a point in time)

Each recorded period charges a monthly slice of the annual management fee and
splits the remaining profit/loss across partners by ownership share.
"""
