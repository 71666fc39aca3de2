"""
Cemetery plot inventory.

Section- and area-level plot counts per period, the summaries derived from
them, and the console / CSV / PDF / e-mail reports built on top.
"""
