"""snapraid-web: browse the history of SnapRAID maintenance runs.

Reads the per-run JSON snapshots written by the SnapRAID runner and serves
an overview of all runs and a per-run detail view.
"""

__version__ = "0.1.0"
