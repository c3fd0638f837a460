"""
Filesystem tools for fsquery.

This module contains the node probe, the only component that talks to the
operating system.
"""
