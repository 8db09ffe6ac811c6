"""
services/ — extraction engine and export helpers.

vendor_summary.extract() is the entry point; the other modules are the
field extractors, section locator, standards summarizer and the xlsx /
forwarding helpers it feeds.
"""
