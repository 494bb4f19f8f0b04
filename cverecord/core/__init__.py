"""
Core functionality for the CVE Record codec.

This package provides the codecs for timestamps, constant tags, version
entries and field tables, the record variant resolver and the corpus
processor.
"""
