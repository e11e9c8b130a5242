"""
Infrastructure adapters: element tree, error logs, logging.
"""
