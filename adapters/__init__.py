"""
Framework adapters for the notifier core.
"""
