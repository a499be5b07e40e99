"""Items app package.

Items are the things users lend to each other. Each item has an owner and
an availability switch the owner controls.
"""
