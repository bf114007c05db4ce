"""
deckbuilder tests.

Test Categories:
    unit/: single-module tests for cards, options, deck building and config
    property/: hypothesis tests for counting and ordering invariants
"""
