"""
Core of tree-parser: expression tree, parser, evaluator, renderers,
errors and configuration.
"""
