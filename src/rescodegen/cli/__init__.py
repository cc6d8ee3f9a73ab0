"""rescodegen command line interface."""
