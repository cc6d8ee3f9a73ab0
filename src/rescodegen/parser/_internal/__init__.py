"""Parser internals. Import from rescodegen.parser instead."""
