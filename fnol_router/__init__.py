"""FNOL claims router: field extraction, completeness check and queue routing."""
